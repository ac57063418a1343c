"""Diffuse, specular and transmission coefficients of a surface."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

Color = tuple[float, float, float]

KD_INDEX = 0
KS_INDEX = 1
KT_INDEX = 2

MATERIALS: Mapping[str, Color] = MappingProxyType(
    {
        "muy_difuso": (0.9, 0.0, 0.0),
        "difuso": (0.55, 0.0, 0.0),
        "poco_difuso": (0.3, 0.0, 0.0),
        "cristal": (0.0, 0.1, 0.8),
        "refractante": (0.0, 0.0, 0.9),
        "espejo": (0.0, 0.9, 0.0),
        "plastico": (0.7, 0.2, 0.0),
    }
)

DEFAULT_MATERIAL = "difuso"
WHITE: Color = (1.0, 1.0, 1.0)
_NO_COEFFICIENTS: Color = (0.0, 0.0, 0.0)


def _triple(values: Iterable[float], what: str) -> Color:
    result = tuple(float(value) for value in values)
    if len(result) != 3:
        raise ValueError(f"{what} needs exactly three components")
    return result  # type: ignore[return-value]


def _scaled(color: Color, factor: float) -> Color:
    return (color[0] * factor, color[1] * factor, color[2] * factor)


def _product(color: Color, other: Color) -> Color:
    return (color[0] * other[0], color[1] * other[1], color[2] * other[2])


def _fmt(values: Iterable[float]) -> str:
    return "(" + ", ".join(f"{value:g}" for value in values) + ")"


@dataclass(frozen=True)
class BSDF:
    """Diffuse (kd), specular (ks) and transmission (kt) coefficients as RGB triples.

    ``raw_coefficients`` holds the colourless kd, ks and kt factors of the
    material the coefficients came from, or ``None`` when they were given
    explicitly.
    """

    kd: Color = _scaled(WHITE, MATERIALS[DEFAULT_MATERIAL][KD_INDEX])
    ks: Color = _scaled(WHITE, MATERIALS[DEFAULT_MATERIAL][KS_INDEX])
    kt: Color = _scaled(WHITE, MATERIALS[DEFAULT_MATERIAL][KT_INDEX])
    raw_coefficients: Color | None = MATERIALS[DEFAULT_MATERIAL]

    def __post_init__(self) -> None:
        object.__setattr__(self, "kd", _triple(self.kd, "kd"))
        object.__setattr__(self, "ks", _triple(self.ks, "ks"))
        object.__setattr__(self, "kt", _triple(self.kt, "kt"))
        if self.raw_coefficients is not None:
            object.__setattr__(
                self, "raw_coefficients", _triple(self.raw_coefficients, "raw coefficients")
            )

    @classmethod
    def from_material(cls, color: Iterable[float], material: str) -> BSDF:
        """Coefficients of a named material tinted by ``color``.

        A name that is not a known material gives all-zero coefficients.
        """
        tint = _triple(color, "a colour")
        coefficients = MATERIALS.get(material, _NO_COEFFICIENTS)
        return cls(
            kd=_scaled(tint, coefficients[KD_INDEX]),
            ks=_scaled(tint, coefficients[KS_INDEX]),
            kt=_scaled(tint, coefficients[KT_INDEX]),
            raw_coefficients=coefficients,
        )

    @classmethod
    def from_coefficients(
        cls,
        color: Iterable[float],
        kd: Iterable[float],
        ks: Iterable[float],
        kt: Iterable[float],
    ) -> BSDF:
        """Explicit per-channel coefficients, each multiplied component-wise by ``color``."""
        tint = _triple(color, "a colour")
        return cls(
            kd=_product(tint, _triple(kd, "kd")),
            ks=_product(tint, _triple(ks, "ks")),
            kt=_product(tint, _triple(kt, "kt")),
            raw_coefficients=None,
        )

    def __str__(self) -> str:
        return (
            f"[ kd= {_fmt(self.kd)}\n"
            f"  ks= {_fmt(self.ks)}\n"
            f"  kt= {_fmt(self.kt)} ]\n"
        )
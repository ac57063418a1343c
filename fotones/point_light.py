"""Point lights."""

from __future__ import annotations

from dataclasses import dataclass


def _triple(values, what: str) -> tuple[float, float, float]:
    result = tuple(float(value) for value in values)
    if len(result) != 3:
        raise ValueError(f"a light {what} needs exactly three components")
    return result  # type: ignore[return-value]


@dataclass(frozen=True)
class PointLight:
    """A point in space that emits light with a given RGB power."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    power: tuple[float, float, float] = (1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _triple(self.position, "position"))
        object.__setattr__(self, "power", _triple(self.power, "power"))
"""Photons stored in a photon map."""

from __future__ import annotations

from dataclasses import dataclass

from .direction import Direction


def _triple(values, what: str) -> tuple[float, float, float]:
    result = tuple(float(value) for value in values)
    if len(result) != 3:
        raise ValueError(f"a photon {what} needs exactly three components")
    return result  # type: ignore[return-value]


def _fmt(values) -> str:
    return "(" + ", ".join(f"{value:g}" for value in values) + ")"


@dataclass(frozen=True)
class Photon:
    """A photon: where it landed, the direction it came from and its flux."""

    position: tuple[float, float, float]
    incident: Direction
    flux: tuple[float, float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _triple(self.position, "position"))
        object.__setattr__(self, "flux", _triple(self.flux, "flux"))

    def coordinate(self, index: int) -> float:
        """The position along axis ``index`` (0, 1 or 2)."""
        if not 0 <= index <= 2:
            raise IndexError(f"photon coordinate index out of range: {index}")
        return self.position[index]

    def __str__(self) -> str:
        return (
            f"Photon - Coord = {_fmt(self.position)}, "
            f"Incident = {_fmt(self.incident)}, Flux = {_fmt(self.flux)}\n"
        )
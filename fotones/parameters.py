"""Settings for one photon-mapping render."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum


class NeighbourMode(IntEnum):
    """How the photons near a point are gathered."""

    RADIUS = 0
    PERCENTAGE = 1
    COUNT = 2
    RADIUS_COUNT = 3


_NON_NEGATIVE = (
    "width",
    "height",
    "rays_per_pixel",
    "global_neighbour_count",
    "caustic_neighbour_count",
)


@dataclass(frozen=True)
class RenderParameters:
    """Every parameter of a photon-mapping run, in one object."""

    width: int
    height: int
    rays_per_pixel: int
    random_walks: int
    global_neighbour_mode: NeighbourMode
    global_neighbour_count: int
    global_neighbour_radius: float
    caustic_neighbour_mode: NeighbourMode
    caustic_neighbour_count: int
    caustic_neighbour_radius: float
    nee: bool
    indirect_light: bool
    print_progress: bool

    def __post_init__(self) -> None:
        for name in _NON_NEGATIVE:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        object.__setattr__(
            self, "global_neighbour_mode", NeighbourMode(self.global_neighbour_mode)
        )
        object.__setattr__(
            self, "caustic_neighbour_mode", NeighbourMode(self.caustic_neighbour_mode)
        )

    def as_dict(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
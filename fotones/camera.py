"""A pinhole camera that sends rays through the pixels of its projection plane."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from .direction import Direction, modulus


def _triple(values: Iterable[float], what: str) -> tuple[float, float, float]:
    result = tuple(float(value) for value in values)
    if len(result) != 3:
        raise ValueError(f"the camera {what} needs exactly three components")
    return result  # type: ignore[return-value]


def _direction(values: Direction | Iterable[float], what: str) -> Direction:
    if isinstance(values, Direction):
        return values
    return Direction(*_triple(values, what))


@dataclass(frozen=True)
class Camera:
    """A camera at ``origin`` looking along ``front``, with ``up`` and ``left`` spanning the image.

    Directions returned by the pixel methods are in camera coordinates, from
    the camera's own origin.
    """

    origin: tuple[float, float, float] = (0.0, 0.0, -3.5)
    front: Direction = Direction(0.0, 0.0, 3.0)
    up: Direction = Direction(0.0, 1.0, 0.0)
    left: Direction = Direction(-1.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", _triple(self.origin, "origin"))
        object.__setattr__(self, "front", _direction(self.front, "front direction"))
        object.__setattr__(self, "up", _direction(self.up, "up direction"))
        object.__setattr__(self, "left", _direction(self.left, "left direction"))

    def pixel_width(self, pixel_count: int) -> float:
        """Width of one pixel when the image is ``pixel_count`` pixels wide."""
        return modulus(self.left) * 2 / pixel_count

    def pixel_height(self, pixel_count: int) -> float:
        """Height of one pixel when the image is ``pixel_count`` pixels high."""
        return modulus(self.up) * 2 / pixel_count

    def corner_direction(
        self, column: int, pixel_width: float, row: int, pixel_height: float
    ) -> Direction:
        """Direction towards the top-left corner of pixel (``column``, ``row``)."""
        return Direction(
            modulus(self.front),
            modulus(self.up) - row * pixel_height,
            -modulus(self.left) + column * pixel_width,
        )

    def center_direction(
        self, column: int, pixel_width: float, row: int, pixel_height: float
    ) -> Direction:
        """Direction towards the centre of pixel (``column``, ``row``)."""
        corner = self.corner_direction(column, pixel_width, row, pixel_height)
        return corner + Direction(0.0, -pixel_height / 2, pixel_width / 2)

    def random_direction(
        self,
        column: int,
        pixel_width: float,
        row: int,
        pixel_height: float,
        rng: random.Random | None = None,
    ) -> Direction:
        """Direction towards a uniformly random point offset from the pixel corner."""
        source = rng if rng is not None else random
        corner = self.corner_direction(column, pixel_width, row, pixel_height)
        width_offset = source.random() * pixel_width
        height_offset = source.random() * pixel_height
        return corner + Direction(0.0, width_offset, -height_offset)
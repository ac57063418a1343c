"""Directions (free vectors) in three-dimensional space."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from numbers import Real

from .matrix import Matrix


@dataclass(frozen=True)
class Direction:
    """A direction in space with components x, y and z."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Direction) -> Direction:
        if not isinstance(other, Direction):
            return NotImplemented
        return Direction(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> Direction:
        return Direction(-self.x, -self.y, -self.z)

    def __sub__(self, other: Direction) -> Direction:
        if not isinstance(other, Direction):
            return NotImplemented
        return Direction(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Direction:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Direction(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Direction:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("cannot divide a direction by zero")
        return Direction(self.x / scalar, self.y / scalar, self.z / scalar)

    def __abs__(self) -> Direction:
        """The direction with the absolute value of every component."""
        return Direction(abs(self.x), abs(self.y), abs(self.z))

    def modulus(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Direction:
        length = self.modulus()
        if length == 0:
            raise ValueError("cannot normalise a direction of length zero")
        return self / length

    def cross(self, other: Direction) -> Direction:
        return Direction(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def homogeneous(self) -> Matrix:
        """Homogeneous coordinates as a 4x1 matrix, with 0 as the last entry."""
        return Matrix([[self.x], [self.y], [self.z], [0.0]])


def modulus(direction: Direction) -> float:
    return direction.modulus()


def normalize(direction: Direction) -> Direction:
    return direction.normalized()


def cross(first: Direction, second: Direction) -> Direction:
    return first.cross(second)
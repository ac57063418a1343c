"""Bases made of three vectors, and orthonormal bases around a normal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .direction import Direction, cross, normalize
from .matrix import _aligned_rows


class Basis:
    """Three vectors of three components each; the identity basis by default."""

    __slots__ = ("_vectors",)

    def __init__(self, vectors: Iterable[Iterable[float]] | None = None) -> None:
        if vectors is None:
            vectors = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
        rows = tuple(tuple(float(value) for value in row) for row in vectors)
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("a basis is made of exactly three vectors of three components")
        self._vectors = rows

    @classmethod
    def from_directions(cls, first: Direction, second: Direction, third: Direction) -> Basis:
        return cls([tuple(first), tuple(second), tuple(third)])

    @property
    def vectors(self) -> tuple[tuple[float, ...], ...]:
        return self._vectors

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self._vectors[index]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self._vectors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Basis):
            return NotImplemented
        return self._vectors == other._vectors

    def __hash__(self) -> int:
        return hash(self._vectors)

    def __repr__(self) -> str:
        return f"Basis({[list(row) for row in self._vectors]!r})"

    def __str__(self) -> str:
        rows: Sequence[Sequence[float]] = self._vectors
        return _aligned_rows(rows, "( ", ")")


def orthonormal_basis(normal: Direction) -> tuple[Direction, Direction]:
    """The tangent and bitangent that complete an orthonormal basis with ``normal``."""
    if abs(normal.x) > abs(normal.z):
        tangent = Direction(-normal.y, normal.x, 0.0)
    else:
        tangent = Direction(0.0, -normal.z, normal.y)
    tangent = normalize(tangent)
    bitangent = cross(normal, tangent)
    return tangent, bitangent
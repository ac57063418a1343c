"""A static k-d tree for nearest-neighbour queries."""

from __future__ import annotations

import heapq
import itertools
import math
from collections.abc import Callable, Iterable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

AxisPosition = Callable[[T, int], float]
Norm = Callable[[Sequence[float]], float]


def euclidean_norm(vector: Sequence[float]) -> float:
    """The Euclidean length of ``vector``."""
    return math.sqrt(sum(component * component for component in vector))


def _random_access(element, index: int) -> float:
    return element[index]


class KDTree(Generic[T]):
    """A balanced k-d tree over a fixed collection of elements.

    ``axis_position(element, i)`` gives the coordinate of ``element`` along
    axis ``i``; by default the element is indexed directly.
    """

    def __init__(
        self,
        elements: Iterable[T],
        dimensions: int,
        axis_position: AxisPosition | None = None,
    ) -> None:
        if dimensions < 1:
            raise ValueError("a k-d tree needs at least one dimension")
        self._dimensions = dimensions
        self._axis_position = axis_position if axis_position is not None else _random_access
        self._elements: list[T] = list(elements)
        self._split_axes: list[int] = [0] * len(self._elements)
        self._build(0, len(self._elements))

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def elements(self) -> tuple[T, ...]:
        return tuple(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def _position(self, element: T) -> list[float]:
        return [self._axis_position(element, axis) for axis in range(self._dimensions)]

    def _build(self, left: int, right: int) -> None:
        if right - left <= 1:
            return
        # The bounding box is recomputed at every level for a better balance.
        positions = [self._position(element) for element in self._elements[left:right]]
        spans = [max(column) - min(column) for column in zip(*positions)]
        axis = max(range(self._dimensions), key=spans.__getitem__)

        median = (left + right) // 2
        self._elements[left:right] = sorted(
            self._elements[left:right],
            key=lambda element: self._axis_position(element, axis),
        )
        self._split_axes[median] = axis
        self._build(left, median)
        self._build(median + 1, right)

    def nearest_neighbors(
        self,
        point: Sequence[float],
        number: int | None = 1,
        max_distance: float = math.inf,
        norm: Norm = euclidean_norm,
    ) -> list[T]:
        """Up to ``number`` elements closer to ``point`` than ``max_distance``.

        ``number`` of ``None`` means no limit on the count. The result is not
        sorted by distance.
        """
        if number is not None and number < 1:
            raise ValueError("the number of neighbours must be at least one")
        target = tuple(float(value) for value in point)
        if len(target) != self._dimensions:
            raise ValueError(
                f"expected a point with {self._dimensions} coordinates, got {len(target)}"
            )

        found: list[tuple[float, int, T]] = []
        is_heap = False
        limit = max_distance
        counter = itertools.count()

        def distance(element: T) -> float:
            return norm(
                [value - self._axis_position(element, axis) for axis, value in enumerate(target)]
            )

        def visit(left: int, right: int) -> None:
            nonlocal is_heap, limit
            if right <= left:
                return
            median = (left + right) // 2
            element = self._elements[median]
            gap = distance(element)
            if gap < limit:
                entry = (-gap, next(counter), element)
                if is_heap:
                    heapq.heappushpop(found, entry)
                    limit = -found[0][0]
                else:
                    found.append(entry)
                    if number is not None and len(found) == number:
                        heapq.heapify(found)
                        is_heap = True

            if right - left > 1:
                axis = self._split_axes[median]
                split = self._axis_position(element, axis)
                to_plane = [0.0] * self._dimensions
                to_plane[axis] = target[axis] - split
                if target[axis] < split:
                    near, far = (left, median), (median + 1, right)
                else:
                    near, far = (median + 1, right), (left, median)
                visit(*near)
                if norm(to_plane) < limit:
                    visit(*far)

        visit(0, len(self._elements))
        return [element for _, _, element in found]
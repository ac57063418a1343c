"""Dense row-major matrices of floats."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

SINGULAR_TOLERANCE = 1e-7


class SingularMatrixError(ValueError):
    """Raised when a matrix has no inverse."""


def _cell_width(value: float) -> int:
    # Integer digits, a sign for negatives, the decimal point and three decimals.
    return len(str(int(abs(value)))) + (1 if value < 0 else 0) + 4


def _aligned_rows(rows: Sequence[Sequence[float]], opening: str, closing: str) -> str:
    """Render rows with three decimals, every cell right-aligned to a common width."""
    width = max((_cell_width(value) for row in rows for value in row), default=0)
    lines = (
        opening + "".join(f" {value:>{width}.3f}" for value in row) + " " + closing
        for row in rows
    )
    return "".join(line + "\n" for line in lines)


class Matrix:
    """An immutable rectangular matrix of floats."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Iterable[float]]) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in values)
        if not rows or not rows[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows of a matrix must have the same length")
        self._values = rows

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        """A matrix of the given shape filled with zeros."""
        if rows < 1 or columns < 1:
            raise ValueError("a matrix needs at least one row and one column")
        return cls([[0.0] * columns for _ in range(rows)])

    @property
    def values(self) -> tuple[tuple[float, ...], ...]:
        return self._values

    @property
    def rows(self) -> int:
        return len(self._values)

    @property
    def columns(self) -> int:
        return len(self._values[0])

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self._values[index]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._values]!r})"

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.columns != other.rows:
            raise ValueError(
                f"cannot multiply a {self.rows}x{self.columns} matrix "
                f"by a {other.rows}x{other.columns} matrix"
            )
        other_columns = list(zip(*other._values))
        return Matrix(
            [
                [sum(a * b for a, b in zip(row, column)) for column in other_columns]
                for row in self._values
            ]
        )

    def inverse(self) -> Matrix:
        """The inverse by Gauss-Jordan elimination with partial pivoting."""
        size = self.rows
        if size != self.columns:
            raise ValueError("only square matrices have an inverse")
        work = [list(row) for row in self._values]
        inverse = [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]

        for i in range(size):
            pivot = max(range(i, size), key=lambda k: abs(work[k][i]))
            if pivot != i:
                work[i], work[pivot] = work[pivot], work[i]
                inverse[i], inverse[pivot] = inverse[pivot], inverse[i]

            diagonal = work[i][i]
            if abs(diagonal) < SINGULAR_TOLERANCE:
                raise SingularMatrixError("the matrix is singular and has no inverse")

            work[i] = [value / diagonal for value in work[i]]
            inverse[i] = [value / diagonal for value in inverse[i]]

            for k in range(size):
                if k == i:
                    continue
                factor = work[k][i]
                work[k] = [a - factor * b for a, b in zip(work[k], work[i])]
                inverse[k] = [a - factor * b for a, b in zip(inverse[k], inverse[i])]

        return Matrix(inverse)

    def __str__(self) -> str:
        return _aligned_rows(self._values, "|", "|")
"""Owned square matrix with bounds-checked ``(row, col)`` indexing.

Every stage of the pipeline (adjacency, distance, predecessor) stores its
state in a ``Matrix``. Indexing with a tuple outside ``0..size-1`` raises
``IndexError``; negative indices are rejected rather than wrapped.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Tuple, TypeVar

T = TypeVar("T")


class Matrix(Generic[T]):
    """A ``size x size`` matrix filled with ``fill`` on creation.

    Attributes:
        size: Number of rows (and columns).
    """

    __slots__ = ("size", "_rows")

    def __init__(self, size: int, fill: T) -> None:
        if size < 0:
            raise ValueError(f"Matrix size must be non-negative, got {size}")
        self.size = size
        self._rows: List[List[T]] = [[fill] * size for _ in range(size)]

    @classmethod
    def from_lists(cls, rows: List[List[T]]) -> Matrix[T]:
        """Build a matrix from nested lists, copying them.

        Raises:
            ValueError: If ``rows`` is not square.
        """
        size = len(rows)
        for values in rows:
            if len(values) != size:
                raise ValueError("Matrix rows must form a square")
        matrix: Matrix[T] = cls.__new__(cls)
        matrix.size = size
        matrix._rows = [list(values) for values in rows]
        return matrix

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(
                f"Index ({row}, {col}) out of range for {self.size}x{self.size} matrix"
            )

    def __getitem__(self, index: Tuple[int, int]) -> T:
        row, col = index
        self._check(row, col)
        return self._rows[row][col]

    def __setitem__(self, index: Tuple[int, int], value: T) -> None:
        row, col = index
        self._check(row, col)
        self._rows[row][col] = value

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix(size={self.size}, rows={self._rows!r})"

    def row(self, row: int) -> Tuple[T, ...]:
        """Return a read-only copy of one row."""
        self._check(row, 0)
        return tuple(self._rows[row])

    def cells(self) -> Iterator[Tuple[int, int, T]]:
        """Yield ``(row, col, value)`` for every cell in row-major order."""
        for i, values in enumerate(self._rows):
            for j, value in enumerate(values):
                yield i, j, value

    def to_lists(self) -> List[List[T]]:
        """Return a deep copy of the contents as nested lists."""
        return [list(values) for values in self._rows]

    def copy(self) -> Matrix[T]:
        """Return an independent copy of this matrix."""
        return Matrix.from_lists(self._rows)

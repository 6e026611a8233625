"""Square matrices stored as a list of column vectors."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class SquareMatrix:
    """An N x N matrix of floats, stored column by column.

    ``matrix[i]`` is the i-th column; ``matrix.at(row, column)`` addresses a
    single element.
    """

    __slots__ = ("_columns",)

    def __init__(self, columns: Iterable[Iterable[float]] | None = None, size: int | None = None):
        if columns is None and size is None:
            raise TypeError("either columns or size must be given")
        column_list = [[float(value) for value in column] for column in (columns or ())]
        if size is None:
            size = len(column_list)
        if size < 1:
            raise ValueError("a square matrix needs at least one row and column")
        if len(column_list) > size:
            raise ValueError(f"at most {size} columns expected, got {len(column_list)}")
        for column in column_list:
            if len(column) != size:
                raise ValueError(f"each column must contain exactly {size} elements")
        column_list.extend([0.0] * size for _ in range(size - len(column_list)))
        self._columns = column_list

    @classmethod
    def identity(cls, size: int) -> SquareMatrix:
        """Return the identity matrix of the given size."""
        return cls([[1.0 if row == column else 0.0 for row in range(size)] for column in range(size)])

    def __getitem__(self, index: int) -> list[float]:
        return self._columns[index]

    def __setitem__(self, index: int, value: Iterable[float]) -> None:
        column = [float(v) for v in value]
        if len(column) != len(self):
            raise ValueError(f"each column must contain exactly {len(self)} elements")
        self._columns[index] = column

    def __len__(self) -> int:
        return len(self._columns)

    def at(self, row: int, column: int) -> float:
        """Return the element in the given row and column."""
        return self._columns[column][row]

    def set_at(self, row: int, column: int, value: float) -> None:
        """Set the element in the given row and column."""
        self._columns[column][row] = float(value)

    def columns(self) -> list[tuple[float, ...]]:
        """Return a copy of the column vectors."""
        return [tuple(column) for column in self._columns]

    def _apply(self, vector: Sequence[float]) -> tuple[float, ...]:
        if len(vector) != len(self):
            raise ValueError(f"vector of length {len(self)} expected, got {len(vector)}")
        return tuple(sum(a * b for a, b in zip(row, vector)) for row in zip(*self._columns))

    def __mul__(self, other):
        if isinstance(other, SquareMatrix):
            if len(other) != len(self):
                raise ValueError("matrices must have the same size")
            return SquareMatrix([self._apply(column) for column in other._columns])
        if isinstance(other, (str, bytes)):
            return NotImplemented
        try:
            vector = [float(value) for value in other]
        except TypeError:
            return NotImplemented
        return self._apply(vector)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._columns == other._columns

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SquareMatrix({self.columns()!r})"
"""Dense row-major matrix."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from axiom.core import AxiomError, ErrorCode

__all__ = ["Mat"]


def _validate_dims(rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise AxiomError(
            ErrorCode.INVALID_ARGUMENT, "Mat(rows, cols): rows and cols must be >= 1"
        )


class Mat:
    """A non-empty dense matrix stored in row-major order."""

    __slots__ = ("_data", "_cols")

    def __init__(self, data: Iterable[Any], cols: int) -> None:
        values = list(data)
        if cols < 1:
            raise AxiomError(ErrorCode.INVALID_ARGUMENT, "Mat(data, cols): cols must be >= 1")
        if not values:
            raise AxiomError(ErrorCode.INVALID_ARGUMENT, "Mat(data, cols): data must be non-empty")
        if len(values) % cols:
            raise AxiomError(
                ErrorCode.SHAPE_MISMATCH,
                "Mat(data, cols): data.size() must be a multiple of cols",
            )
        self._data = values
        self._cols = cols

    @classmethod
    def identity(cls, n: int) -> "Mat":
        """The ``n`` by ``n`` identity matrix."""
        if n < 1:
            raise AxiomError(ErrorCode.INVALID_ARGUMENT, "Mat(n): rows and cols must be >= 1")
        return cls((1 if r == c else 0 for r in range(n) for c in range(n)), n)

    @classmethod
    def _filled(cls, rows: int, cols: int | None, value: Any) -> "Mat":
        if cols is None:
            cols = rows
        _validate_dims(rows, cols)
        return cls([value] * (rows * cols), cols)

    @classmethod
    def zeros(cls, rows: int, cols: int | None = None) -> "Mat":
        """Matrix of zeros; square when ``cols`` is omitted."""
        return cls._filled(rows, cols, 0)

    @classmethod
    def ones(cls, rows: int, cols: int | None = None) -> "Mat":
        """Matrix of ones; square when ``cols`` is omitted."""
        return cls._filled(rows, cols, 1)

    def size(self) -> int:
        """Total number of entries."""
        return len(self._data)

    def rows(self) -> int:
        """Number of rows."""
        assert self._cols != 0, "cols must be non-zero"
        return len(self._data) // self._cols

    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def _flat_index(self, key: Any) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Mat indices must be a (row, col) pair")
        row, col = key
        flat = row * self._cols + col
        if row < 0 or col < 0 or flat >= len(self._data):
            raise AxiomError(ErrorCode.OUT_OF_BOUNDS, "Mat index out of bounds")
        return flat

    def __getitem__(self, key: tuple[int, int]) -> Any:
        return self._data[self._flat_index(key)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        self._data[self._flat_index(key)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat):
            return NotImplemented
        return self._cols == other._cols and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Mat({self._data!r}, cols={self._cols})"

    def fill(self, value: Any) -> None:
        """Set every entry to ``value``."""
        self._data = [value] * len(self._data)
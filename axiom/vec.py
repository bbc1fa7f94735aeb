"""Dense one-dimensional vector."""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterable, Iterator

from axiom.core import AxiomError, ErrorCode, sq

__all__ = ["Vec"]


class Vec:
    """A non-empty dense vector of numbers."""

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[Any]) -> None:
        values = list(data)
        if not values:
            raise AxiomError(ErrorCode.INVALID_ARGUMENT, "Vec(data): data must be non-empty")
        self._data = values

    @classmethod
    def _filled(cls, n: int, value: Any) -> "Vec":
        if n < 1:
            raise AxiomError(ErrorCode.INVALID_ARGUMENT, "Vec(n): vector size must be >= 1")
        return cls([value] * n)

    @classmethod
    def ones(cls, n: int) -> "Vec":
        """Vector of ``n`` ones."""
        return cls._filled(n, 1)

    @classmethod
    def zeros(cls, n: int) -> "Vec":
        """Vector of ``n`` zeros."""
        return cls._filled(n, 0)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def _check_index(self, i: int) -> int:
        if not 0 <= i < len(self._data):
            raise AxiomError(ErrorCode.OUT_OF_BOUNDS, "Vec::at: index out of bounds")
        return i

    def __getitem__(self, i: int) -> Any:
        return self._data[self._check_index(i)]

    def __setitem__(self, i: int, value: Any) -> None:
        self._data[self._check_index(i)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vec({self._data!r})"

    def resize(self, n: int, value: Any = 0) -> None:
        """Truncate to ``n`` entries or pad with ``value`` up to ``n``."""
        if n < 0:
            raise AxiomError(ErrorCode.INVALID_ARGUMENT, "Vec::resize: size must be >= 0")
        if n <= len(self._data):
            del self._data[n:]
        else:
            self._data.extend([value] * (n - len(self._data)))

    def fill(self, value: Any) -> None:
        """Set every entry to ``value``."""
        self._data = [value] * len(self._data)

    def l1_norm(self) -> Any:
        """Sum of absolute values."""
        return sum((abs(x) for x in self._data), 0)

    def l2_norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(math.fsum(sq(float(x)) for x in self._data))

    def infty_norm(self) -> Any:
        """Largest absolute value."""
        return max((abs(x) for x in self._data), default=0) if self._data else 0

    def _check_same_size(self, other: "Vec", op: str) -> None:
        if len(self._data) != len(other._data):
            raise AxiomError(
                ErrorCode.SHAPE_MISMATCH, f"vec operator {op}: vectors must be of same size"
            )

    def __iadd__(self, other: object) -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        self._check_same_size(other, "+")
        self._data = [x + y for x, y in zip(self._data, other._data)]
        return self

    def __add__(self, other: object) -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        result = Vec(self._data)
        result += other
        return result

    def __isub__(self, other: object) -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        self._check_same_size(other, "-")
        self._data = [x - y for x, y in zip(self._data, other._data)]
        return self

    def __sub__(self, other: object) -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        result = Vec(self._data)
        result -= other
        return result

    def __imul__(self, scalar: object) -> "Vec":
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        self._data = [x * scalar for x in self._data]
        return self

    def __mul__(self, scalar: object) -> "Vec":
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        result = Vec(self._data)
        result *= scalar
        return result

    def __rmul__(self, scalar: object) -> "Vec":
        return self.__mul__(scalar)

    def __itruediv__(self, scalar: object) -> "Vec":
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        if scalar == 0:
            raise AxiomError(ErrorCode.DIVIDE_BY_ZERO, "vec operator /: cannot divide by 0")
        self._data = [x / scalar for x in self._data]
        return self

    def __truediv__(self, scalar: object) -> "Vec":
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        result = Vec(self._data)
        result /= scalar
        return result

    def __neg__(self) -> "Vec":
        return Vec(-x for x in self._data)
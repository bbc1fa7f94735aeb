"""Shared error type and small numeric helpers."""

from __future__ import annotations

import enum
import sys
from typing import TypeVar

__all__ = ["ErrorCode", "AxiomError", "sq", "clamp", "nearly_equal"]

T = TypeVar("T")


class ErrorCode(enum.Enum):
    """Category of an :class:`AxiomError`."""

    INVALID_ARGUMENT = "invalid_argument"
    SHAPE_MISMATCH = "shape_mismatch"
    OUT_OF_BOUNDS = "out_of_bounds"
    DIVIDE_BY_ZERO = "divide_by_zero"


class AxiomError(RuntimeError):
    """Error raised by the library, tagged with an :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode, msg: str) -> None:
        super().__init__(f"axiom: {msg}")
        self.code = code


def sq(x: T) -> T:
    """Return ``x * x``."""
    return x * x


def clamp(lo: T, hi: T, v: T) -> T:
    """Clamp ``v`` into the closed range ``[lo, hi]``."""
    return max(lo, min(hi, v))


def nearly_equal(a: float, b: float, epsilon: float = sys.float_info.epsilon) -> bool:
    """Return True when ``a`` and ``b`` differ by strictly less than ``epsilon``."""
    return abs(a - b) < epsilon
"""Free functions on :class:`~axiom.vec.Vec`: products, norms and component-wise helpers."""

from __future__ import annotations

import functools
import math
import sys
from typing import Any, Callable

from axiom import core
from axiom.core import AxiomError, ErrorCode, nearly_equal, sq
from axiom.vec import Vec

__all__ = [
    "dot",
    "is_orthogonal",
    "norm",
    "length",
    "len_squared",
    "proj",
    "is_approx",
    "normalize",
    "distance_squared",
    "distance",
    "cross",
    "reflect",
    "cwise_binary",
    "minimum",
    "maximum",
    "absolute",
    "floor",
    "ceil",
    "clamp",
    "total",
    "min_coeff",
    "max_coeff",
    "arg_min",
    "arg_max",
]


def _require_same_size(a: Vec, b: Vec, message: str) -> None:
    if len(a) != len(b):
        raise AxiomError(ErrorCode.SHAPE_MISMATCH, message)


def dot(a: Vec, b: Vec) -> Any:
    """Inner product of two vectors of equal size."""
    _require_same_size(a, b, "dot(): vectors must be of same size")
    return sum((x * y for x, y in zip(a, b)), 0)


def is_orthogonal(a: Vec, b: Vec) -> bool:
    """True when the dot product of ``a`` and ``b`` is within machine epsilon of zero."""
    return nearly_equal(dot(a, b), 0)


def norm(v: Vec, order: int = 1) -> float:
    """Vector norm: order 0 is the infinity norm, 1 is L1, 2 is L2."""
    if order == 0:
        return float(v.infty_norm())
    if order == 1:
        return float(v.l1_norm())
    if order == 2:
        return float(v.l2_norm())
    raise AxiomError(
        ErrorCode.INVALID_ARGUMENT, "norm(vec, order): order must be between 0, 1, or 2"
    )


def length(v: Vec) -> float:
    """Euclidean length of ``v``."""
    return norm(v, 2)


def len_squared(v: Vec) -> float:
    """Squared Euclidean length of ``v``, accumulated in extended precision."""
    return math.fsum(sq(float(x)) for x in v)


def proj(u: Vec, v: Vec) -> Vec:
    """Projection of ``u`` onto ``v``."""
    denom = dot(v, v)
    if denom == 0:
        raise AxiomError(ErrorCode.DIVIDE_BY_ZERO, "proj(u,v): cannot project onto zero vector")
    return (dot(u, v) / denom) * v


def is_approx(v: Vec, w: Vec, epsilon: float = sys.float_info.epsilon) -> bool:
    """True when every pair of entries differs by less than ``epsilon``."""
    _require_same_size(v, w, "is_approx(): vectors should be of same length")
    return all(nearly_equal(x, y, epsilon) for x, y in zip(v, w))


def normalize(v: Vec) -> Vec:
    """Unit vector in the direction of ``v``."""
    size = length(v)
    if size == 0.0:
        raise AxiomError(ErrorCode.DIVIDE_BY_ZERO, "normalize: zero vector")
    return v / size


def distance_squared(a: Vec, b: Vec) -> Any:
    """Squared Euclidean distance between ``a`` and ``b``."""
    _require_same_size(a, b, "distance(): vectors should be of same length")
    return sum((sq(x - y) for x, y in zip(a, b)), 0)


def distance(a: Vec, b: Vec) -> float:
    """Euclidean distance between ``a`` and ``b``."""
    return math.sqrt(float(distance_squared(a, b)))


def cross(u: Vec, v: Vec) -> Vec:
    """Cross product of two three-dimensional vectors."""
    if len(u) != 3 or len(v) != 3:
        raise AxiomError(ErrorCode.SHAPE_MISMATCH, "cross(): vectors must be of size 3")
    u0, u1, u2 = u
    v0, v1, v2 = v
    return Vec(
        [
            u1 * v2 - u2 * v1,
            -(u0 * v2 - u2 * v0),
            u0 * v1 - u1 * v0,
        ]
    )


def reflect(v: Vec, n: Vec) -> Vec:
    """Reflect ``v`` off the plane with normal ``n``."""
    return v - (2 * dot(v, n)) * n


def cwise_binary(a: Vec, b: Vec, op: Callable[[Any, Any], Any]) -> Vec:
    """New vector whose entries are ``op`` applied to matching entries of ``a`` and ``b``."""
    _require_same_size(a, b, "cwise_binary(): vectors should be of same length")
    return Vec(op(x, y) for x, y in zip(a, b))


def minimum(a: Vec, b: Vec) -> Vec:
    """Component-wise minimum."""
    return cwise_binary(a, b, min)


def maximum(a: Vec, b: Vec) -> Vec:
    """Component-wise maximum."""
    return cwise_binary(a, b, max)


def absolute(v: Vec) -> Vec:
    """Component-wise absolute value."""
    return Vec(abs(x) for x in v)


def floor(v: Vec) -> Vec:
    """Component-wise floor, kept as floats."""
    return Vec(float(math.floor(x)) for x in v)


def ceil(v: Vec) -> Vec:
    """Component-wise ceiling, kept as floats."""
    return Vec(float(math.ceil(x)) for x in v)


def clamp(v: Vec, low: Any, high: Any) -> Vec:
    """Clamp every entry into ``[low, high]``."""
    return Vec(core.clamp(low, high, x) for x in v)


def total(v: Vec) -> Any:
    """Sum of the entries."""
    return sum(v, 0)


def min_coeff(v: Vec) -> Any:
    """Smallest entry."""
    return functools.reduce(min, v, math.inf)


def max_coeff(v: Vec) -> Any:
    """Largest entry."""
    return functools.reduce(max, v, -math.inf)


def arg_min(v: Vec) -> int:
    """Index of the first smallest entry."""
    best_index, best = 0, math.inf
    for i, x in enumerate(v):
        if x < best:
            best_index, best = i, x
    return best_index


def arg_max(v: Vec) -> int:
    """Index of the first largest entry."""
    best_index, best = 0, -math.inf
    for i, x in enumerate(v):
        if x > best:
            best_index, best = i, x
    return best_index
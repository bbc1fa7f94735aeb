# axiom

A small, dependency-free linear algebra toolkit for Python. It provides a
dense vector type (`axiom.vec.Vec`), a row-major matrix container
(`axiom.mat.Mat`) and a set of vector operations (`axiom.ops`).
Shape, bounds and division errors are raised as `axiom.core.AxiomError`.
Each of these errors carries an `ErrorCode` in its `code` attribute.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Vectors

```python
from axiom.vec import Vec

v = Vec([1.0, -2.0, 2.0])
w = Vec.ones(3)

v + w          # Vec([2.0, -1.0, 3.0])
v - w
2 * v          # scalar multiplication from either side
v / 2          # a divisor of 0 raises AxiomError (DIVIDE_BY_ZERO)
-v             # negation
v += w         # in-place forms: +=, -=, *=, /=

v[0]           # indexing; an index outside 0..len(v)-1 raises AxiomError (OUT_OF_BOUNDS)
len(v), list(v)

v.l1_norm()    # sum of absolute values
v.l2_norm()    # Euclidean length
v.infty_norm() # largest absolute value

v.fill(0.0)    # set every entry
v.resize(5)    # truncate, or pad with a value (0 by default)
```

A vector needs at least one element. `Vec([])` raises an error, and so does
`Vec.zeros(0)` or `Vec.ones(0)`. When two vectors have different lengths,
element-wise arithmetic raises an error with `ErrorCode.SHAPE_MISMATCH`.

## Matrices

```python
from axiom.mat import Mat

m = Mat([1, 2, 3, 4, 5, 6], cols=3)  # 2 x 3, row-major
m.rows(), m.cols(), m.size()         # (2, 3, 6)
m[1, 2]                              # 6
m[0, 0] = 10
m.fill(0)
list(m)                              # entries in row-major order

Mat.identity(3)
Mat.zeros(2, 4)
Mat.ones(3)                          # square when cols is omitted
```

A matrix index is a `(row, col)` pair. A negative index raises an error with
`ErrorCode.OUT_OF_BOUNDS`, and so does any index whose row-major position is
past the last entry. The data passed to the constructor must be non-empty,
and its length must be a multiple of `cols`.

## Vector operations

```python
from axiom.vec import Vec
from axiom import ops

a = Vec([1.0, 0.0, 0.0])
b = Vec([0.0, 1.0, 0.0])

ops.dot(a, b)                            # 0.0
ops.is_orthogonal(a, b)                  # True
ops.cross(a, b) == Vec([0.0, 0.0, 1.0])  # True
ops.norm(a, 2)                           # order 0 = infinity, 1 = L1 (default), 2 = L2
ops.length(a), ops.len_squared(a)
ops.proj(a, b)                           # projecting onto a zero vector raises DIVIDE_BY_ZERO
ops.normalize(Vec([3.0, 4.0]))           # Vec([0.6, 0.8])
ops.distance(a, b), ops.distance_squared(a, b)
ops.reflect(a, b)
ops.is_approx(a, b, 1e-9)
ops.minimum(a, b), ops.maximum(a, b)
ops.cwise_binary(a, b, lambda x, y: x * y)
ops.absolute(a), ops.floor(a), ops.ceil(a), ops.clamp(a, 0.0, 0.5)
ops.total(a), ops.min_coeff(a), ops.max_coeff(a)
ops.arg_min(a), ops.arg_max(a)           # first index when there is a tie
```

## Core helpers

```python
from axiom.core import sq, clamp, nearly_equal, AxiomError, ErrorCode

sq(-3)                              # 9
clamp(0, 5, 10)                     # 5  (argument order: lo, hi, value)
nearly_equal(1.0, 1.0 + 1e-6, 1e-5) # True; the default epsilon is machine epsilon

try:
    Vec([1, 2]) + Vec([1, 2, 3])
except AxiomError as err:
    err.code                        # ErrorCode.SHAPE_MISMATCH
```

## What it does not do

`Mat` stores entries and gives indexed access to them, and nothing more. The
package has no matrix arithmetic: no matrix products, no matrix-vector
products, no transposes and no decompositions. There are no optimisation
routines and no printing helpers beyond `repr`. The package also provides no
command-line program.
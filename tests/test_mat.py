import pytest
from hypothesis import given
from hypothesis import strategies as st

from axiom.core import AxiomError, ErrorCode
from axiom.mat import Mat


def test_shape_from_data():
    m = Mat([1, 2, 3, 4, 5, 6], 3)
    assert m.cols() == 3
    assert m.size() == 6
    assert m.rows() * m.cols() == m.size()


@given(st.integers(min_value=1, max_value=8), st.integers(min_value=1, max_value=8))
def test_zeros_shape_invariant(rows, cols):
    m = Mat.zeros(rows, cols)
    assert m.rows() == rows
    assert m.cols() == cols
    assert m.size() == rows * cols


def test_zero_cols_rejected():
    with pytest.raises(AxiomError) as info:
        Mat([1, 2], 0)
    assert info.value.code is ErrorCode.INVALID_ARGUMENT


def test_empty_data_rejected():
    with pytest.raises(AxiomError) as info:
        Mat([], 2)
    assert info.value.code is ErrorCode.INVALID_ARGUMENT


def test_data_not_multiple_of_cols_is_shape_mismatch():
    with pytest.raises(AxiomError) as info:
        Mat([1, 2, 3], 2)
    assert info.value.code is ErrorCode.SHAPE_MISMATCH


@pytest.mark.parametrize(
    "build",
    [
        lambda: Mat.identity(0),
        lambda: Mat.zeros(0),
        lambda: Mat.zeros(0, 3),
        lambda: Mat.ones(2, 0),
    ],
)
def test_zero_dimensions_rejected(build):
    with pytest.raises(AxiomError) as info:
        build()
    assert info.value.code is ErrorCode.INVALID_ARGUMENT


def test_identity_worked_example():
    assert Mat.identity(3) == Mat([1, 0, 0, 0, 1, 0, 0, 0, 1], 3)


@given(st.integers(min_value=1, max_value=6))
def test_identity_diagonal_matches_ones(n):
    ident = Mat.identity(n)
    ones = Mat.ones(n)
    for i in range(n):
        assert ident[i, i] == ones[i, i]


def test_square_factories_match_rectangular_ones():
    assert Mat.zeros(3) == Mat.zeros(3, 3)
    assert Mat.ones(2) == Mat.ones(2, 2)


def test_fill_turns_ones_into_zeros():
    m = Mat.ones(2, 3)
    m.fill(0)
    assert m == Mat.zeros(2, 3)


def test_row_major_indexing():
    m = Mat([1, 2, 3, 4, 5, 6], 3)
    assert m[0, 2] == 3
    assert m[1, 0] == 4
    assert m[1, 2] == 6


def test_setitem_roundtrip():
    m = Mat.zeros(2, 2)
    m[1, 1] = 8
    assert m[1, 1] == 8
    assert list(m) == [0, 0, 0, 8]


@pytest.mark.parametrize("key", [(2, 0), (5, 5), (-1, 0), (0, -1)])
def test_out_of_bounds_on_read(key):
    m = Mat.zeros(2, 2)
    with pytest.raises(AxiomError) as info:
        m[key]
    assert info.value.code is ErrorCode.OUT_OF_BOUNDS
    assert list(m) == [0, 0, 0, 0]
    assert m[1, 1] == 0


@pytest.mark.parametrize("key", [(2, 0), (5, 5), (-1, 0), (0, -1)])
def test_out_of_bounds_on_write(key):
    m = Mat.zeros(2, 2)
    with pytest.raises(AxiomError) as info:
        m[key] = 1
    assert info.value.code is ErrorCode.OUT_OF_BOUNDS
    assert list(m) == [0, 0, 0, 0]


def test_non_tuple_key_is_type_error():
    with pytest.raises(TypeError):
        Mat.zeros(2)[0]


def test_iteration_is_row_major_data():
    data = [1, 2, 3, 4, 5, 6]
    assert list(Mat(data, 2)) == data


def test_equality_depends_on_shape():
    data = [1, 2, 3, 4, 5, 6]
    wide, tall = Mat(data, 3), Mat(data, 2)
    assert not (wide == tall)
    assert wide == Mat(data, 3)
    assert wide.rows() == tall.cols()
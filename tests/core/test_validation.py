"""
Tests for input validation utilities.

Validates the checkers in core/validation.py:
    - check_dtype: numeric kinds accepted, everything else rejected
    - check_dimension: non-negative integer extents
    - check_index: bounds without wrap-around
    - shape checkers for element-wise ops, products and augmentation
    - check_array / check_finite / check_ndim
"""

import numpy as np
import pytest

from numerix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    ValidationError,
)
from numerix.core.validation import (
    check_array,
    check_choice,
    check_dimension,
    check_dtype,
    check_finite,
    check_index,
    check_ndim,
    check_positive,
    check_product_shapes,
    check_same_rows,
    check_same_shape,
    is_integer,
    is_scalar,
)


class TestScalarPredicates:

    @pytest.mark.parametrize("value", [0, 3, np.int64(2), np.uint8(1)])
    def test_integers(self, value):
        assert is_integer(value)

    @pytest.mark.parametrize("value", [True, np.bool_(False), 1.0, "1", None])
    def test_non_integers(self, value):
        assert not is_integer(value)

    @pytest.mark.parametrize("value", [1, 2.5, 1 + 2j, np.float32(1), np.complex128(1j)])
    def test_scalars(self, value):
        assert is_scalar(value)

    @pytest.mark.parametrize("value", [True, "x", [1], np.zeros(2)])
    def test_non_scalars(self, value):
        assert not is_scalar(value)


class TestCheckDtype:

    @pytest.mark.parametrize("dtype", [np.int32, np.int64, np.uint16, np.float32,
                                       np.float64, np.complex128, "f8", int, float, complex])
    def test_numeric_accepted(self, dtype):
        assert np.issubdtype(check_dtype(dtype, "dtype"), np.number)

    @pytest.mark.parametrize("dtype", [bool, object, str, "datetime64[s]"])
    def test_non_numeric_rejected(self, dtype):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_dtype(dtype, "dtype")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="not a valid dtype"):
            check_dtype("not-a-dtype", "dtype")


class TestCheckDimension:

    def test_valid(self):
        assert check_dimension(3, 4) == (3, 4)

    def test_zero_allowed(self):
        assert check_dimension(0, 5) == (0, 5)

    def test_numpy_ints(self):
        assert check_dimension(np.int64(2), np.int32(3)) == (2, 3)

    @pytest.mark.parametrize("rows,cols", [(-1, 3), (3, -2)])
    def test_negative_rejected(self, rows, cols):
        with pytest.raises(InvalidDimensionError, match="non-negative"):
            check_dimension(rows, cols)

    @pytest.mark.parametrize("rows,cols", [(2.0, 3), (2, "3"), (True, 1)])
    def test_non_integer_rejected(self, rows, cols):
        with pytest.raises(InvalidDimensionError):
            check_dimension(rows, cols)


class TestCheckIndex:

    def test_valid(self):
        assert check_index(1, 2, (3, 3)) == (1, 2)

    @pytest.mark.parametrize("i,j", [(3, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_range(self, i, j):
        with pytest.raises(IndexOutOfRangeError) as info:
            check_index(i, j, (3, 3))
        assert info.value.shape == (3, 3)
        assert info.value.index == (i, j)

    def test_non_integer(self):
        with pytest.raises(ValidationError, match="expected integers"):
            check_index(1.0, 0, (3, 3))


class TestShapeChecks:

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "+=")

    def test_same_shape_mismatch(self):
        with pytest.raises(DimensionMismatchError, match=r"\+=") as info:
            check_same_shape((2, 3), (3, 2), "+=")
        assert info.value.operation == "+="

    def test_product_passes(self):
        check_product_shapes((2, 3), (3, 5))

    def test_product_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="inner dimensions"):
            check_product_shapes((2, 3), (2, 3))

    def test_same_rows(self):
        check_same_rows((3, 1), (3, 7), "augment")
        with pytest.raises(DimensionMismatchError, match="row counts differ"):
            check_same_rows((3, 1), (2, 1), "augment")


class TestArrayChecks:

    def test_list_to_array(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_dtype_conversion(self):
        assert check_array([1, 2], "X", dtype=np.float32).dtype == np.float32

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_object(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1], "X")

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError, match="X"):
            check_array([[1, 2], [3]], "X")

    def test_check_finite(self):
        check_finite(np.array([1.0, 2.0]), "X")
        with pytest.raises(ValidationError, match="1 NaN, 1 Inf"):
            check_finite(np.array([np.nan, np.inf]), "X")

    def test_check_ndim(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_ndim(np.zeros(3), 2, "X")


class TestOptionChecks:

    def test_positive(self):
        check_positive(1e-10, "tolerance")
        for bad in (0.0, -1.0, np.inf, np.nan):
            with pytest.raises(ValidationError, match="tolerance"):
                check_positive(bad, "tolerance")

    def test_choice(self):
        assert check_choice("none", ("none", "partial"), "pivoting") == "none"
        with pytest.raises(ValidationError, match="pivoting must be one of"):
            check_choice("full", ("none", "partial"), "pivoting")

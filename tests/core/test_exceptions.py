"""
Tests for the numerix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via NumerixError)
    - Diagnostic attributes on the structural and numerical errors
    - Default attribute values (None for optional attributes)
"""

import pytest

from numerix.core.exceptions import (
    ConvergenceError,
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    InvalidSliceError,
    NumericalError,
    NumerixError,
    SingularMatrixError,
    UseAfterInvalidationError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via NumerixError."""

    @pytest.mark.parametrize("cls", [
        ValidationError, DimensionError, InvalidDimensionError,
        DimensionMismatchError, IndexOutOfRangeError, InvalidSliceError,
        UseAfterInvalidationError, NumericalError, SingularMatrixError,
    ])
    def test_catchable_as_numerix_error(self, cls):
        with pytest.raises(NumerixError):
            raise cls("boom")

    def test_convergence_error_catchable(self):
        with pytest.raises(NumerixError):
            raise ConvergenceError("did not converge", iterations=100)

    def test_dimension_errors_are_validation_errors(self):
        assert issubclass(InvalidDimensionError, DimensionError)
        assert issubclass(DimensionMismatchError, DimensionError)
        assert issubclass(DimensionError, ValidationError)

    def test_index_out_of_range_is_index_error(self):
        """Sequence-protocol code catching IndexError keeps working."""
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("out of range")

    def test_use_after_invalidation_is_not_validation_error(self):
        err = UseAfterInvalidationError("stale view")
        assert not isinstance(err, ValidationError)

    def test_singular_matrix_is_numerical_error(self):
        assert isinstance(SingularMatrixError("singular"), NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_invalid_dimension(self):
        err = InvalidDimensionError("bad", rows=-1, cols=3)
        assert (err.rows, err.cols) == (-1, 3)

    def test_dimension_mismatch(self):
        err = DimensionMismatchError("bad", left_shape=(2, 3), right_shape=(3, 3), operation="+=")
        assert err.left_shape == (2, 3)
        assert err.right_shape == (3, 3)
        assert err.operation == "+="

    def test_index_out_of_range(self):
        err = IndexOutOfRangeError("bad", index=(4, 0), shape=(4, 4))
        assert err.index == (4, 0)
        assert err.shape == (4, 4)

    def test_invalid_slice(self):
        err = InvalidSliceError("bad", axis="row", start=0, count=2, step=0, parent_count=4)
        assert err.axis == "row"
        assert err.step == 0
        assert err.parent_count == 4

    def test_use_after_invalidation(self):
        err = UseAfterInvalidationError("stale", view_generation=0, buffer_generation=1)
        assert err.view_generation == 0
        assert err.buffer_generation == 1

    def test_singular_matrix(self):
        err = SingularMatrixError("singular", matrix_name="A", pivot=0.0, row=2)
        assert err.matrix_name == "A"
        assert err.pivot == 0.0
        assert err.row == 2

    def test_convergence(self):
        err = ConvergenceError("slow", iterations=100, final_change=1e-3,
                               reason="max_iterations", threshold=1e-10)
        assert err.iterations == 100
        assert err.final_change == 1e-3
        assert err.reason == "max_iterations"
        assert err.threshold == 1e-10

    @pytest.mark.parametrize("cls", [
        InvalidDimensionError, DimensionMismatchError, IndexOutOfRangeError,
        InvalidSliceError, UseAfterInvalidationError, SingularMatrixError,
    ])
    def test_optional_attributes_default_to_none(self, cls):
        err = cls("message only")
        attrs = {k: v for k, v in vars(err).items()}
        assert attrs
        assert all(v is None for v in attrs.values())

    def test_message_preserved(self):
        assert str(DimensionMismatchError("shapes differ")) == "shapes differ"

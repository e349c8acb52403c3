"""
Tests for Gauss-Jordan elimination.

Validates against scipy.linalg.solve and against hand-checked systems,
including the default no-pivot behaviour on zero pivots.
"""

import warnings

import numpy as np
import pytest
from scipy import linalg as sp_linalg

from numerix.core.compute import select_tolerance
from numerix.core.exceptions import (
    DimensionMismatchError,
    SingularMatrixError,
    ValidationError,
)
from numerix.core.protocols import MatrixLike
from numerix.linalg import LinearSystemSolution, Matrix, gauss_jordan, solve
from numerix.linalg._elimination import back_substitute, forward_eliminate
from numerix.linalg.matrix import augment


@pytest.fixture
def textbook_system():
    """3x3 system with solution (2, 3, -1); nonzero pivots without swapping."""
    A = Matrix.from_rows([[2.0, 1.0, -1.0], [-3.0, -1.0, 2.0], [-2.0, 1.0, 2.0]])
    b = Matrix.from_rows([[8.0], [-11.0], [-3.0]])
    return A, b


# ═══════════════════════════════════════════════════════════════════════
# Correctness
# ═══════════════════════════════════════════════════════════════════════


class TestGaussJordan:

    def test_textbook_system(self, textbook_system):
        A, b = textbook_system
        x = gauss_jordan(A, b)
        assert isinstance(x, Matrix)
        assert x.allclose([[2.0], [3.0], [-1.0]])

    @pytest.mark.parametrize("pivoting", ["none", "partial"])
    def test_matches_scipy(self, well_conditioned_system, pivoting):
        A_np, b_np = well_conditioned_system
        x = gauss_jordan(Matrix.from_array(A_np), Matrix.from_array(b_np), pivoting=pivoting)
        tol = select_tolerance(x.dtype)
        np.testing.assert_allclose(
            x.to_numpy(), sp_linalg.solve(A_np, b_np), rtol=tol.rtol, atol=tol.atol,
        )

    def test_round_trip(self, rng):
        n = 8
        A_np = rng.standard_normal((n, n)) + n * np.eye(n)
        x_true = rng.standard_normal((n, 1))
        A = Matrix.from_array(A_np)
        b = A @ Matrix.from_array(x_true)
        x = gauss_jordan(A, b)
        assert x.allclose(x_true)
        assert (A @ x).allclose(b)

    def test_identity(self):
        b = Matrix.from_rows([[1.0], [2.0], [3.0]])
        assert gauss_jordan(Matrix.identity(3), b) == b

    def test_multiple_right_hand_sides(self, textbook_system):
        A, _ = textbook_system
        x = gauss_jordan(A, Matrix.identity(3))
        assert (A @ x).allclose(Matrix.identity(3))

    def test_integer_inputs_promote(self):
        A = Matrix.from_rows([[2, 0], [0, 4]])
        b = Matrix.from_rows([[2], [4]])
        x = gauss_jordan(A, b)
        assert x.dtype == np.float64
        np.testing.assert_array_equal(x.to_numpy(), [[1.0], [1.0]])

    def test_complex_system(self, rng):
        n = 4
        A_np = rng.standard_normal((n, n)) + 1j * rng.standard_normal((n, n)) + n * np.eye(n)
        b_np = rng.standard_normal((n, 1)) + 0j
        x = gauss_jordan(Matrix.from_array(A_np), Matrix.from_array(b_np))
        assert x.dtype == np.complex128
        tol = select_tolerance(x.dtype)
        np.testing.assert_allclose(
            x.to_numpy(), np.linalg.solve(A_np, b_np), rtol=tol.rtol, atol=tol.atol,
        )

    def test_view_operands(self, textbook_system):
        A, b = textbook_system
        big = Matrix(5, 5)
        big.slice((1, 3, 1), (1, 3, 1)).assign(A)
        big.slice((1, 3, 1), (4, 1, 1)).assign(b)
        x = gauss_jordan(big.slice((1, 3, 1), (1, 3, 1)), big.slice((1, 3, 1), (4, 1, 1)))
        assert x.allclose([[2.0], [3.0], [-1.0]])

    def test_inputs_untouched(self, textbook_system):
        A, b = textbook_system
        A_before, b_before = A.to_numpy(), b.to_numpy()
        gauss_jordan(A, b, pivoting='partial')
        np.testing.assert_array_equal(A.to_numpy(), A_before)
        np.testing.assert_array_equal(b.to_numpy(), b_before)

    def test_empty_system(self):
        x = gauss_jordan(Matrix(0, 0), Matrix(0, 1))
        assert x.shape == (0, 1)

    def test_reduced_echelon_form(self, textbook_system):
        A, b = textbook_system
        augmented = augment(A, b)
        forward_eliminate(augmented, 3)
        back_substitute(augmented, 3)
        assert augmented.allclose([[1, 0, 0, 2], [0, 1, 0, 3], [0, 0, 1, -1]])


# ═══════════════════════════════════════════════════════════════════════
# Pivoting and singular systems
# ═══════════════════════════════════════════════════════════════════════


class TestPivoting:

    def test_zero_pivot_gives_non_finite_with_warning(self):
        A = Matrix.from_rows([[0.0, 1.0], [1.0, 0.0]])
        b = Matrix.from_rows([[1.0], [2.0]])
        with pytest.warns(RuntimeWarning, match="non-finite"):
            x = gauss_jordan(A, b)
        assert not np.all(np.isfinite(x.to_numpy()))

    def test_partial_pivoting_handles_zero_pivot(self):
        A = Matrix.from_rows([[0.0, 1.0], [1.0, 0.0]])
        b = Matrix.from_rows([[1.0], [2.0]])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            x = gauss_jordan(A, b, pivoting='partial')
        assert x.allclose([[2.0], [1.0]])

    def test_partial_pivoting_improves_accuracy(self):
        eps = 1e-20
        A = Matrix.from_rows([[eps, 1.0], [1.0, 1.0]])
        b = Matrix.from_rows([[1.0], [2.0]])
        x = gauss_jordan(A, b, pivoting='partial')
        assert x.allclose([[1.0], [1.0]])

    def test_check_singular_raises(self):
        A = Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]])
        b = Matrix.from_rows([[1.0], [2.0]])
        with pytest.raises(SingularMatrixError, match="singular") as info:
            gauss_jordan(A, b, check_singular=True)
        assert info.value.row == 1
        assert info.value.matrix_name == 'A'

    def test_check_singular_zero_matrix(self):
        with pytest.raises(SingularMatrixError):
            gauss_jordan(Matrix(2, 2), Matrix(2, 1), check_singular=True)

    def test_check_singular_passes_regular_system(self, textbook_system):
        A, b = textbook_system
        x = gauss_jordan(A, b, check_singular=True, pivoting='partial')
        assert x.allclose([[2.0], [3.0], [-1.0]])

    def test_singular_without_check_warns(self):
        A = Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]])
        b = Matrix.from_rows([[1.0], [2.0]])
        with pytest.warns(RuntimeWarning):
            gauss_jordan(A, b)


# ═══════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    def test_non_square(self):
        with pytest.raises(DimensionMismatchError, match="square"):
            gauss_jordan(Matrix(2, 3), Matrix(2, 1))

    def test_rhs_rows(self):
        with pytest.raises(DimensionMismatchError, match="row counts differ"):
            gauss_jordan(Matrix.identity(3), Matrix(2, 1))

    def test_unknown_pivoting(self, textbook_system):
        A, b = textbook_system
        with pytest.raises(ValidationError, match="pivoting"):
            gauss_jordan(A, b, pivoting='complete')

    def test_rejects_ndarray(self):
        with pytest.raises(ValidationError, match="expected a Matrix"):
            gauss_jordan(np.eye(2), Matrix(2, 1))

    def test_rejects_structural_lookalike(self):
        class Lookalike:
            shape = (1, 1)
            n_rows = 1
            n_cols = 1
            dtype = np.dtype(np.float64)

            def __getitem__(self, key):
                return 1.0

            def __iter__(self):
                return iter([])

            def slice(self, rows, cols):
                return self

            def to_numpy(self):
                return np.ones((1, 1))

        lookalike = Lookalike()
        assert isinstance(lookalike, MatrixLike)
        with pytest.raises(ValidationError, match="expected a Matrix"):
            gauss_jordan(lookalike, Matrix(1, 1))


# ═══════════════════════════════════════════════════════════════════════
# solve() diagnostics
# ═══════════════════════════════════════════════════════════════════════


class TestSolve:

    def test_returns_solution(self, textbook_system):
        A, b = textbook_system
        result = solve(A, b)
        assert isinstance(result, LinearSystemSolution)
        assert result.x.allclose([[2.0], [3.0], [-1.0]])
        assert result.residual_norm < 1e-12
        assert result.is_finite
        assert result.row_swaps == 0
        assert result.backend_name == 'gauss_jordan'
        assert result.warnings == ()

    def test_info(self, well_conditioned_system):
        A_np, b_np = well_conditioned_system
        result = solve(Matrix.from_array(A_np), Matrix.from_array(b_np), pivoting='partial')
        assert result.info['method'] == 'gauss_jordan'
        assert result.info['pivoting'] == 'partial'
        assert result.info['n'] == 6
        assert result.info['n_rhs'] == 2
        assert result.pivoting == 'partial'

    def test_timing_sections(self, textbook_system):
        result = solve(*textbook_system)
        assert {'total_seconds', 'elimination', 'residual'} <= set(result.timing)
        assert result.timing['total_seconds'] >= 0

    def test_row_swaps_counted(self):
        A = Matrix.from_rows([[0.0, 1.0], [1.0, 0.0]])
        b = Matrix.from_rows([[1.0], [2.0]])
        assert solve(A, b, pivoting='partial').row_swaps == 1

    def test_non_finite_recorded(self):
        A = Matrix.from_rows([[0.0, 1.0], [1.0, 0.0]])
        b = Matrix.from_rows([[1.0], [2.0]])
        with pytest.warns(RuntimeWarning):
            result = solve(A, b)
        assert not result.is_finite
        assert np.isnan(result.residual_norm)
        assert result._result.has_warning("non-finite")

    def test_summary(self, textbook_system):
        text = solve(*textbook_system).summary()
        assert "Gauss-Jordan elimination" in text
        assert "3 x 3" in text
        assert "residual norm" in text

    def test_repr(self, textbook_system):
        assert repr(solve(*textbook_system)).startswith("LinearSystemSolution(shape=(3, 1)")

"""
Tests for matrix arithmetic on owning matrices and views.
"""

import numpy as np
import pytest

from numerix.core.exceptions import DimensionMismatchError, ValidationError
from numerix.linalg import Matrix, MatrixView


@pytest.fixture
def a():
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def b():
    return Matrix.from_rows([[0.5, -1.0], [2.0, 0.0]])


class TestInPlace:

    def test_iadd_matrix(self, a, b):
        a += b
        np.testing.assert_allclose(a.to_numpy(), [[1.5, 1.0], [5.0, 4.0]])

    def test_isub_scalar(self, a):
        a -= 1
        np.testing.assert_allclose(a.to_numpy(), [[0, 1], [2, 3]])

    def test_imul_scalar(self, a):
        a *= 2
        np.testing.assert_allclose(a.to_numpy(), [[2, 4], [6, 8]])

    def test_itruediv_scalar(self, a):
        a /= 4
        np.testing.assert_allclose(a.to_numpy(), [[0.25, 0.5], [0.75, 1.0]])

    def test_view_in_place_writes_owner(self, m16):
        view = m16.slice((0, 4, 1), (1, 1, 1))
        view += 100
        assert isinstance(view, MatrixView)
        assert m16.col(1).tolist() == [[102], [106], [110], [114]]

    def test_row_update_with_other_row(self, a):
        target = a.row(1)
        target -= a.row(0) * 3
        np.testing.assert_allclose(a.to_numpy(), [[1, 2], [0, -2]])

    def test_shape_mismatch(self, a):
        with pytest.raises(DimensionMismatchError):
            a += Matrix(3, 3)

    def test_int_matrix_rejects_float_result(self):
        m = Matrix.from_rows([[1, 2]])
        with pytest.raises(ValidationError):
            m /= 2


class TestBinary:

    def test_add_returns_owning_matrix(self, a, b):
        c = a + b
        assert isinstance(c, Matrix)
        np.testing.assert_allclose(c.to_numpy(), a.to_numpy() + b.to_numpy())
        np.testing.assert_allclose(a.to_numpy(), [[1, 2], [3, 4]])

    def test_sub(self, a, b):
        np.testing.assert_allclose((a - b).to_numpy(), [[0.5, 3.0], [1.0, 4.0]])

    def test_scalar_reflected(self, a):
        np.testing.assert_allclose((1 + a).to_numpy(), [[2, 3], [4, 5]])
        np.testing.assert_allclose((10 - a).to_numpy(), [[9, 8], [7, 6]])
        np.testing.assert_allclose((2 * a).to_numpy(), [[2, 4], [6, 8]])

    def test_numpy_scalar_on_left(self, a):
        result = np.float64(2.0) * a
        assert isinstance(result, Matrix)
        np.testing.assert_allclose(result.to_numpy(), [[2, 4], [6, 8]])

    def test_matrix_product(self, a, b):
        expected = a.to_numpy() @ b.to_numpy()
        np.testing.assert_allclose((a * b).to_numpy(), expected)
        np.testing.assert_allclose((a @ b).to_numpy(), expected)

    def test_rectangular_product(self):
        left = Matrix.from_rows([[1, 2, 3]])
        right = Matrix.from_rows([[1], [1], [1]])
        assert (left @ right).tolist() == [[6]]
        assert (right @ left).shape == (3, 3)

    def test_product_of_views(self, m16):
        left = m16.slice((0, 2, 1), (0, 3, 1))
        right = m16.slice((0, 3, 1), (3, 1, 1))
        expected = m16.to_numpy()[:2, :3] @ m16.to_numpy()[:3, 3:]
        np.testing.assert_array_equal((left @ right).to_numpy(), expected)

    def test_product_shape_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="inner dimensions"):
            Matrix(2, 3) @ Matrix(2, 3)

    def test_division_and_negation(self, a):
        np.testing.assert_allclose((a / 2).to_numpy(), [[0.5, 1], [1.5, 2]])
        np.testing.assert_allclose((-a).to_numpy(), [[-1, -2], [-3, -4]])

    def test_view_plus_matrix(self, m16):
        result = m16.row(0) + Matrix.from_rows([[1, 1, 1, 1]])
        assert result.tolist() == [[2, 3, 4, 5]]

    def test_unsupported_operand(self, a):
        with pytest.raises(TypeError):
            a + "x"

"""
Owning matrix container.

A Matrix owns a row-major Storage buffer and exposes the full container
contract: construction, resize, in-place augmentation, arithmetic,
iteration and slicing into views. Reallocating operations (resize,
augment) bump the buffer generation, which invalidates every view issued
before the call.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from numerix.core.exceptions import ValidationError
from numerix.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_dtype,
    check_same_rows,
)
from numerix.linalg._axis import AxisDescriptor
from numerix.linalg._base import MatrixBase
from numerix.linalg._storage import Storage


class Matrix(MatrixBase):
    """
    Dense row-major matrix owning its storage.

    Args:
        rows: Number of rows (>= 0)
        cols: Number of columns (>= 0)
        dtype: Integer, floating or complex numpy dtype. Default float64.

    Raises:
        InvalidDimensionError: If rows or cols is negative or not an int
        ValidationError: If dtype is not numeric

    Examples:
        >>> m = Matrix.from_rows([[1, 2], [3, 4]])
        >>> m[0, 1] = 5
        >>> v = m.slice((0, 2, 1), (1, 1, 1))  # second column as a view
        >>> v += 1  # writes through to m
    """

    def __init__(self, rows: int, cols: int, dtype: Any = np.float64):
        n_rows, n_cols = check_dimension(rows, cols)
        storage = Storage.zeros(n_rows * n_cols, check_dtype(dtype, 'dtype'))
        super().__init__(
            storage,
            AxisDescriptor.rows_of(n_rows, n_cols),
            AxisDescriptor.cols_of(n_cols),
            storage.generation,
        )

    # --- Alternative constructors ---

    @classmethod
    def from_array(cls, array: ArrayLike, dtype: Any = None) -> Matrix:
        """
        Copy a 2D array-like (nested lists, ndarray, Matrix, MatrixView).

        Raises:
            ValidationError: If the input is not numeric
            DimensionError: If the input is not 2D
        """
        values = check_array(array, 'array', dtype=dtype)
        check_2d(values, 'array')
        result = cls(values.shape[0], values.shape[1], dtype=values.dtype)
        result._storage.data[:] = values.reshape(-1)
        return result

    @classmethod
    def from_rows(cls, rows: ArrayLike, dtype: Any = None) -> Matrix:
        """Build from a sequence of equally long rows."""
        return cls.from_array(rows, dtype=dtype)

    @classmethod
    def identity(cls, n: int, dtype: Any = np.float64) -> Matrix:
        """n x n identity."""
        result = cls(n, n, dtype=dtype)
        result._storage.data[::n + 1] = 1
        return result

    @property
    def owns_data(self) -> bool:
        return True

    @property
    def generation(self) -> int:
        """Number of reallocations this matrix has gone through."""
        return self._storage.generation

    # --- Reallocation ---

    def _reallocate(self, values: NDArray[Any]) -> None:
        n_rows, n_cols = values.shape
        self._storage.reallocate(values)
        self._row_axis = AxisDescriptor.rows_of(n_rows, n_cols)
        self._col_axis = AxisDescriptor.cols_of(n_cols)
        self._generation = self._storage.generation

    def resize(self, rows: int, cols: int) -> None:
        """
        Reallocate to rows x cols.

        The overlapping top-left block is kept, new elements are zero.
        Every view issued before the call becomes invalid.

        Raises:
            InvalidDimensionError: If rows or cols is negative
        """
        n_rows, n_cols = check_dimension(rows, cols)
        values = np.zeros((n_rows, n_cols), dtype=self.dtype)
        keep_rows, keep_cols = min(n_rows, self.n_rows), min(n_cols, self.n_cols)
        values[:keep_rows, :keep_cols] = self.to_numpy()[:keep_rows, :keep_cols]
        self._reallocate(values)

    def augment(self, other: MatrixBase) -> Matrix:
        """
        Append other's columns to the right of this matrix, in place.

        The dtype is promoted to the common type of both operands. Every
        view issued before the call becomes invalid.

        Args:
            other: Matrix or view with the same row count

        Returns:
            self, for chaining

        Raises:
            DimensionMismatchError: If the row counts differ
        """
        if not isinstance(other, MatrixBase):
            raise ValidationError(
                f"augment: expected a Matrix or MatrixView, got {type(other).__name__}"
            )
        check_same_rows(self.shape, other.shape, 'augment')
        # Read other first: it may be a view of self
        values = np.hstack([self.to_numpy(), other.to_numpy()])
        self._reallocate(values)
        return self


def augment(left: MatrixBase, right: MatrixBase) -> Matrix:
    """
    Horizontal concatenation into a new Matrix; operands are untouched.

    Raises:
        DimensionMismatchError: If the row counts differ
    """
    for name, operand in (('left', left), ('right', right)):
        if not isinstance(operand, MatrixBase):
            raise ValidationError(
                f"augment: {name} must be a Matrix or MatrixView, got {type(operand).__name__}"
            )
    check_same_rows(left.shape, right.shape, 'augment')
    return Matrix.from_array(np.hstack([left.to_numpy(), right.to_numpy()]))

"""
Input validation utilities for numerix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from numerix.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)


def is_integer(value: Any) -> bool:
    """True for Python and NumPy integers, False for bool."""
    return isinstance(value, (numbers.Integral, np.integer)) and not isinstance(
        value, (bool, np.bool_)
    )


def is_scalar(value: Any) -> bool:
    """True for numeric scalars usable in broadcast arithmetic."""
    return isinstance(value, (numbers.Number, np.number)) and not isinstance(
        value, (bool, np.bool_)
    )


def check_dtype(dtype: Any, name: str) -> np.dtype:
    """
    Validate that a dtype belongs to the supported numeric kinds.

    Supported kinds are signed/unsigned integer, floating point and
    complex.

    Args:
        dtype: Anything np.dtype() accepts
        name: Parameter name for error messages

    Returns:
        The normalised numpy dtype

    Raises:
        ValidationError: If dtype is not a numeric kind
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a valid dtype: {dtype!r}") from e

    if not np.issubdtype(result, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result}, expected integer, floating or complex"
        )
    return result


def check_dimension(rows: Any, cols: Any) -> tuple[int, int]:
    """
    Validate matrix extents.

    Args:
        rows: Requested row count
        cols: Requested column count

    Returns:
        (rows, cols) as Python ints

    Raises:
        InvalidDimensionError: If either extent is negative or not an integer
    """
    for name, value in (("rows", rows), ("cols", cols)):
        if not is_integer(value):
            raise InvalidDimensionError(
                f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}",
                rows=rows, cols=cols,
            )
        if value < 0:
            raise InvalidDimensionError(
                f"{name}: must be non-negative, got {value}",
                rows=rows, cols=cols,
            )
    return int(rows), int(cols)


def check_index(i: Any, j: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Validate a (row, col) element index against a logical shape.

    Negative indices are out of range; there is no wrap-around.

    Raises:
        IndexOutOfRangeError: If either index lies outside the shape
        ValidationError: If an index is not an integer
    """
    if not (is_integer(i) and is_integer(j)):
        raise ValidationError(
            f"index: expected integers, got ({type(i).__name__}, {type(j).__name__})"
        )
    n_rows, n_cols = shape
    if not (0 <= i < n_rows and 0 <= j < n_cols):
        raise IndexOutOfRangeError(
            f"index ({i}, {j}) out of range for shape {n_rows}x{n_cols}",
            index=(int(i), int(j)), shape=shape,
        )
    return int(i), int(j)


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes for an element-wise operation.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shape mismatch, {left[0]}x{left[1]} vs {right[0]}x{right[1]}",
            left_shape=left, right_shape=right, operation=operation,
        )


def check_product_shapes(left: tuple[int, int], right: tuple[int, int]) -> None:
    """
    Verify lhs.cols == rhs.rows for a matrix product.

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"matmul: inner dimensions differ, {left[0]}x{left[1]} @ {right[0]}x{right[1]}",
            left_shape=left, right_shape=right, operation="matmul",
        )


def check_same_rows(left: tuple[int, int], right: tuple[int, int], operation: str) -> None:
    """
    Verify two operands have the same row count (horizontal concatenation).

    Raises:
        DimensionMismatchError: If the row counts differ
    """
    if left[0] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: row counts differ, {left[0]} vs {right[0]}",
            left_shape=left, right_shape=right, operation=operation,
        )


def check_array(
    array: ArrayLike,
    name: str,
    dtype: Any = None,
) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (mixed types) or in non-numeric dtypes (strings, bools, datetimes).

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Optional target dtype

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array) if dtype is None else np.asarray(array, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_positive(value: float, name: str) -> None:
    """
    Verify a tolerance or step is strictly positive and finite.

    Raises:
        ValidationError: If value <= 0 or not finite
    """
    if not (np.isfinite(value) and value > 0):
        raise ValidationError(f"{name}: must be positive and finite, got {value}")


def check_choice(value: str, choices: tuple[str, ...], name: str) -> str:
    """
    Verify a keyword option is one of the allowed strings.

    Raises:
        ValidationError: If value is not in choices
    """
    if value not in choices:
        raise ValidationError(f"{name} must be one of {choices}, got {value!r}")
    return value

"""
Gauss-Jordan elimination kernel.

Operates on an augmented Matrix exclusively through views of its rows, so
every row operation is a view-level in-place update of the shared buffer.

The default path performs no pivoting and no zero checks: a zero or
near-zero pivot yields inf/nan entries that propagate into the solution.
Partial pivoting and singularity checks are opt-in.
"""

from __future__ import annotations

from typing import Literal

import numpy as np

from numerix.core.exceptions import (
    DimensionMismatchError,
    SingularMatrixError,
    ValidationError,
)
from numerix.core.precision import singular_threshold
from numerix.core.protocols import MatrixLike
from numerix.core.validation import check_choice, check_same_rows
from numerix.linalg._base import MatrixBase
from numerix.linalg.matrix import Matrix

PivotingChoice = Literal['none', 'partial']
PIVOTING_CHOICES = ('none', 'partial')


def working_dtype(*dtypes: np.dtype) -> np.dtype:
    """Common inexact dtype of the operands; integers promote to float64."""
    dtype = np.result_type(*dtypes)
    if not np.issubdtype(dtype, np.inexact):
        return np.dtype(np.float64)
    return dtype


def check_system(A: MatrixLike, b: MatrixLike) -> None:
    """
    Validate a square coefficient matrix and a matching right-hand side.

    Raises:
        ValidationError: If an operand is not a Matrix or MatrixView
        DimensionMismatchError: If A is not square or b has the wrong row count
    """
    for name, operand in (('A', A), ('b', b)):
        if not isinstance(operand, MatrixBase):
            raise ValidationError(
                f"{name}: expected a Matrix or MatrixView, got {type(operand).__name__}"
            )
    if A.n_rows != A.n_cols:
        raise DimensionMismatchError(
            f"A: coefficient matrix must be square, got {A.n_rows}x{A.n_cols}",
            left_shape=A.shape, operation='gauss_jordan',
        )
    check_same_rows(A.shape, b.shape, 'gauss_jordan')


def augmented_copy(A: MatrixLike, b: MatrixLike) -> Matrix:
    """[A | b] as a fresh Matrix in the working dtype; A and b are untouched."""
    augmented = Matrix.from_array(A, dtype=working_dtype(A.dtype, b.dtype))
    return augmented.augment(b)


def _swap_rows(augmented: Matrix, i: int, k: int) -> None:
    row_i, row_k = augmented.row(i), augmented.row(k)
    saved = row_i.copy()
    row_i.assign(row_k)
    row_k.assign(saved)


def forward_eliminate(
    augmented: Matrix,
    n: int,
    pivoting: PivotingChoice = 'none',
    threshold: float | None = None,
) -> int:
    """
    Normalise each pivot row and zero the column below it.

    Args:
        augmented: [A | b], modified in place
        n: Order of A
        pivoting: 'none' divides by the diagonal as found; 'partial' first
            swaps in the row with the largest magnitude entry
        threshold: If given, a pivot with |pivot| <= threshold raises

    Returns:
        Number of row swaps performed

    Raises:
        SingularMatrixError: If threshold is given and a pivot falls below it
    """
    width = augmented.n_cols
    swaps = 0
    for i in range(n):
        if pivoting == 'partial':
            candidates = np.abs(augmented.slice((i, n - i, 1), (i, 1, 1)).to_numpy()[:, 0])
            best = i + int(np.argmax(candidates))
            if best != i:
                _swap_rows(augmented, i, best)
                swaps += 1

        pivot = augmented[i, i]
        if threshold is not None and not abs(pivot) > threshold:
            raise SingularMatrixError(
                f"A is singular to working precision: pivot {pivot!r} at row {i} "
                f"is below threshold {threshold:.3g}",
                matrix_name='A', pivot=complex(pivot) if np.iscomplexobj(pivot) else float(pivot),
                row=i,
            )

        # Columns left of the pivot are already zero in this row
        pivot_tail = augmented.slice((i, 1, 1), (i, width - i, 1))
        pivot_tail /= pivot

        pivot_row = augmented.row(i)
        for k in range(i + 1, n):
            factor = augmented[k, i]
            target = augmented.row(k)
            target -= pivot_row * factor
    return swaps


def back_substitute(augmented: Matrix, n: int) -> None:
    """Zero the upper triangle, carrying every right-hand-side column."""
    m = augmented.n_cols - n
    for i in range(n - 1, -1, -1):
        rhs_i = augmented.slice((i, 1, 1), (n, m, 1))
        for j in range(i - 1, -1, -1):
            factor = augmented[j, i]
            rhs_j = augmented.slice((j, 1, 1), (n, m, 1))
            rhs_j -= rhs_i * factor
            augmented[j, i] = 0


def eliminate(
    A: MatrixLike,
    b: MatrixLike,
    pivoting: PivotingChoice = 'none',
    check_singular: bool = False,
) -> tuple[Matrix, int]:
    """
    Reduce [A | b] and return (solution, row_swaps).

    Floating point warnings from numpy are silenced here; callers decide
    how to report non-finite output.
    """
    check_choice(pivoting, PIVOTING_CHOICES, 'pivoting')
    check_system(A, b)

    n = A.n_rows
    augmented = augmented_copy(A, b)

    threshold = None
    if check_singular:
        scale = float(np.max(np.abs(A.to_numpy()))) if A.size else 0.0
        threshold = singular_threshold(scale, n, augmented.dtype)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        swaps = forward_eliminate(augmented, n, pivoting=pivoting, threshold=threshold)
        back_substitute(augmented, n)

    solution = augmented.slice((0, n, 1), (n, augmented.n_cols - n, 1)).copy()
    return solution, swaps

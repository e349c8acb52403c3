"""
Solver entry points for linear systems.

Provides gauss_jordan(), which returns the solution matrix directly, and
solve(), which returns a LinearSystemSolution with timing and diagnostics.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from numerix.core.compute.timing import Timer
from numerix.core.protocols import MatrixLike
from numerix.core.result import Result
from numerix.linalg._elimination import (
    PivotingChoice,
    check_system,
    eliminate,
)
from numerix.linalg.matrix import Matrix
from numerix.linalg.solution import LinearSystemParams, LinearSystemSolution


NON_FINITE_MESSAGE = (
    "Gauss-Jordan elimination produced non-finite values: a zero or "
    "near-zero pivot was divided by. Use pivoting='partial' or "
    "check_singular=True."
)


def _is_finite(x: Matrix) -> bool:
    return bool(np.all(np.isfinite(x.to_numpy())))


def gauss_jordan(
    A: MatrixLike,
    b: MatrixLike,
    *,
    pivoting: PivotingChoice = 'none',
    check_singular: bool = False,
) -> Matrix:
    """
    Solve A x = b by Gauss-Jordan elimination.

    A and b are copied; the caller's data is untouched. Integer inputs are
    promoted to float64.

    Parameters
    ----------
    A : Matrix or MatrixView
        Square coefficient matrix (n x n).
    b : Matrix or MatrixView
        Right-hand side (n x m).
    pivoting : str
        'none' (default) divides by each diagonal element as encountered.
        A zero pivot then yields inf/nan entries, reported by a
        RuntimeWarning rather than an exception. 'partial' swaps in the
        largest magnitude candidate first.
    check_singular : bool
        If True, raise SingularMatrixError instead of dividing by a pivot
        smaller than n * eps * max|A|.

    Returns
    -------
    Matrix
        Solution x (n x m).

    Raises
    ------
    DimensionMismatchError
        If A is not square or b.n_rows != A.n_rows.
    SingularMatrixError
        If check_singular is True and a pivot is numerically zero.
    """
    solution, _ = eliminate(A, b, pivoting=pivoting, check_singular=check_singular)
    if not _is_finite(solution):
        warnings.warn(NON_FINITE_MESSAGE, RuntimeWarning, stacklevel=2)
    return solution


def solve(
    A: MatrixLike,
    b: MatrixLike,
    *,
    pivoting: PivotingChoice = 'none',
    check_singular: bool = False,
) -> LinearSystemSolution:
    """
    Solve A x = b and report diagnostics.

    Same computation and parameters as gauss_jordan(). The result carries
    the solution, the residual norm ||A x - b||, the number of row swaps,
    per-phase timing, and any non-finite warning.

    Returns
    -------
    LinearSystemSolution
    """
    check_system(A, b)

    timer = Timer()
    timer.start()

    with timer.section('elimination'):
        solution, swaps = eliminate(A, b, pivoting=pivoting, check_singular=check_singular)

    finite = _is_finite(solution)
    with timer.section('residual'):
        if finite:
            residual_norm = float(np.linalg.norm((A @ solution - b).to_numpy()))
        else:
            residual_norm = float('nan')

    timer.stop()

    warning_list: list[str] = []
    if not finite:
        warnings.warn(NON_FINITE_MESSAGE, RuntimeWarning, stacklevel=2)
        warning_list.append(NON_FINITE_MESSAGE)

    params = LinearSystemParams(
        solution=solution,
        residual_norm=residual_norm,
        row_swaps=swaps,
        finite=finite,
    )
    info: dict[str, Any] = {
        'method': 'gauss_jordan',
        'pivoting': pivoting,
        'row_swaps': swaps,
        'finite': finite,
        'n': A.n_rows,
        'n_rhs': b.n_cols,
    }
    result = Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name='gauss_jordan',
        warnings=tuple(warning_list),
    )
    return LinearSystemSolution(_result=result)

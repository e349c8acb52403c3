"""
Solver dispatch for polynomial roots.

polysolve() picks the closed form for degree 1-3 and otherwise deflates
the polynomial one Laguerre root at a time until a cubic remains.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.polynomial import Polynomial
from numpy.typing import ArrayLike, NDArray

from numerix.core.exceptions import ValidationError
from numerix.core.precision import DEFAULT_TOLERANCE, MAX_ITERATIONS
from numerix.poly._analytic import cubic, linear, quadratic
from numerix.poly._common import as_polynomial, finish_roots, wants_complex
from numerix.poly._laguerre import laguerre


def polysolve(
    poly: Polynomial | ArrayLike,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
    complex_output: bool | None = None,
    rng: np.random.Generator | None = None,
) -> NDArray[Any]:
    """
    All roots of a polynomial.

    Parameters
    ----------
    poly : Polynomial or coefficients (ascending)
        Degree >= 1.
    tolerance : float
        Laguerre step tolerance, and the |imag| cut-off for real roots.
    max_iterations : int
        Iteration cap per Laguerre call.
    complex_output : bool or None
        Return all roots as complex. Default: only when the coefficients
        are complex; otherwise return the real roots.
    rng : numpy Generator or None
        Passed to laguerre() for reproducible perturbations.

    Returns
    -------
    ndarray
        Roots sorted by real part.

    Raises
    ------
    ValidationError
        If the polynomial has degree < 1.
    """
    original = as_polynomial(poly)
    degree = original.degree()
    if degree < 1:
        raise ValidationError(
            f"poly: polynomial must have degree >= 1, got degree {degree}"
        )

    work = Polynomial(original.coef.astype(np.complex128))

    if degree == 1:
        roots = [linear(work)]
    elif degree == 2:
        roots = list(quadratic(work, tolerance, complex_output=True))
    elif degree == 3:
        roots = list(cubic(work, tolerance, complex_output=True))
    else:
        roots = []
        while work.degree() > 3:
            root = laguerre(work, 0.0, tolerance, max_iterations, rng=rng)
            # Polish against the undeflated polynomial
            root = laguerre(original, root, tolerance, max_iterations, rng=rng)
            roots.append(root)
            work = work // Polynomial([-root, 1.0])
        roots.extend(cubic(work, tolerance, complex_output=True))

    return finish_roots(roots, tolerance, wants_complex(original, complex_output))

"""
Closed-form roots of linear, quadratic and cubic polynomials.

The quadratic and cubic formulas pick the sign of the discriminant root
that avoids cancellation (Numerical Recipes, section 5.6).
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.polynomial import Polynomial
from numpy.typing import ArrayLike, NDArray

from numerix.core.precision import DEFAULT_TOLERANCE
from numerix.poly._common import as_polynomial, check_degree, finish_roots, wants_complex


def _stable_sqrt(x: complex, disc: complex) -> complex:
    """sqrt(disc) with the sign that aligns it with x."""
    root = np.sqrt(np.complex128(disc))
    return root if (np.conj(x) * root).real >= 0.0 else -root


def linear(poly: Polynomial | ArrayLike) -> Any:
    """
    Root of c0 + c1 x.

    Raises:
        ValidationError: If the polynomial is not of degree 1
    """
    p = as_polynomial(poly)
    check_degree(p, 1, "linear polynomial")
    c0, c1 = p.coef
    return -c0 / c1


def quadratic(
    poly: Polynomial | ArrayLike,
    tolerance: float = DEFAULT_TOLERANCE,
    complex_output: bool | None = None,
) -> NDArray[Any]:
    """
    Roots of c0 + c1 x + c2 x^2.

    Parameters
    ----------
    poly : Polynomial or coefficients (ascending)
    tolerance : float
        Roots with |imag| below this count as real.
    complex_output : bool or None
        Return all roots as complex. Default: only when the coefficients
        are complex; otherwise return the real roots.

    Returns
    -------
    ndarray
        Roots sorted by real part.
    """
    p = as_polynomial(poly)
    check_degree(p, 2, "quadratic polynomial")
    c, b, a = (np.complex128(v) for v in p.coef)

    q = -0.5 * (b + _stable_sqrt(b, b * b - 4.0 * a * c))
    if q == 0:
        # b == c == 0: double root at the origin
        roots = [np.complex128(0), np.complex128(0)]
    else:
        roots = [q / a, c / q]
    return finish_roots(roots, tolerance, wants_complex(p, complex_output))


def cubic(
    poly: Polynomial | ArrayLike,
    tolerance: float = DEFAULT_TOLERANCE,
    complex_output: bool | None = None,
) -> NDArray[Any]:
    """
    Roots of c0 + c1 x + c2 x^2 + c3 x^3.

    Same parameters and return convention as quadratic().
    """
    p = as_polynomial(poly)
    check_degree(p, 3, "cubic polynomial")
    coef = p.coef.astype(np.complex128) / np.complex128(p.coef[-1])
    c, b, a = coef[0], coef[1], coef[2]

    Q = (a * a - 3.0 * b) / 9.0
    R = (2.0 * a * a * a - 9.0 * a * b + 27.0 * c) / 54.0
    A = -((R + _stable_sqrt(R, R * R - Q * Q * Q)) ** (1.0 / 3.0))
    B = np.complex128(0) if abs(A) == 0.0 else Q / A

    shift = a / 3.0
    half_sqrt3 = 0.5 * np.sqrt(3.0)
    roots = [
        A + B - shift,
        -0.5 * (A + B) - shift + half_sqrt3 * (A - B) * 1j,
        -0.5 * (A + B) - shift - half_sqrt3 * (A - B) * 1j,
    ]
    return finish_roots(roots, tolerance, wants_complex(p, complex_output))

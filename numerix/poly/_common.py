"""
Shared helpers for polynomial root finding.

Polynomials are numpy.polynomial.Polynomial instances; coefficient
sequences are accepted everywhere and read in ascending order
(constant term first).
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.polynomial import Polynomial
from numpy.typing import ArrayLike, NDArray

from numerix.core.exceptions import ValidationError
from numerix.core.validation import check_array, check_finite, check_ndim


def as_polynomial(poly: Polynomial | ArrayLike, name: str = "poly") -> Polynomial:
    """
    Validate and convert to a Polynomial with trailing zero terms trimmed.

    Raises:
        ValidationError: If coefficients are non-numeric, non-finite or empty
    """
    coef = poly.coef if isinstance(poly, Polynomial) else poly
    coef = check_array(coef, name)
    check_ndim(coef, 1, name)
    if coef.size == 0:
        raise ValidationError(f"{name}: polynomial has no coefficients")
    check_finite(coef, name)
    return Polynomial(coef).trim()


def check_degree(poly: Polynomial, degree: int, label: str) -> None:
    """Raise unless poly has exactly the given degree."""
    if poly.degree() != degree:
        raise ValidationError(
            f"poly: expected a {label} (degree {degree}), got degree {poly.degree()}"
        )


def wants_complex(poly: Polynomial, complex_output: bool | None) -> bool:
    """Complex output by request, else iff the coefficients are complex."""
    if complex_output is None:
        return bool(np.iscomplexobj(poly.coef))
    return complex_output


def finish_roots(
    roots: Any,
    tolerance: float,
    complex_output: bool,
) -> NDArray[Any]:
    """
    Sort roots by real part and optionally keep only the real ones.

    Args:
        roots: Iterable of complex roots
        tolerance: Roots with |imag| < tolerance count as real
        complex_output: If False, return the real parts of the real roots

    Returns:
        complex128 array, or float64 array of real roots
    """
    values = np.asarray(list(roots), dtype=np.complex128)
    values = values[np.argsort(values.real, kind='stable')]
    if complex_output:
        return values
    return values[np.abs(values.imag) < tolerance].real.copy()

"""
Polynomial root finding.

Polynomials are numpy.polynomial.Polynomial instances or coefficient
sequences in ascending order (constant term first).

Public API:
    linear(p)       - root of a degree-1 polynomial
    quadratic(p)    - roots of a degree-2 polynomial
    cubic(p)        - roots of a degree-3 polynomial
    laguerre(p, x0) - one root by Laguerre iteration
    polysolve(p)    - all roots, any degree >= 1
"""

from numerix.poly._analytic import linear, quadratic, cubic
from numerix.poly._laguerre import laguerre
from numerix.poly.solvers import polysolve

__all__ = [
    "linear",
    "quadratic",
    "cubic",
    "laguerre",
    "polysolve",
]

"""
numerix: a small numerical-computing toolkit.

Dense matrices with zero-copy, arbitrarily nested views, a Gauss-Jordan
solver, and scalar numerical recipes built on NumPy.

Submodules:
    linalg: Matrix, MatrixView, Gauss-Jordan elimination
    deriv: Finite-difference derivatives
    poly: Polynomial roots (closed form and Laguerre)
    roots: Bracketing and polishing scalar root finders
"""

__version__ = "0.1.0"

from numerix import linalg
from numerix import deriv
from numerix import poly
from numerix import roots
from numerix.linalg import Matrix, MatrixView, augment, gauss_jordan

__all__ = [
    "__version__",
    "linalg",
    "deriv",
    "poly",
    "roots",
    "Matrix",
    "MatrixView",
    "augment",
    "gauss_jordan",
]

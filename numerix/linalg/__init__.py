"""
Dense matrices, zero-copy views and Gauss-Jordan elimination.

Public API:
    Matrix              - owning row-major matrix
    MatrixView          - aliasing sub-window produced by slicing
    AxisDescriptor      - (offset, count, stride) addressing of one axis
    augment(a, b)       - horizontal concatenation into a new Matrix
    gauss_jordan(A, b)  - solve A x = b, returns x
    solve(A, b)         - solve A x = b, returns LinearSystemSolution
"""

from numerix.linalg._axis import AxisDescriptor
from numerix.linalg._base import ElementRef, MatrixRow
from numerix.linalg.matrix import Matrix, augment
from numerix.linalg.view import MatrixView
from numerix.linalg.solvers import gauss_jordan, solve
from numerix.linalg.solution import LinearSystemParams, LinearSystemSolution

__all__ = [
    "Matrix",
    "MatrixView",
    "AxisDescriptor",
    "ElementRef",
    "MatrixRow",
    "augment",
    "gauss_jordan",
    "solve",
    "LinearSystemParams",
    "LinearSystemSolution",
]

"""
Numerical differentiation by finite differences.

Public API:
    diff(f, x, step, method)   - derivative with a named stencil
    central(f, x)              - central Richardson first derivative
    forward(f, x)              - forward Richardson first derivative
    backward(f, x)             - backward Richardson first derivative
    derivative_of(f, method)   - f' as a callable
"""

from numerix.deriv.solvers import (
    METHODS,
    backward,
    central,
    derivative_of,
    diff,
    forward,
)

__all__ = [
    "METHODS",
    "diff",
    "central",
    "forward",
    "backward",
    "derivative_of",
]

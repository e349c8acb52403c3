"""
Numerical differentiation entry points.

Provides diff() with a named stencil, the Richardson shortcuts central(),
forward() and backward(), and derivative_of() which turns a function into
its numerical derivative.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from numerix.core.exceptions import NumericalError
from numerix.core.precision import DEFAULT_STEP
from numerix.core.validation import check_choice, check_positive
from numerix.deriv._stencils import STENCILS, Function

METHODS = tuple(STENCILS)


def effective_step(x: float, step: float) -> float:
    """Step scaled to |x| for large arguments, never below step itself."""
    return max(step, step * x)


def diff(
    function: Function,
    x: float,
    step: float | None = None,
    method: str = 'central_richardson',
) -> float:
    """
    Finite-difference derivative of function at x.

    Parameters
    ----------
    function : callable
        Scalar function f(x).
    x : float
        Evaluation point.
    step : float or None
        Base step h. Default eps**(1/3). The stencil is applied with
        max(h, h * x).
    method : str
        Stencil name, e.g. 'central_richardson' (default), 'central_5point',
        'forward_2point', 'second_central_3point'. See METHODS.

    Returns
    -------
    float

    Raises
    ------
    NumericalError
        If the stencil produces a non-finite value.
    """
    check_choice(method, METHODS, 'method')
    h = DEFAULT_STEP if step is None else step
    check_positive(h, 'step')

    h = effective_step(x, h)
    value = STENCILS[method](function, x, h)

    if not np.isfinite(value):
        raise NumericalError(
            f"Derivative ({method}) at x={x} with step {h:.3g} is non-finite: {value}"
        )
    return value


def central(function: Function, x: float, step: float | None = None) -> float:
    """First derivative by the central Richardson stencil."""
    return diff(function, x, step, method='central_richardson')


def forward(function: Function, x: float, step: float | None = None) -> float:
    """First derivative by the forward Richardson stencil."""
    return diff(function, x, step, method='forward_richardson')


def backward(function: Function, x: float, step: float | None = None) -> float:
    """First derivative by the backward Richardson stencil."""
    return diff(function, x, step, method='backward_richardson')


def derivative_of(
    function: Function,
    method: str = 'central_richardson',
    step: float | None = None,
) -> Callable[[float], float]:
    """
    Numerical derivative of function as a new callable.

    The method and step are validated once, here.
    """
    check_choice(method, METHODS, 'method')
    if step is not None:
        check_positive(step, 'step')

    def derivative(x: float) -> float:
        return diff(function, x, step, method)

    return derivative

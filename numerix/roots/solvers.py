"""
Solver dispatch for scalar root finding.

Provides fsolve() for bracketing methods (bisection, Ridder, regula falsi,
Brent) and polish() for derivative-based refinement (Newton, Steffensen).
Both return a RootSolution and raise ConvergenceError when the fixed
iteration cap is exhausted.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Literal

from numerix.core.compute.timing import Timer
from numerix.core.exceptions import ConvergenceError, ValidationError
from numerix.core.precision import DEFAULT_TOLERANCE, MAX_ITERATIONS
from numerix.core.result import Result
from numerix.core.validation import check_choice, check_positive, is_integer
from numerix.deriv import derivative_of
from numerix.roots._bracketing import BRACKETING_STEPS, Bracket
from numerix.roots._polishing import POLISHING_STEPS
from numerix.roots.solution import IterationState, RootParams, RootSolution

Function = Callable[[float], float]
Callback = Callable[[IterationState], Any]

BracketingMethod = Literal['bisection', 'ridder', 'regula_falsi', 'brent']
PolishingMethod = Literal['newton', 'steffensen']

BRACKETING_METHODS = ('bisection', 'ridder', 'regula_falsi', 'brent')
POLISHING_METHODS = ('newton', 'steffensen')


def _check_iteration_settings(tolerance: float, max_iterations: int) -> None:
    check_positive(tolerance, 'tolerance')
    if not is_integer(max_iterations) or max_iterations < 1:
        raise ValidationError(
            f"max_iterations must be a positive integer, got {max_iterations!r}"
        )


def _initial_bracket(f: Function, bounds: tuple[float, float]) -> Bracket:
    try:
        lower, upper = (float(v) for v in bounds)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"bounds: expected a (lower, upper) pair: {e}") from e
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise ValidationError(f"bounds: must be finite, got ({lower}, {upper})")
    if lower == upper:
        raise ValidationError(f"bounds: lower and upper are equal ({lower})")
    if lower > upper:
        lower, upper = upper, lower

    f_lower, f_upper = f(lower), f(upper)
    if f_lower * f_upper > 0:
        raise ValidationError(
            f"bounds: root is not bracketed, f({lower})={f_lower:.6g} and "
            f"f({upper})={f_upper:.6g} have the same sign"
        )
    return Bracket(lower, upper, f_lower, f_upper)


def _solution(
    method: str,
    root: float,
    function_value: float,
    iterations: int,
    converged: bool,
    bracket: tuple[float, float] | None,
    timer: Timer,
    stopped_by_callback: bool = False,
) -> RootSolution:
    timer.stop()
    params = RootParams(
        root=root,
        function_value=function_value,
        iterations=iterations,
        converged=converged,
        bracket=bracket,
    )
    info: dict[str, Any] = {
        'method': method,
        'converged': converged,
        'iterations': iterations,
        'stopped_by_callback': stopped_by_callback,
    }
    result = Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name=method,
    )
    return RootSolution(_result=result)


def _brent(
    f: Function,
    bracket: Bracket,
    tolerance: float,
    max_iterations: int,
    timer: Timer,
) -> RootSolution:
    from scipy.optimize import brentq

    root, report = brentq(
        f, bracket.lower, bracket.upper,
        xtol=tolerance, maxiter=max_iterations,
        full_output=True, disp=False,
    )
    if not report.converged:
        raise ConvergenceError(
            f"Brent's method did not converge after {report.iterations} iterations: "
            f"{report.flag}",
            iterations=report.iterations,
            reason='max_iterations',
            threshold=tolerance,
        )
    return _solution('brent', root, f(root), report.iterations, True, None, timer)


def fsolve(
    function: Function,
    bounds: tuple[float, float],
    method: BracketingMethod = 'ridder',
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
    callback: Callback | None = None,
) -> RootSolution:
    """
    Find a root of function inside a bracketing interval.

    Parameters
    ----------
    function : callable
        Continuous scalar function.
    bounds : (float, float)
        Interval whose endpoints have function values of opposite sign.
    method : str
        'ridder' (default), 'bisection', 'regula_falsi' or 'brent'
        (delegates to scipy.optimize.brentq).
    tolerance : float
        Converged when |f(guess)| <= tolerance or the bracket is narrower
        than tolerance.
    max_iterations : int
        Iteration cap.
    callback : callable or None
        Called after every iteration with an IterationState. Returning
        True stops the search and returns the current guess. Not supported
        with 'brent'.

    Returns
    -------
    RootSolution

    Raises
    ------
    ValidationError
        If the interval does not bracket a root or an option is invalid.
    ConvergenceError
        If the iteration cap is reached before convergence.
    """
    check_choice(method, BRACKETING_METHODS, 'method')
    _check_iteration_settings(tolerance, max_iterations)

    timer = Timer()
    timer.start()
    bracket = _initial_bracket(function, bounds)

    for endpoint, value in ((bracket.lower, bracket.f_lower), (bracket.upper, bracket.f_upper)):
        if value == 0:
            return _solution(method, endpoint, value, 0, True,
                             (bracket.lower, bracket.upper), timer)

    if method == 'brent':
        if callback is not None:
            raise ValidationError("callback is not supported with method='brent'")
        return _brent(function, bracket, tolerance, max_iterations, timer)

    step = BRACKETING_STEPS[method]
    for iteration in range(max_iterations):
        bracket, guess, f_guess = step(function, bracket)
        converged = abs(f_guess) <= tolerance or bracket.width <= tolerance

        stop = False
        if callback is not None:
            stop = callback(IterationState(iteration, bracket.lower, guess, bracket.upper)) is True

        if converged or stop:
            return _solution(method, guess, f_guess, iteration + 1, converged,
                             (bracket.lower, bracket.upper), timer,
                             stopped_by_callback=stop and not converged)

    raise ConvergenceError(
        f"{method} did not converge after {max_iterations} iterations "
        f"(bracket width {bracket.width:.3g}, tolerance {tolerance:.3g})",
        iterations=max_iterations,
        final_change=bracket.width,
        reason='max_iterations',
        threshold=tolerance,
    )


def polish(
    function: Function,
    guess: float,
    method: PolishingMethod = 'newton',
    *,
    derivative: Function | None = None,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
    callback: Callback | None = None,
) -> RootSolution:
    """
    Refine a root estimate with Newton or Steffensen iteration.

    Parameters
    ----------
    function : callable
        Differentiable scalar function.
    guess : float
        Starting point, close to the root.
    method : str
        'newton' (default) or 'steffensen' (derivative-free).
    derivative : callable or None
        f' for Newton. Default: numerical central Richardson derivative.
    tolerance : float
        Converged when |f(x)| <= tolerance or the step is smaller than
        tolerance.
    max_iterations : int
        Iteration cap.
    callback : callable or None
        Called after every iteration with an IterationState (lower and
        upper are None). Returning True stops the search.

    Returns
    -------
    RootSolution

    Raises
    ------
    NumericalError
        If a zero slope makes the step undefined.
    ConvergenceError
        If the iteration cap is reached before convergence.
    """
    check_choice(method, POLISHING_METHODS, 'method')
    _check_iteration_settings(tolerance, max_iterations)

    timer = Timer()
    timer.start()

    df = derivative
    if method == 'newton' and df is None:
        df = derivative_of(function)

    step_fn = POLISHING_STEPS[method]
    x = float(guess)
    fx = function(x)
    if abs(fx) <= tolerance:
        return _solution(method, x, fx, 0, True, None, timer)

    step = math.inf
    for iteration in range(max_iterations):
        step = step_fn(function, df, x, fx)
        x = x - step
        fx = function(x)
        if not math.isfinite(x):
            raise ConvergenceError(
                f"{method} diverged at iteration {iteration + 1}",
                iterations=iteration + 1,
                final_change=abs(step),
                reason='diverging',
                threshold=tolerance,
            )
        converged = abs(fx) <= tolerance or abs(step) < tolerance

        stop = False
        if callback is not None:
            stop = callback(IterationState(iteration, None, x, None)) is True

        if converged or stop:
            return _solution(method, x, fx, iteration + 1, converged, None, timer,
                             stopped_by_callback=stop and not converged)

    raise ConvergenceError(
        f"{method} did not converge after {max_iterations} iterations "
        f"(last step {abs(step):.3g}, tolerance {tolerance:.3g})",
        iterations=max_iterations,
        final_change=abs(step),
        reason='max_iterations',
        threshold=tolerance,
    )

"""
Single-iteration updates for derivative-based (polishing) root finders.

Each step returns the increment to subtract from the current guess.
"""

from __future__ import annotations

from typing import Callable

from numerix.core.exceptions import NumericalError

Function = Callable[[float], float]


def newton_step(f: Function, df: Function, x: float, fx: float) -> float:
    slope = df(x)
    if slope == 0:
        raise NumericalError(f"Newton step undefined: f'({x}) == 0")
    return fx / slope


def steffensen_step(f: Function, df: Function | None, x: float, fx: float) -> float:
    # Slope estimated from the secant through x and x + f(x)
    slope = (f(x + fx) - fx) / fx
    if slope == 0:
        raise NumericalError(f"Steffensen step undefined: zero slope estimate at x={x}")
    return fx / slope


POLISHING_STEPS: dict[str, Callable[[Function, Function | None, float, float], float]] = {
    'newton': newton_step,
    'steffensen': steffensen_step,
}

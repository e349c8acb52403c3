"""
Single-iteration updates for bracketing root finders.

Every step function takes a Bracket whose endpoints straddle a sign change
and returns the next Bracket plus the newest guess and its function value.
The invariant lower < upper and sign(f_lower) != sign(f_upper) holds for
every bracket produced.
"""

from __future__ import annotations

import math
from typing import Callable, NamedTuple

Function = Callable[[float], float]


class Bracket(NamedTuple):
    lower: float
    upper: float
    f_lower: float
    f_upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


class Step(NamedTuple):
    bracket: Bracket
    guess: float
    f_guess: float


def _same_sign(a: float, b: float) -> bool:
    return math.copysign(1.0, a) == math.copysign(1.0, b)


def _narrow(bracket: Bracket, x: float, fx: float) -> Bracket:
    """Replace the endpoint on the same side of the sign change as x."""
    if _same_sign(fx, bracket.f_lower):
        return Bracket(x, bracket.upper, fx, bracket.f_upper)
    return Bracket(bracket.lower, x, bracket.f_lower, fx)


def bisection_step(f: Function, bracket: Bracket) -> Step:
    mid = bracket.lower + 0.5 * bracket.width
    f_mid = f(mid)
    return Step(_narrow(bracket, mid, f_mid), mid, f_mid)


def regula_falsi_step(f: Function, bracket: Bracket) -> Step:
    lo, hi, f_lo, f_hi = bracket
    x = (lo * f_hi - hi * f_lo) / (f_hi - f_lo)
    fx = f(x)
    return Step(_narrow(bracket, x, fx), x, fx)


def ridder_step(f: Function, bracket: Bracket) -> Step:
    lo, hi, f_lo, f_hi = bracket
    mid = lo + 0.5 * (hi - lo)
    f_mid = f(mid)
    s = math.sqrt(f_mid * f_mid - f_lo * f_hi)
    if s == 0.0:
        return Step(_narrow(bracket, mid, f_mid), mid, f_mid)

    x = mid + (mid - lo) * math.copysign(1.0, f_lo - f_hi) * f_mid / s
    fx = f(x)

    # Tightest sign change among lo, mid, x, hi
    if not _same_sign(f_mid, fx):
        a, fa, b, fb = (mid, f_mid, x, fx) if mid < x else (x, fx, mid, f_mid)
        new = Bracket(a, b, fa, fb)
    else:
        new = _narrow(bracket, x, fx)
    return Step(new, x, fx)


BRACKETING_STEPS: dict[str, Callable[[Function, Bracket], Step]] = {
    'bisection': bisection_step,
    'regula_falsi': regula_falsi_step,
    'ridder': ridder_step,
}

"""
Scalar root finding.

Public API:
    fsolve(f, bounds, method)  - bracketing: 'ridder', 'bisection',
                                 'regula_falsi', 'brent'
    polish(f, guess, method)   - refinement: 'newton', 'steffensen'
"""

from numerix.roots.solvers import fsolve, polish
from numerix.roots.solution import IterationState, RootParams, RootSolution

__all__ = [
    "fsolve",
    "polish",
    "IterationState",
    "RootParams",
    "RootSolution",
]

"""
Scalar root-finding solution types.

RootSolution wraps Result[RootParams]. IterationState is what per-iteration
callbacks receive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple

from numerix.core.result import Result


class IterationState(NamedTuple):
    """
    Snapshot passed to iteration callbacks.

    lower and upper are the current bracket for bracketing methods and
    None for polishing methods.
    """
    iteration: int
    lower: float | None
    guess: float
    upper: float | None


@dataclass(frozen=True)
class RootParams:
    """
    Parameter payload for a scalar root.

    Attributes:
        root: Final estimate
        function_value: f(root)
        iterations: Iterations performed
        converged: True if the tolerance criterion was met; a callback
            may stop the search before that
        bracket: Final (lower, upper) for bracketing methods, else None
    """
    root: float
    function_value: float
    iterations: int
    converged: bool
    bracket: tuple[float, float] | None = None


@dataclass
class RootSolution:
    """User-facing result of fsolve() and polish()."""
    _result: Result[RootParams]

    @property
    def root(self) -> float:
        return self._result.params.root

    @property
    def function_value(self) -> float:
        return self._result.params.function_value

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def bracket(self) -> tuple[float, float] | None:
        return self._result.params.bracket

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    def summary(self) -> str:
        lines = [
            f"Root finding ({self.method})",
            f"  root:           {self.root:.12g}",
            f"  f(root):        {self.function_value:.3g}",
            f"  iterations:     {self.iterations}",
            f"  converged:      {self.converged}",
        ]
        if self.bracket is not None:
            lines.append(f"  final bracket:  [{self.bracket[0]:.12g}, {self.bracket[1]:.12g}]")
        if self.info.get('stopped_by_callback'):
            lines.append("  stopped by callback")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RootSolution(root={self.root!r}, method={self.method!r}, "
            f"iterations={self.iterations})"
        )

"""
Linear system solution types.

LinearSystemSolution wraps Result[LinearSystemParams] and exposes the
solution matrix plus elimination diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from numerix.core.result import Result
from numerix.linalg.matrix import Matrix


@dataclass(frozen=True)
class LinearSystemParams:
    """
    Parameter payload for a solved system A x = b.

    Attributes:
        solution: x, shape n x m
        residual_norm: Frobenius norm of A x - b (nan if x is non-finite)
        row_swaps: Row exchanges performed by partial pivoting
        finite: False if any entry of x is inf or nan
    """
    solution: Matrix
    residual_norm: float
    row_swaps: int
    finite: bool


@dataclass
class LinearSystemSolution:
    """
    User-facing result of numerix.linalg.solve().

    Wraps Result[LinearSystemParams]; all payload fields are available as
    properties.
    """
    _result: Result[LinearSystemParams]

    @property
    def x(self) -> Matrix:
        """Solution matrix (n x m)."""
        return self._result.params.solution

    @property
    def solution(self) -> Matrix:
        return self._result.params.solution

    @property
    def residual_norm(self) -> float:
        return self._result.params.residual_norm

    @property
    def row_swaps(self) -> int:
        return self._result.params.row_swaps

    @property
    def is_finite(self) -> bool:
        return self._result.params.finite

    @property
    def pivoting(self) -> str:
        return self._result.info['pivoting']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Short multi-line report of the solve."""
        n, m = self.x.shape
        lines = [
            "Gauss-Jordan elimination",
            f"  system:        {n} x {n}, {m} right-hand side(s)",
            f"  pivoting:      {self.pivoting} ({self.row_swaps} row swaps)",
            f"  residual norm: {self.residual_norm:.6g}",
        ]
        if self.timing is not None:
            lines.append(f"  time:          {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        lines.append("")
        lines.append(self.x.to_string())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(shape={self.x.shape}, pivoting={self.pivoting!r}, "
            f"residual_norm={self.residual_norm:.3g})"
        )

"""
Result envelope shared by solve() and fsolve().

solve() stores a LinearSystemParams payload and fsolve() a RootParams
payload. The wrappers in numerix.linalg.solution and numerix.roots.solution
expose the payload fields as properties and keep the envelope in _result.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # LinearSystemParams or RootParams


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable record of one solver call.

    Attributes:
        params: Solution payload (LinearSystemParams or RootParams)
        info: Method name plus method-specific keys. solve() adds
            pivoting, row_swaps, finite, n and n_rhs; fsolve() adds
            converged, iterations and stopped_by_callback.
        timing: Seconds per Timer section, or None if not measured
        backend_name: 'gauss_jordan', or the root-finding method name
        warnings: Non-fatal diagnostics, also emitted via warnings.warn
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

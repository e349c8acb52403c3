"""
Shared compute infrastructure for numerix.

This module provides timing utilities and tolerance tiers that are shared
across all domain-specific solvers.

Submodules:
    timing: Execution timing utilities
    tolerances: Comparison tolerances per working dtype
"""

from numerix.core.compute.timing import Timer, timed
from numerix.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]

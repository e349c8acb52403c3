"""
Core infrastructure for numerix.

This module provides shared abstractions and utilities used by all
domain-specific submodules (linalg, deriv, poly, roots).

Key components:
    protocols: MatrixLike protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Epsilon, default tolerances and iteration caps
    compute: Timing and tolerance tiers
"""

from numerix.core.protocols import MatrixLike
from numerix.core.result import Result
from numerix.core.exceptions import (
    NumerixError,
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidSliceError,
    UseAfterInvalidationError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "MatrixLike",
    # Result
    "Result",
    # Exceptions
    "NumerixError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "InvalidSliceError",
    "UseAfterInvalidationError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
]

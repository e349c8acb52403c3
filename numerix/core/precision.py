"""
Numerical precision constants and utilities.

Provides machine epsilon, default tolerances and iteration caps shared by
the elimination, differentiation, polynomial and root-finding modules.
"""

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Default convergence / root-filtering tolerance (absolute)
DEFAULT_TOLERANCE: float = 1e-10

# Iteration cap for every iterative method in the package
MAX_ITERATIONS: int = 100

# Finite-difference step: cube root of epsilon balances truncation
# against round-off for central formulas
DEFAULT_STEP: float = float(np.cbrt(EPSILON_64))  # ~6.06e-6


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Complex dtypes report the epsilon of their component type. Integer
    dtypes have no epsilon and report float64's, since elimination
    promotes them.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.inexact):
        return float(np.finfo(dtype).eps)
    return EPSILON_64


def singular_threshold(scale: float, n: int, dtype: np.dtype | type = np.float64) -> float:
    """
    Pivot magnitude below which a matrix is treated as singular.

    Args:
        scale: Largest absolute entry of the coefficient matrix
        n: Matrix order
        dtype: Working dtype

    Returns:
        n * eps * scale
    """
    return max(n, 1) * machine_epsilon(dtype) * scale

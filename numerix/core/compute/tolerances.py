"""
Tolerance tiers for numerical validation.

Defines precision expectations for different working dtypes:
- float64: reference double precision
- float32: relaxed for single-precision arithmetic
- complex: same as the component float type
- ill-conditioned variants for systems with cond(A) > 1e4

Used by MatrixBase.allclose to pick default tolerances from the working
dtype, and by the test suite for array comparisons.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance tier for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FLOAT64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float64',
    description='Double precision, well-conditioned',
)

FLOAT64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='float64_ill_conditioned',
    description='Double precision, ill-conditioned (cond > 1e4)',
)

FLOAT32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='float32',
    description='Single precision, well-conditioned',
)

FLOAT32_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='float32_ill_conditioned',
    description='Single precision, ill-conditioned',
)


def select_tolerance(
    dtype: np.dtype | type = np.float64,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a working dtype."""
    dtype = np.dtype(dtype)
    # complex64 and float32 share a component precision
    single = dtype in (np.dtype(np.float32), np.dtype(np.complex64), np.dtype(np.float16))
    if single:
        if is_ill_conditioned:
            return FLOAT32_ILL_CONDITIONED
        return FLOAT32
    if is_ill_conditioned:
        return FLOAT64_ILL_CONDITIONED
    return FLOAT64

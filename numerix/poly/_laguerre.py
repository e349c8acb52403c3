"""
Laguerre's method for a single complex polynomial root.

Converges cubically to simple roots from almost any starting point. The
step is shrunk by a random factor every tenth iteration to break limit
cycles.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.polynomial import Polynomial
from numpy.typing import ArrayLike

from numerix.core.precision import DEFAULT_TOLERANCE, MAX_ITERATIONS
from numerix.core.validation import check_positive
from numerix.poly._common import as_polynomial

# Replacement for a non-finite step (p(x) == 0 handled separately)
FALLBACK_STEP = 0.1

PERTURBATION_PERIOD = 10


def _laguerre_step(G: complex, H: complex, n: int) -> complex:
    root = np.sqrt((n - 1) * (n * H - G * G))
    plus, minus = G + root, G - root
    denominator = plus if abs(plus) > abs(minus) else minus
    return n / denominator


def laguerre(
    poly: Polynomial | ArrayLike,
    guess: complex = 1.0,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
    rng: np.random.Generator | None = None,
) -> complex:
    """
    One root of poly by Laguerre iteration from guess.

    Parameters
    ----------
    poly : Polynomial or coefficients (ascending)
    guess : complex
        Starting point. Returned unchanged if |poly(guess)| < tolerance.
    tolerance : float
        Stop when the step magnitude falls below this.
    max_iterations : int
        Iteration cap. Reaching it emits a RuntimeWarning and returns the
        last iterate.
    rng : numpy Generator or None
        Source of the periodic step perturbation. Default: fresh generator.

    Returns
    -------
    complex
    """
    check_positive(tolerance, 'tolerance')
    p = as_polynomial(poly)
    p = Polynomial(p.coef.astype(np.complex128))
    n = p.degree()
    x = np.complex128(guess)

    if n < 1 or abs(p(x)) < tolerance:
        return complex(x)

    d1 = p.deriv()
    d2 = d1.deriv()
    rng = np.random.default_rng() if rng is None else rng
    step = np.complex128(np.inf)

    with np.errstate(all='ignore'):
        for i in range(max_iterations):
            px = p(x)
            if px == 0:
                return complex(x)
            G = d1(x) / px
            H = G * G - d2(x) / px
            step = _laguerre_step(G, H, n)
            if not np.isfinite(step):
                step = np.complex128(FALLBACK_STEP)
            if abs(step) < tolerance:
                return complex(x)
            if (i + 1) % PERTURBATION_PERIOD == 0:
                step *= rng.uniform()
            x = x - step

    warnings.warn(
        f"Laguerre iteration did not converge after {max_iterations} iterations "
        f"(last step {abs(step):.3g}, tolerance {tolerance:.3g})",
        RuntimeWarning,
        stacklevel=2,
    )
    return complex(x)

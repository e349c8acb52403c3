"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from numerix.linalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m16():
    """4x4 matrix holding 1..16 row-major."""
    return Matrix.from_array(np.arange(1, 17).reshape(4, 4))


@pytest.fixture
def well_conditioned_system(rng):
    """Random diagonally dominant 6x6 system with two right-hand sides."""
    n = 6
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    b = rng.standard_normal((n, 2))
    return A, b

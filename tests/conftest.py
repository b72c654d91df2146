"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a_2x3():
    """2x3 matrix with small exact values."""
    return Matrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def b_3x2():
    """3x2 matrix with small exact values."""
    return Matrix([[7, 8], [9, 10], [11, 12]])


@pytest.fixture
def random_pair(rng):
    """Two random 4x5 float64 arrays for comparison against numpy."""
    return rng.standard_normal((4, 5)), rng.standard_normal((4, 5))

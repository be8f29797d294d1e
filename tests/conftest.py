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
def a_matrix():
    """A = [[1, 2], [3, 4]] (int64)."""
    return Matrix.from_rows([[1, 2], [3, 4]], dtype=np.int64)


@pytest.fixture
def b_matrix():
    """B = [[5, 6], [7, 8]] (int64)."""
    return Matrix.from_rows([[5, 6], [7, 8]], dtype=np.int64)


@pytest.fixture
def random_int_matrix(rng):
    """Factory for small integer matrices, exact under every operation."""
    def make(rows, columns):
        values = rng.integers(-9, 10, size=(rows, columns), dtype=np.int64)
        return Matrix.from_data(values, rows, columns)
    return make

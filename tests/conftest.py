"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_pair():
    """The 2x2 pair used in the worked multiplication example."""
    A = np.array([[1.0, 2.0], [3.0, 4.0]])
    B = np.array([[5.0, 6.0], [7.0, 8.0]])
    return A, B


@pytest.fixture
def well_conditioned(rng):
    """Random square matrix shifted to be comfortably invertible."""
    n = 5
    return rng.standard_normal((n, n)) + n * np.eye(n)


@pytest.fixture
def simple_regression_data(rng):
    """Simple regression dataset for basic tests."""
    n, p = 100, 3
    X = rng.standard_normal((n, p))
    beta_true = np.array([1.0, -2.0, 0.5])
    y = X @ beta_true + rng.standard_normal(n) * 0.1
    return X, y, beta_true


@pytest.fixture
def rank_deficient_data(rng):
    """Dataset whose third predictor is identically zero."""
    n = 100
    X = np.column_stack([
        rng.standard_normal(n),
        rng.standard_normal(n),
        np.zeros(n),
    ])
    y = X[:, 0] - X[:, 1] + rng.standard_normal(n) * 0.1
    return X, y


@pytest.fixture
def collinear_data(rng):
    """Dataset with perfect collinearity."""
    n = 100
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = x1 + x2  # Perfect collinearity
    X = np.column_stack([x1, x2, x3])
    y = rng.standard_normal(n)
    return X, y

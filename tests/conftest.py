"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyols import set_singular_rtol
from pyols._config import ENV_SINGULAR_RTOL


@pytest.fixture(autouse=True)
def _default_singular_rtol(monkeypatch):
    """Every test starts from the default tolerance resolution."""
    monkeypatch.delenv(ENV_SINGULAR_RTOL, raising=False)
    set_singular_rtol(None)
    yield
    set_singular_rtol(None)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_regression_data(rng):
    """Three predictors, intercept 1.0, low noise. Returns (X, y, beta_true)."""
    n, p = 100, 3
    X = rng.standard_normal((n, p))
    beta_true = np.array([1.0, 2.0, -1.5, 0.5])
    y = beta_true[0] + X @ beta_true[1:] + rng.standard_normal(n) * 0.1
    return X, y, beta_true


@pytest.fixture
def closed_form_data():
    """Hand-computable single-predictor example."""
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    y = np.array([2.0, 4.0, 5.0, 4.0, 5.0])
    return x, y


@pytest.fixture
def collinear_data(rng):
    """Dataset with perfect collinearity (should fail)."""
    n = 100
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = x1 + x2
    X = np.column_stack([x1, x2, x3])
    y = rng.standard_normal(n)
    return X, y

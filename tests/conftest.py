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
def periods():
    """Periods 0..49 as used for a time series."""
    return np.arange(50, dtype=np.float64)


@pytest.fixture
def noisy_trend(rng, periods):
    """Linear trend with Gaussian noise: y = 3 + 0.5·t + ε."""
    intercept_true, slope_true = 3.0, 0.5
    y = intercept_true + slope_true * periods + rng.standard_normal(periods.shape[0])
    return periods, y, intercept_true, slope_true


@pytest.fixture
def reference_series():
    """Five-point series from the command-line demo."""
    return np.arange(5, dtype=np.float64), np.array([2.0, 3.0, 5.0, 7.0, 11.0])

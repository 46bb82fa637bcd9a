"""
Prediction and goodness-of-fit kernels.

These run after validation, on whatever the caller passes. They never raise
on degenerate data: division by a zero sum of squares or by n == 0 comes
back as NaN or ±inf, so callers can detect the condition downstream.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray


def line(intercept: float, slope: float, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """Evaluate intercept + slope·x; scalar in, float out."""
    if np.ndim(x) == 0:
        return intercept + slope * float(x)
    return intercept + slope * np.asarray(x, dtype=np.float64)


def residual_sum_of_squares(
    intercept: float,
    slope: float,
    x: ArrayLike,
    y: ArrayLike,
) -> float:
    """Σ(y − ŷ)²."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    residuals = y - (intercept + slope * x)
    return float(np.sum(residuals * residuals))


def total_sum_of_squares(y: ArrayLike) -> float:
    """Σ(y − ȳ)²; NaN for an empty series."""
    y = np.asarray(y, dtype=np.float64)
    with np.errstate(divide='ignore', invalid='ignore'):
        mean_y = np.sum(y) / np.float64(y.shape[0])
    centered = y - mean_y
    return float(np.sum(centered * centered))


def coefficient_of_determination(rss: float, tss: float) -> float:
    """1 − RSS/TSS, with 0/0 giving NaN rather than an exception."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(1.0) - np.float64(rss) / np.float64(tss))


def mean_squared_error(rss: float, n: int) -> float:
    """RSS/n, with n == 0 giving NaN."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(rss) / np.float64(n))

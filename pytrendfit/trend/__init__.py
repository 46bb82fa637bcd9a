"""
Least-squares trend lines for one-dimensional time series.

Public API:
    fit(x, y, ...)        -> TrendSolution
    fit_series(y, ...)    -> TrendSolution (periods 0, 1, ..., n-1)
    predict(model, x)     -> float | ndarray
    r_squared(model, x, y) -> float
    mse(model, x, y)      -> float
    forecast(model, horizon) -> ndarray

Example:
    >>> from pytrendfit.trend import fit_series
    >>> model = fit_series([2.0, 3.0, 5.0, 7.0, 11.0])
    >>> print(model.summary())
    >>> model.forecast(3)
"""

from pytrendfit.trend.design import TrendDesign
from pytrendfit.trend.solution import TrendSolution, TrendParams
from pytrendfit.trend.solvers import (
    fit,
    fit_series,
    predict,
    r_squared,
    mse,
    forecast,
)

__all__ = [
    "fit",
    "fit_series",
    "predict",
    "r_squared",
    "mse",
    "forecast",
    "TrendDesign",
    "TrendSolution",
    "TrendParams",
]

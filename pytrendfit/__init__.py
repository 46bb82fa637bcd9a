"""
pytrendfit: least-squares trend fitting and forecasting for time series.

Fits the ordinary least-squares line ŷ = intercept + slope·x to a
one-dimensional series, forecasts future periods with it, and scores the
fit with R² and mean squared error.

Submodules:
    trend: Fitting, prediction and scoring
    core: Result envelope, exceptions, validation
"""

__version__ = "0.1.0"

from pytrendfit import trend
from pytrendfit.trend import (
    fit,
    fit_series,
    predict,
    r_squared,
    mse,
    forecast,
    TrendSolution,
)
from pytrendfit.core.exceptions import (
    PyTrendfitError,
    ShapeMismatchError,
    EmptyInputError,
    DegenerateInputError,
)

__all__ = [
    "__version__",
    "trend",
    "fit",
    "fit_series",
    "predict",
    "r_squared",
    "mse",
    "forecast",
    "TrendSolution",
    "PyTrendfitError",
    "ShapeMismatchError",
    "EmptyInputError",
    "DegenerateInputError",
]

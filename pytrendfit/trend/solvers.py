"""
Solver dispatch for trend fitting.

This module provides the public API: fit() and fit_series() build a model,
predict(), r_squared(), mse() and forecast() operate on one.
"""

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pytrendfit.core.exceptions import ValidationError
from pytrendfit.trend import _metrics
from pytrendfit.trend.design import TrendDesign
from pytrendfit.trend.solution import TrendSolution
from pytrendfit.trend.backends.cpu import CPUClosedFormBackend


BackendChoice = Literal['auto', 'cpu']


def fit(
    x: ArrayLike | TrendDesign,
    y: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> TrendSolution:
    """
    Fit a least-squares trend line y ≈ intercept + slope·x.

    Args:
        x: Periods (n,), or a prebuilt TrendDesign.
        y: Observations (n,). Required unless x is a TrendDesign.
        backend: 'auto' or 'cpu'; both use the closed-form CPU estimator.

    Returns:
        TrendSolution with coefficients, in-sample diagnostics and
        prediction methods

    Raises:
        ValidationError: If inputs are not numeric, or backend is unknown
        DimensionError: If inputs are not 1D series
        ShapeMismatchError: If x and y differ in length
        EmptyInputError: If x and y are empty (a ShapeMismatchError)
        DegenerateInputError: If n·Σx² − (Σx)² is exactly zero

    Example:
        >>> from pytrendfit import fit
        >>> model = fit([0, 1, 2, 3], [2, 4, 6, 8])
        >>> model.intercept, model.slope
        (2.0, 2.0)
        >>> model.predict(4)
        10.0
    """
    # This is the boundary - validate here, trust everywhere else
    if isinstance(x, TrendDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y required when x is not a TrendDesign")
        design = TrendDesign.from_arrays(x, y)

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)
    return TrendSolution(_result=result)


def fit_series(
    y: ArrayLike,
    *,
    start: float = 0.0,
    step: float = 1.0,
    backend: BackendChoice = 'auto',
) -> TrendSolution:
    """
    Fit a trend line to observations taken at evenly spaced periods.

    Periods are start, start + step, start + 2·step, ...; the defaults
    give 0, 1, ..., n-1.

    Raises:
        Same as fit(). step == 0 makes every period equal, which raises
        DegenerateInputError.
    """
    design = TrendDesign.from_series(y, start=start, step=step)
    return fit(design, backend=backend)


def predict(model: TrendSolution, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """intercept + slope·x. Never fails; extrapolation is allowed."""
    return model.predict(x)


def r_squared(model: TrendSolution, x: ArrayLike, y: ArrayLike) -> float:
    """
    Coefficient of determination of the model on (x, y).

    x and y are assumed paired as for fit() and are not re-validated.
    When every y is identical the total sum of squares is zero and the
    result is NaN (or -inf if the line misses the points); no error is
    raised.
    """
    rss = _metrics.residual_sum_of_squares(model.intercept, model.slope, x, y)
    tss = _metrics.total_sum_of_squares(y)
    return _metrics.coefficient_of_determination(rss, tss)


def mse(model: TrendSolution, x: ArrayLike, y: ArrayLike) -> float:
    """
    Mean squared error of the model on (x, y).

    Empty input gives NaN.
    """
    n = np.shape(y)[0]
    rss = _metrics.residual_sum_of_squares(model.intercept, model.slope, x, y)
    return _metrics.mean_squared_error(rss, n)


def forecast(
    model: TrendSolution,
    horizon: int,
    *,
    step: float = 1.0,
) -> NDArray[np.floating[Any]]:
    """Predictions for the `horizon` periods following the last fitted one."""
    return model.forecast(horizon, step=step)


def _get_backend(choice: BackendChoice) -> CPUClosedFormBackend:
    """Select backend based on preference."""
    if choice in ('auto', 'cpu'):
        return CPUClosedFormBackend()

    raise ValidationError(f"Unknown backend: {choice!r}")

"""
Trend solution types.

Contains the parameter payload and the user-facing fitted model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pytrendfit.core.result import Result
from pytrendfit.core.validation import check_non_negative_int
from pytrendfit.trend import _metrics


@dataclass(frozen=True)
class TrendParams:
    """
    Parameter payload for a fitted trend line ŷ(x) = intercept + slope·x.

    This is the immutable data computed by backends. Besides the two
    coefficients it keeps the in-sample diagnostics; the input series
    themselves are not retained.
    """
    intercept: float
    slope: float
    n_observations: int
    rss: float
    tss: float
    denominator: float
    last_period: float


@dataclass(frozen=True)
class TrendSolution:
    """
    Fitted least-squares trend line.

    Wraps the backend Result. Immutable and free of hidden state, so a
    model can be shared across threads.
    """
    _result: Result[TrendParams]

    # === Coefficients ===

    @property
    def intercept(self) -> float:
        """Fitted value of the line at period 0."""
        return self._result.params.intercept

    @property
    def slope(self) -> float:
        """Fitted change per unit period."""
        return self._result.params.slope

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Array [intercept, slope]."""
        return np.array([self.intercept, self.slope], dtype=np.float64)

    # === Prediction ===

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Evaluate the line at x.

        Extrapolation outside the fitted periods is allowed. A scalar
        returns a float, an array-like returns an ndarray of the same shape.
        """
        return _metrics.line(self.intercept, self.slope, x)

    def forecast(self, horizon: int, *, step: float = 1.0) -> NDArray[np.floating[Any]]:
        """
        Predict the `horizon` periods after the last fitted one.

        Periods are last_period + step, last_period + 2·step, ...
        """
        horizon = check_non_negative_int(horizon, 'horizon')
        periods = self.last_period + step * np.arange(1, horizon + 1, dtype=np.float64)
        return _metrics.line(self.intercept, self.slope, periods)

    # === In-sample diagnostics ===

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def last_period(self) -> float:
        return self._result.params.last_period

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        """
        In-sample coefficient of determination.

        NaN when every observation is identical (TSS == 0).
        """
        return _metrics.coefficient_of_determination(self.rss, self.tss)

    @property
    def mse(self) -> float:
        """In-sample mean squared error."""
        return _metrics.mean_squared_error(self.rss, self.n_observations)

    @property
    def df_residual(self) -> int:
        return self.n_observations - 2

    @property
    def residual_std_error(self) -> float:
        df = self.df_residual
        if df <= 0:
            return 0.0
        return float(np.sqrt(self.rss / df))

    # === Result envelope ===

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def summary(self) -> str:
        """Generate a plain-text report of the fit."""
        lines = [
            "Linear Trend Results",
            "=" * 60,
            f"Observations: {self.n_observations}",
            f"Intercept: {self.intercept:.6f}",
            f"Slope: {self.slope:.6f}",
            f"R-squared: {self.r_squared:.6f}",
            f"MSE: {self.mse:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            "-" * 60,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TrendSolution(n={self.n_observations}, intercept={self.intercept:.4f}, "
            f"slope={self.slope:.4f}, r_squared={self.r_squared:.4f})"
        )

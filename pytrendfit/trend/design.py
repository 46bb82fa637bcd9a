"""
Trend Design.

Design holds the validated period series x and observation series y.
It is the single place where fit() inputs are checked; backends trust it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pytrendfit.core.validation import check_array, check_series, check_paired


@dataclass(frozen=True)
class TrendDesign:
    """
    Paired time series ready for a least-squares line fit.

    Immutable after construction.

    Construction:
        TrendDesign.from_arrays(x, y)                  # explicit periods
        TrendDesign.from_series(y)                     # periods 0, 1, ..., n-1
        TrendDesign.from_series(y, start=2000, step=1) # calendar periods
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> TrendDesign:
        """
        Build a design from explicit periods and observations.

        Raises:
            ValidationError: If either input is not numeric
            DimensionError: If either input is not a 1D series
            ShapeMismatchError: If lengths differ
            EmptyInputError: If both are empty
        """
        x_arr = check_series(check_array(x, 'x'), 'x')
        y_arr = check_series(check_array(y, 'y'), 'y')
        check_paired(x_arr, y_arr)
        return cls(_x=x_arr, _y=y_arr, _n=x_arr.shape[0])

    @classmethod
    def from_series(
        cls,
        y: ArrayLike,
        *,
        start: float = 0.0,
        step: float = 1.0,
    ) -> TrendDesign:
        """Build a design against evenly spaced periods start + step·i."""
        y_arr = check_series(check_array(y, 'y'), 'y')
        x_arr = start + step * np.arange(y_arr.shape[0], dtype=np.float64)
        return cls.from_arrays(x_arr, y_arr)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Periods (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Observations (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of (x, y) pairs."""
        return self._n

    def sums(self) -> tuple[float, float, float, float]:
        """
        Sufficient statistics (Σx, Σy, Σx², Σxy).

        Accumulated left to right in input order with plain float
        addition; numpy's pairwise summation would round differently.
        """
        sx = sy = sxx = sxy = 0.0
        for xi, yi in zip(self._x.tolist(), self._y.tolist()):
            sx += xi
            sy += yi
            sxx += xi * xi
            sxy += xi * yi
        return sx, sy, sxx, sxy

"""
CPU reference backend for the least-squares trend line.

Applies the closed-form simple regression estimator directly to the
sufficient sums, without centering the periods.
"""

from typing import Any
import warnings

from pytrendfit.core.result import Result
from pytrendfit.core.exceptions import DegenerateInputError
from pytrendfit.core.compute.timing import Timer
from pytrendfit.core.compute.tolerances import CONDITION_THRESHOLD
from pytrendfit.trend import _metrics
from pytrendfit.trend.design import TrendDesign
from pytrendfit.trend.solution import TrendParams


class CPUClosedFormBackend:
    """
    CPU backend using the closed-form OLS estimator.

    Implements the Backend protocol for TrendDesign -> TrendParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(self, design: TrendDesign) -> Result[TrendParams]:
        """
        Solve simple OLS from the sufficient sums.

        Algorithm:
            1. Accumulate Σx, Σy, Σx², Σxy in input order
            2. denom = n·Σx² − (Σx)²
            3. slope = (n·Σxy − Σx·Σy) / denom
            4. intercept = (Σy − slope·Σx) / n
            5. Compute in-sample RSS and TSS

        Args:
            design: Validated trend design

        Returns:
            Result containing TrendParams

        Raises:
            DegenerateInputError: If denom is exactly zero
        """
        timer = Timer()
        timer.start()

        n = design.n
        notes: list[str] = []

        with timer.section('sums'):
            sx, sy, sxx, sxy = design.sums()

        with timer.section('coefficients'):
            denominator = n * sxx - sx * sx
            if denominator == 0.0:
                raise DegenerateInputError(
                    f"Least-squares denominator n·Σx² − (Σx)² is zero for n={n}; "
                    f"x has no spread, slope is undefined",
                    denominator=denominator,
                    n_observations=n,
                )
            slope = (n * sxy - sx * sy) / denominator
            intercept = (sy - slope * sx) / n

        # Cancellation check: the denominator is a difference of two nearly
        # equal quantities when the periods sit far from zero.
        scale = abs(n * sxx)
        if abs(denominator) <= scale * CONDITION_THRESHOLD:
            message = (
                f"x is ill-conditioned: |n·Σx² − (Σx)²| = {abs(denominator):.3g} "
                f"relative to n·Σx² = {scale:.3g}; coefficients may be inaccurate. "
                f"Consider shifting x toward zero."
            )
            notes.append(message)
            warnings.warn(message, RuntimeWarning, stacklevel=3)

        with timer.section('diagnostics'):
            rss = _metrics.residual_sum_of_squares(intercept, slope, design.x, design.y)
            tss = _metrics.total_sum_of_squares(design.y)

        timer.stop()

        params = TrendParams(
            intercept=intercept,
            slope=slope,
            n_observations=n,
            rss=rss,
            tss=tss,
            denominator=denominator,
            last_period=float(design.x[-1]),
        )

        info: dict[str, Any] = {
            'method': 'closed_form',
            'sum_x': sx,
            'sum_y': sy,
            'sum_xx': sxx,
            'sum_xy': sxy,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(notes),
        )

"""
Demonstration: fit a trend to a short series and forecast the next periods.

    python -m pytrendfit
    python -m pytrendfit 10 12 15 19 --horizon 5
"""

import argparse
import sys

from pytrendfit.core.exceptions import PyTrendfitError
from pytrendfit.trend import fit_series

DEFAULT_VALUES = [2.0, 3.0, 5.0, 7.0, 11.0]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pytrendfit",
        description="Fit a least-squares trend line against periods 0..n-1 and forecast.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        type=float,
        help="Observed values, one per period (default: 2 3 5 7 11)",
    )
    parser.add_argument(
        "--horizon",
        type=int,
        default=3,
        help="Number of future periods to forecast",
    )
    args = parser.parse_args(argv)
    if args.horizon < 0:
        parser.error("--horizon must be non-negative")

    values = args.values or DEFAULT_VALUES
    try:
        model = fit_series(values)
    except PyTrendfitError as exc:
        print(f"Regression failed: {exc}", file=sys.stderr)
        return 1

    print(f"Fitted model: {model!r}")
    print(f"Coefficient of determination R²: {model.r_squared:.4f}")
    print(f"Mean squared error (MSE): {model.mse:.4f}")
    start = int(model.last_period) + 1
    for offset, value in enumerate(model.forecast(args.horizon)):
        print(f"Forecast for t = {start + offset}: {value:.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

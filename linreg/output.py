"""Write fit results to CSV tables.

This module is the boundary between an in-memory :class:`FitResult` and the
tabular artifacts produced by the command-line driver.
"""

from __future__ import annotations

import os
from typing import Tuple

import numpy as np
import pandas as pd

from .errors import DegenerateFit, InvalidArgument
from .regression import (
    DEFAULT_ALPHA,
    FitResult,
    ci_half_width,
    coeff_of_determination,
    predict,
)
from .reporting import format_estimate
from .sequences import as_sequence


def fit_summary_frame(result: FitResult, alpha: float = DEFAULT_ALPHA) -> pd.DataFrame:
    """Return a one-row table describing ``result``.

    Args:
        result (FitResult): A valid fit.
        alpha (float, optional): Significance level of the slope interval.

    Returns:
        pandas.DataFrame: Coefficients, diagnostic sums, ``R^2`` and the slope
        confidence interval. Interval columns are NaN when the fit cannot
        support inference.

    Raises:
        InvalidArgument: If ``result`` is the invalid sentinel.
    """
    if not result.is_valid:
        raise InvalidArgument("Cannot summarize an invalid fit.")

    try:
        half_width = ci_half_width(result, alpha)
    except DegenerateFit:
        half_width = np.nan

    level = f"{100.0 * (1.0 - alpha):g}%"
    return pd.DataFrame(
        [
            {
                "n": result.n,
                "dof": result.dof,
                "beta0": result.beta0,
                "beta1": result.beta1,
                "rho": result.rho,
                "R^2": coeff_of_determination(result),
                "sxx": result.sxx,
                "syy": result.syy,
                "sxy": result.sxy,
                "sse": result.sse,
                "alpha": float(alpha),
                f"beta1 CI {level} lower": result.beta1 - half_width,
                f"beta1 CI {level} upper": result.beta1 + half_width,
                "beta1 (reported)": format_estimate(result.beta1, half_width),
            }
        ]
    )


def fitted_points_frame(result: FitResult, x, y) -> pd.DataFrame:
    """Return the observations with fitted values and residuals."""
    x_arr = as_sequence(x, "x")
    y_arr = as_sequence(y, "y")
    if x_arr.size != y_arr.size:
        raise InvalidArgument("x and y must have the same length.")
    y_hat = predict(result, x_arr)
    return pd.DataFrame(
        {"x": x_arr, "y": y_arr, "y_fit": y_hat, "residual": y_arr - y_hat}
    )


def save_fit_summary(
    result: FitResult,
    x,
    y,
    output_dir: str = "output",
    alpha: float = DEFAULT_ALPHA,
) -> Tuple[str, str]:
    """Save the fit summary and per-point table to CSV files.

    Returns:
        tuple[str, str]: Paths to ``fit_summary.csv`` and
        ``fitted_points.csv``.

    Raises:
        InvalidArgument: If ``result`` is the invalid sentinel.
    """
    summary = fit_summary_frame(result, alpha)
    points = fitted_points_frame(result, x, y)

    os.makedirs(output_dir, exist_ok=True)
    summary_path = os.path.join(output_dir, "fit_summary.csv")
    points_path = os.path.join(output_dir, "fitted_points.csv")

    summary.to_csv(summary_path, index=False)
    points.to_csv(points_path, index=False)

    return summary_path, points_path

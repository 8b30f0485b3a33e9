"""
Render a fitted line, its slope confidence band and the raw data.

Plotting functions accept precomputed results and perform no fitting. The
band drawn is ``y_fit +/- half_width``, where ``half_width`` is the slope
confidence half-width supplied by the caller.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import matplotlib.pyplot as plt
import numpy as np

from .errors import InvalidArgument
from .regression import FitResult, predict
from .sequences import as_sequence

FIGURE_DPI = 300


@dataclass(frozen=True)
class PlotStyle:
    FIGSIZE: tuple[float, float] = (7.0, 4.2)
    LINEWIDTH: float = 2.0
    MARKERSIZE: float = 26.0
    ALPHA_BAND: float = 0.20
    GRID_ALPHA: float = 0.20
    LABEL_FONTSIZE: float = 12.0
    LEGEND_FONTSIZE: float = 11.0


STYLE = PlotStyle()


def plot_regression(
    x,
    y,
    result: FitResult,
    half_width: float,
    output_path: str,
    *,
    confidence: float = 0.95,
    title: str | None = None,
) -> str:
    """Draw the confidence band, regression line and scatter to a PNG.

    Args:
        x: Predictor values of the observations.
        y: Response values of the observations.
        result (FitResult): A valid fit of ``y`` on ``x``.
        half_width (float): Band half-width in units of ``y``.
        output_path (str): Destination PNG path; parent directories are
            created as needed.
        confidence (float, optional): Confidence level used in the legend.
        title (str, optional): Axes title.

    Returns:
        str: ``output_path``.

    Raises:
        InvalidArgument: If ``result`` is invalid, ``x`` and ``y`` differ in
            length, or ``half_width`` is negative or not finite.
    """
    if not result.is_valid:
        raise InvalidArgument("Cannot plot an invalid fit.")
    x_arr = as_sequence(x, "x")
    y_arr = as_sequence(y, "y")
    if x_arr.size != y_arr.size:
        raise InvalidArgument("x and y must have the same length.")
    if not np.isfinite(half_width) or half_width < 0:
        raise InvalidArgument(f"half_width must be finite and >= 0, got {half_width!r}.")

    order = np.argsort(x_arr)
    xs = x_arr[order]
    y_hat = predict(result, xs)

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE)
    try:
        ax.fill_between(
            xs,
            y_hat - half_width,
            y_hat + half_width,
            alpha=STYLE.ALPHA_BAND,
            linewidth=0.0,
            label=f"{100.0 * confidence:g}% CI",
        )
        ax.plot(
            xs, y_hat, linestyle="--", linewidth=STYLE.LINEWIDTH, label="Regression"
        )
        ax.scatter(x_arr, y_arr, s=STYLE.MARKERSIZE, zorder=3, label="Data")

        ax.set_xlabel("x", fontsize=STYLE.LABEL_FONTSIZE)
        ax.set_ylabel("y", fontsize=STYLE.LABEL_FONTSIZE)
        if title:
            ax.set_title(title)
        ax.grid(True, alpha=STYLE.GRID_ALPHA)
        ax.spines["top"].set_visible(False)
        ax.spines["right"].set_visible(False)
        ax.legend(loc="upper left", fontsize=STYLE.LEGEND_FONTSIZE, frameon=False)

        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        fig.savefig(output_path, dpi=FIGURE_DPI, bbox_inches="tight")
    finally:
        plt.close(fig)

    return output_path

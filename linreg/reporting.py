"""Human-readable reporting of fitted slopes and their confidence intervals.

The reported precision follows the interval, not the estimate: the
half-width keeps one significant figure (two when its leading digit is 1)
and the slope, intercept and interval bounds are quantized to the same
decimal place.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .errors import DegenerateFit
from .regression import DEFAULT_ALPHA, FitResult, ci_half_width


def _as_decimal(value: float) -> Decimal:
    return Decimal(repr(float(value)))


def reported_places(half_width: float) -> Optional[int]:
    """Return the decimal place a value with ``half_width`` is reported to.

    Negative results mean rounding to tens, hundreds, ... ``None`` is
    returned when ``half_width`` is zero, negative, or not finite.
    """
    if not math.isfinite(half_width) or half_width <= 0:
        return None
    d = _as_decimal(half_width)
    magnitude = d.adjusted()
    leading_digit = int(d.scaleb(-magnitude))
    significant = 2 if leading_digit == 1 else 1
    return significant - 1 - magnitude


def _quantize(value: float, places: int) -> str:
    step = Decimal(1).scaleb(-places)
    return format(_as_decimal(value).quantize(step, rounding=ROUND_HALF_UP), "f")


def format_estimate(value: float, half_width: float, unit: str = "") -> str:
    """Return ``"value ± half_width unit"`` quantized to a common place.

    Examples:
        >>> format_estimate(2.0127, 0.1532)
        '2.01 ± 0.15'
        >>> format_estimate(1234.5, 27.0)
        '1230 ± 30'
    """
    places = reported_places(half_width)
    if places is None:
        text = f"{value:.6g} ± {half_width:.6g}"
    else:
        text = f"{_quantize(value, places)} ± {_quantize(half_width, places)}"
    return f"{text} {unit}".strip()


def format_slope_report(result: FitResult, alpha: float = DEFAULT_ALPHA) -> str:
    """Summarize a valid fit as one line of text.

    The line shows the slope with its confidence half-width, the interval
    bounds, the intercept, and ``R^2``. When the fit cannot support an
    interval the slope is shown on its own.

    Examples:
        ``"beta1 = 2.00 ± 0.12 (95% CI [1.89, 2.12]), beta0 = 0.98, R^2 = 0.9949"``
    """
    try:
        half_width = ci_half_width(result, alpha)
    except DegenerateFit:
        half_width = math.nan

    r2 = result.rho**2
    places = reported_places(half_width)
    if places is None:
        return (
            f"beta1 = {result.beta1:.6g} (no interval), "
            f"beta0 = {result.beta0:.6g}, R^2 = {r2:.4f}"
        )

    level = f"{100.0 * (1.0 - alpha):g}%"
    lower = _quantize(result.beta1 - half_width, places)
    upper = _quantize(result.beta1 + half_width, places)
    return (
        f"beta1 = {format_estimate(result.beta1, half_width)} "
        f"({level} CI [{lower}, {upper}]), "
        f"beta0 = {_quantize(result.beta0, places)}, R^2 = {r2:.4f}"
    )

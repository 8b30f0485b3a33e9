"""Ordinary least-squares fit of one response on one predictor.

This module supports:
- fitting ``y = beta0 + beta1 * x`` from mean-centered sums of squares,
- a two-sided Student's t confidence interval for the slope, and
- the coefficient of determination of a fit.

Impossible fits (too few points, mismatched lengths, constant ``x``) are not
errors here: :func:`fit` returns :data:`INVALID_FIT`, and callers are expected
to check :attr:`FitResult.is_valid` before reading any field.
"""

from __future__ import annotations

import logging
import math
import warnings
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .errors import DegenerateFit, InvalidArgument
from .sequences import as_sequence
from .stats.distributions import t_quantile
from .stats.primitives import inner_product, mean, shift

logger = logging.getLogger(__name__)

MIN_FIT_POINTS = 3
DEFAULT_ALPHA = 0.05


@dataclass(frozen=True)
class FitResult:
    """Outcome of one call to :func:`fit`.

    Attributes:
        beta0: Intercept of the fitted line.
        beta1: Slope of the fitted line.
        rho: Pearson correlation coefficient; NaN when ``y`` is constant.
        sxx: Centered sum of squares of ``x``.
        syy: Centered sum of squares of ``y``.
        sxy: Centered sum of cross products.
        sse: Sum of squared residuals against the raw data.
        n: Number of points used; ``0`` for the invalid sentinel.
    """

    beta0: float = 0.0
    beta1: float = 0.0
    rho: float = 0.0
    sxx: float = 0.0
    syy: float = 0.0
    sxy: float = 0.0
    sse: float = 0.0
    n: int = 0

    @classmethod
    def invalid(cls) -> "FitResult":
        return cls()

    @property
    def is_valid(self) -> bool:
        return self.n >= MIN_FIT_POINTS and self.sxx > 0

    @property
    def dof(self) -> int:
        """Residual degrees of freedom, ``n - 2``."""
        return self.n - 2


INVALID_FIT = FitResult.invalid()


def fit(x, y) -> FitResult:
    """Fit a straight line to paired observations by least squares.

    Args:
        x: Predictor values.
        y: Response values, paired with ``x`` by position.

    Returns:
        FitResult: The fitted coefficients and diagnostic sums, or
        :data:`INVALID_FIT` when the lengths differ, fewer than three points
        are given, any value is NaN or infinite, or every ``x`` is identical.

    Raises:
        InvalidArgument: If an input cannot be read as a one-dimensional
            sequence of reals.

    Note:
        Sums of squares are formed from mean-centered copies of the data.
        The intercept and the residuals use the raw, uncentered values.
    """
    x_arr = as_sequence(x, "x")
    y_arr = as_sequence(y, "y")
    if x_arr.size != y_arr.size or x_arr.size < MIN_FIT_POINTS:
        logger.debug(
            "Fit rejected: need equal lengths >= %d, got %d and %d",
            MIN_FIT_POINTS,
            x_arr.size,
            y_arr.size,
        )
        return INVALID_FIT
    if not (np.all(np.isfinite(x_arr)) and np.all(np.isfinite(y_arr))):
        logger.debug("Fit rejected: non-finite values in x or y")
        return INVALID_FIT
    # centering a constant like 0.1 leaves rounding residues, so test raw x
    if np.all(x_arr == x_arr[0]):
        logger.debug("Fit rejected: x has zero variance")
        return INVALID_FIT

    x0 = shift(x_arr)
    y0 = shift(y_arr)

    sxx = inner_product(x0, x0)
    if sxx == 0.0:
        logger.debug("Fit rejected: x has zero variance")
        return INVALID_FIT

    syy = inner_product(y0, y0)
    sxy = inner_product(x0, y0)

    beta1 = sxy / sxx
    beta0 = mean(y_arr) - beta1 * mean(x_arr)

    if syy == 0.0 or np.all(y_arr == y_arr[0]):
        warnings.warn(
            "y has zero variance; correlation coefficient is undefined.",
            RuntimeWarning,
            stacklevel=2,
        )
        rho = math.nan
    else:
        # rounding can push |rho| just past 1 on exactly linear data
        rho = float(np.clip(sxy / math.sqrt(sxx * syy), -1.0, 1.0))

    resid = y_arr - (beta0 + beta1 * x_arr)
    sse = math.fsum(resid * resid)

    result = FitResult(
        beta0=beta0,
        beta1=beta1,
        rho=rho,
        sxx=sxx,
        syy=syy,
        sxy=sxy,
        sse=sse,
        n=int(x_arr.size),
    )
    logger.debug(
        "Fitted n=%d: beta0=%.6g beta1=%.6g rho=%.6g", result.n, beta0, beta1, rho
    )
    return result


def slope_standard_error(result: FitResult) -> float:
    """Return the standard error of the fitted slope.

    Computed as ``sqrt(scal * (1 - beta1**2 / scal) / dof)`` with
    ``scal = syy / sxx``.

    Raises:
        DegenerateFit: If ``dof <= 0``, ``scal == 0``, or the variance
            estimate is not strictly positive.
    """
    dof = result.dof
    if dof <= 0:
        raise DegenerateFit(
            f"Slope inference needs n > 2 observations, got n={result.n}."
        )
    if result.sxx == 0.0:
        raise DegenerateFit("x has zero variance; slope is undefined.")

    scal = result.syy / result.sxx
    if scal == 0.0:
        raise DegenerateFit("y has zero variance; slope variance is undefined.")

    radicand = scal * (1.0 - result.beta1 * result.beta1 / scal) / dof
    if not radicand > 0.0:
        raise DegenerateFit(
            f"Non-positive slope variance estimate ({radicand!r}); "
            "the data are collinear to working precision."
        )
    return math.sqrt(radicand)


def ci_half_width(result: FitResult, alpha: float = DEFAULT_ALPHA) -> float:
    """Return the half-width of the ``1 - alpha`` slope confidence interval.

    Raises:
        InvalidArgument: If ``alpha`` is not strictly between 0 and 1.
        DegenerateFit: See :func:`slope_standard_error`.
    """
    alpha = float(alpha)
    if not 0.0 < alpha < 1.0:
        raise InvalidArgument(f"alpha must lie in (0, 1), got {alpha!r}.")
    standard_error = slope_standard_error(result)
    quantile = t_quantile(1.0 - 0.5 * alpha, result.dof)
    return quantile * standard_error


def ci_slope(result: FitResult, alpha: float = DEFAULT_ALPHA) -> Tuple[float, float]:
    """Return the two-sided ``1 - alpha`` confidence interval for the slope.

    Args:
        result (FitResult): A valid fit.
        alpha (float, optional): Significance level; ``0.05`` gives a 95%
            interval. Defaults to ``0.05``.

    Returns:
        tuple[float, float]: ``(lower, upper)``, symmetric about ``beta1``.

    Raises:
        InvalidArgument: If ``alpha`` is not strictly between 0 and 1.
        DegenerateFit: If the fit has no residual degrees of freedom or a
            non-positive slope variance estimate.
    """
    margin = ci_half_width(result, alpha)
    return result.beta1 - margin, result.beta1 + margin


def coeff_of_determination(result: FitResult) -> float:
    """Return ``rho ** 2`` for a valid fit.

    Raises:
        InvalidArgument: If ``result`` is the invalid sentinel.
    """
    if not result.is_valid:
        raise InvalidArgument("Coefficient of determination requires a valid fit.")
    return result.rho**2


def predict(result: FitResult, x) -> np.ndarray:
    """Evaluate the fitted line at ``x``."""
    x_arr = as_sequence(x, "x")
    return result.beta0 + result.beta1 * x_arr

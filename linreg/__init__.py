"""
Simple linear regression with slope confidence intervals.

Fits ``y = beta0 + beta1 * x`` by ordinary least squares and derives the
correlation coefficient, residual sum of squares, a Student's t confidence
interval for the slope and the coefficient of determination.

Modules:
    - sequences: Normalizes input sequences into read-only float arrays.
    - stats: Mean, mean-centering, inner product and t quantiles.
    - regression: Least-squares fit and slope inference.
    - reporting: Value-with-uncertainty formatting.
    - output: CSV export of fit summaries.
    - plotting: Regression line, confidence band and scatter figures.
"""

__version__ = "1.0.0"

from .errors import DegenerateFit, InvalidArgument
from .regression import (
    DEFAULT_ALPHA,
    INVALID_FIT,
    MIN_FIT_POINTS,
    FitResult,
    ci_half_width,
    ci_slope,
    coeff_of_determination,
    fit,
    predict,
    slope_standard_error,
)
from .sequences import as_sequence, nearly_equal
from .stats import inner_product, mean, shift, t_quantile

__all__ = [
    # Errors
    "InvalidArgument",
    "DegenerateFit",
    # Regression
    "FitResult",
    "INVALID_FIT",
    "MIN_FIT_POINTS",
    "DEFAULT_ALPHA",
    "fit",
    "ci_slope",
    "ci_half_width",
    "coeff_of_determination",
    "slope_standard_error",
    "predict",
    # Primitives
    "as_sequence",
    "nearly_equal",
    "mean",
    "shift",
    "inner_product",
    "t_quantile",
]

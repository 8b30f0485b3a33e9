"""Summation primitives shared by the regression engine.

All reductions go through :func:`math.fsum`, which tracks partial sums
exactly and rounds once. Results are therefore independent of summation
order and reproducible bit for bit across runs and platforms.
"""

from __future__ import annotations

import math

import numpy as np

from ..errors import InvalidArgument
from ..sequences import as_sequence


def mean(data) -> float:
    """Return the arithmetic mean of a non-empty sequence.

    Raises:
        InvalidArgument: If ``data`` is empty.
        OverflowError: If a partial sum of finite values exceeds the float
            range, e.g. ``mean([1e308, 1e308])``.
    """
    arr = as_sequence(data, "data")
    if arr.size == 0:
        raise InvalidArgument("mean: data must not be empty.")
    return math.fsum(arr) / arr.size


def shift(x) -> np.ndarray:
    """Return a new array holding ``x`` minus its sample mean.

    The input is left untouched; the mean of the result is zero up to
    rounding.

    Raises:
        InvalidArgument: If ``x`` is empty.
    """
    arr = as_sequence(x, "x")
    if arr.size == 0:
        raise InvalidArgument("shift: data must not be empty.")
    return arr - mean(arr)


def inner_product(x, y) -> float:
    """Return ``sum(x[i] * y[i])`` for two sequences of equal length >= 2.

    Applied to mean-centered operands this is the numerator of the sample
    covariance (or variance, when ``x is y``).

    Raises:
        InvalidArgument: If the lengths differ or are below 2.
        OverflowError: If a partial sum of finite products exceeds the float
            range.
    """
    x_arr = as_sequence(x, "x")
    y_arr = as_sequence(y, "y")
    if x_arr.size != y_arr.size or x_arr.size < 2:
        raise InvalidArgument(
            "inner_product: sequences must have the same length >= 2 "
            f"(got {x_arr.size} and {y_arr.size})."
        )
    return math.fsum(x_arr * y_arr)

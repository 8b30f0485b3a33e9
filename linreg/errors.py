"""Exception types raised by the regression engine."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a statistics primitive receives unusable input.

    Typical causes are empty sequences, sequences of different length, or
    sequences shorter than an operation requires.
    """


class DegenerateFit(ValueError):
    """Raised when inference is requested on a fit that cannot support it.

    This covers fits without residual degrees of freedom (``n - 2 <= 0``) and
    fits whose slope variance estimate is not strictly positive.
    """

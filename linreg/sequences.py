"""Normalize caller-supplied numeric sequences into read-only arrays."""

from __future__ import annotations

import sys

import numpy as np

from .errors import InvalidArgument

_EPS = sys.float_info.epsilon


def as_sequence(data, name: str = "data") -> np.ndarray:
    """Return ``data`` as a one-dimensional, read-only float64 array.

    Args:
        data: Any ordered sequence of real numbers (list, tuple,
            :class:`numpy.ndarray`, :class:`pandas.Series`, ...).
        name (str, optional): Argument name used in error messages.

    Returns:
        numpy.ndarray: A float64 view of the input that cannot be written to.
        The caller's object is never modified.

    Raises:
        InvalidArgument: If ``data`` is not one-dimensional or cannot be
            interpreted as real numbers.
    """
    if isinstance(data, (str, bytes)):
        raise InvalidArgument(f"{name}: expected a sequence of numbers, got text.")
    try:
        arr = np.asarray(data, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name}: values must be real numbers.") from exc
    if arr.ndim != 1:
        raise InvalidArgument(
            f"{name}: expected a one-dimensional sequence, got {arr.ndim} dimensions."
        )
    view = arr.view()
    view.flags.writeable = False
    return view


def nearly_equal(
    a: float, b: float, rel_eps: float = _EPS, abs_eps: float = _EPS
) -> bool:
    """Compare two floats using an absolute, then a relative, tolerance."""
    diff = abs(a - b)
    if diff <= abs_eps:
        return True
    return diff <= max(abs(a), abs(b)) * rel_eps

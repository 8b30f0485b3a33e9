"""Student's t quantiles for confidence-interval construction."""

from __future__ import annotations

import math

from scipy.stats import t as student_t

from ..errors import InvalidArgument


def t_quantile(p: float, dof: float) -> float:
    """Return ``q`` such that ``P(T <= q) = p`` for ``T ~ t(dof)``.

    Args:
        p (float): Cumulative probability, strictly between 0 and 1.
        dof (float): Degrees of freedom, strictly positive.

    Returns:
        float: The inverse CDF of Student's t distribution at ``p``.

    Raises:
        InvalidArgument: If ``p`` or ``dof`` is out of range.

    Note:
        For large ``dof`` the value approaches the standard normal quantile.
    """
    p = float(p)
    dof = float(dof)
    if not 0.0 < p < 1.0:
        raise InvalidArgument(f"t_quantile: p must lie in (0, 1), got {p!r}.")
    if not math.isfinite(dof) or dof <= 0:
        raise InvalidArgument(f"t_quantile: dof must be positive, got {dof!r}.")
    return float(student_t.ppf(p, dof))

"""
Numerical building blocks for simple linear regression.

Modules:
    primitives:
        Mean, mean-centering (``shift``) and inner product, all accumulated
        with exactly-rounded summation.

    distributions:
        Student's t quantile used for two-sided confidence intervals.

Design Principle:
    This subpackage has no dependencies on the regression engine, plotting,
    or output modules. It can be tested on its own.
"""

from .distributions import t_quantile
from .primitives import inner_product, mean, shift

__all__ = ["mean", "shift", "inner_product", "t_quantile"]

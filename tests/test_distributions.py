import math

import pytest
from scipy.stats import norm

from linreg.errors import InvalidArgument
from linreg.stats import t_quantile


def test_t_quantile_reference_value():
    assert math.isclose(t_quantile(0.975, 10), 2.228139, abs_tol=1e-5)


def test_t_quantile_is_symmetric_about_median():
    assert abs(t_quantile(0.5, 4)) < 1e-12
    assert math.isclose(t_quantile(0.1, 7), -t_quantile(0.9, 7), rel_tol=1e-9)


def test_t_quantile_increases_with_probability():
    values = [t_quantile(p, 5) for p in (0.6, 0.8, 0.9, 0.975, 0.995)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_t_quantile_approaches_normal_for_large_dof():
    assert math.isclose(t_quantile(0.975, 1e7), norm.ppf(0.975), abs_tol=1e-5)


@pytest.mark.parametrize("p, dof", [(0.0, 5), (1.0, 5), (1.5, 5), (0.9, 0), (0.9, -2)])
def test_t_quantile_rejects_out_of_range_arguments(p, dof):
    with pytest.raises(InvalidArgument):
        t_quantile(p, dof)

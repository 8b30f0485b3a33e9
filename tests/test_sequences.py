import numpy as np
import pandas as pd
import pytest

from linreg.errors import InvalidArgument
from linreg.sequences import as_sequence, nearly_equal


def test_as_sequence_accepts_common_containers():
    for data in ([1, 2, 3], (1.0, 2.0, 3.0), np.array([1, 2, 3]), pd.Series([1, 2, 3])):
        arr = as_sequence(data)
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])


def test_as_sequence_is_read_only_and_leaves_caller_data_writable():
    src = np.array([1.0, 2.0, 3.0])
    view = as_sequence(src)
    with pytest.raises(ValueError):
        view[0] = 10.0
    src[0] = 10.0
    assert src[0] == 10.0


def test_as_sequence_rejects_two_dimensional_input():
    with pytest.raises(InvalidArgument, match="one-dimensional"):
        as_sequence(np.ones((2, 2)), "x")


@pytest.mark.parametrize("data", ["123", ["a", "b"]])
def test_as_sequence_rejects_non_numeric_input(data):
    with pytest.raises(InvalidArgument):
        as_sequence(data)


def test_nearly_equal():
    assert nearly_equal(0.1 + 0.2, 0.3)
    assert nearly_equal(0.0, 1e-17)
    assert nearly_equal(1e6, 1e6 + 1e-3, rel_eps=1e-8)
    assert not nearly_equal(1.0, 1.0001)

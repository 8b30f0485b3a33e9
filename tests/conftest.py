"""Shared fixtures; puts the repository root on ``sys.path`` for ``main``."""

import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")


@pytest.fixture
def trend_xy():
    """Ten noisy points scattered about ``y = 1 + 2x``."""
    x = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    y = [3.1, 5.0, 7.2, 9.1, 10.0, 13.2, 15.5, 16.5, 19.0, 21.3]
    return x, y

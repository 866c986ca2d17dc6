"""Three-way comparison, including the undefined outcome for NaN."""

import math

import numpy as np
import pytest

from path_interpolation.ordering import Ordering, compare


@pytest.mark.parametrize("a, b, expected", [
    (0.0, 1.0, Ordering.LESS),
    (1.0, 1.0, Ordering.EQUAL),
    (2.0, 1.0, Ordering.GREATER),
    (-math.inf, 0.0, Ordering.LESS),
    (math.inf, math.inf, Ordering.EQUAL),
    (np.float64(0.5), 0.5, Ordering.EQUAL),
])
def test_compare_defined(a, b, expected):
    assert compare(a, b) is expected


@pytest.mark.parametrize("a, b", [
    (math.nan, 0.0),
    (0.0, math.nan),
    (math.nan, math.nan),
    (np.float64('nan'), math.inf),
])
def test_compare_nan_is_undefined(a, b):
    assert compare(a, b) is Ordering.UNDEFINED

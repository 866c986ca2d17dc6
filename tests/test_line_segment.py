"""Segment interpolation, length, and locate/closest point on a single segment."""

import math

import numpy as np
import pytest

from path_interpolation import LineSegment


@pytest.fixture
def segment():
    return LineSegment([-1.0, 0.0], [1.0, 0.0])


def test_rejects_non_2d_points():
    with pytest.raises(ValueError):
        LineSegment([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])


@pytest.mark.parametrize("fraction, expected", [
    (-1.0, [-1.0, 0.0]),
    (0.0, [-1.0, 0.0]),
    (0.5, [0.0, 0.0]),
    (0.75, [0.5, 0.0]),
    (1.0, [1.0, 0.0]),
    (2.0, [1.0, 0.0]),
    (math.inf, [1.0, 0.0]),
    (-math.inf, [-1.0, 0.0]),
])
def test_interpolate_finite_segment(segment, fraction, expected):
    np.testing.assert_array_equal(segment.interpolate_point(fraction), expected)


def test_interpolate_nan_fraction_is_undefined(segment):
    assert segment.interpolate_point(math.nan) is None


def test_interpolate_diagonal():
    segment = LineSegment([0.0, 0.0], [1.0, 1.0])
    np.testing.assert_array_equal(segment.interpolate_point(0.5), [0.5, 0.5])


def test_interpolate_is_affine_combination():
    start = np.array([0.3, -2.0])
    end = np.array([4.1, 7.5])
    segment = LineSegment(start, end)
    for fraction in [0.1, 0.333, 0.9]:
        np.testing.assert_array_equal(
            segment.interpolate_point(fraction), start + fraction * (end - start)
        )


def test_interpolate_returns_copy(segment):
    point = segment.interpolate_point(0.0)
    point[0] = 42.0
    np.testing.assert_array_equal(segment.start, [-1.0, 0.0])


@pytest.mark.parametrize("start, end", [
    ([math.nan, 0.0], [1.0, 1.0]),
    ([math.inf, 0.0], [1.0, 1.0]),
    ([0.0, 0.0], [1.0, math.inf]),
    ([-math.inf, 0.0], [1.0, 1.0]),
    ([0.0, 0.0], [1.0, -math.inf]),
])
def test_interpolate_non_finite_segment_is_undefined(start, end):
    assert LineSegment(start, end).interpolate_point(0.5) is None


def test_endpoints_exact_despite_non_finite_other_end():
    segment = LineSegment([1.0, 2.0], [math.inf, math.nan])
    np.testing.assert_array_equal(segment.interpolate_point(0.0), [1.0, 2.0])
    np.testing.assert_array_equal(segment.interpolate_point(-3.0), [1.0, 2.0])

    segment = LineSegment([math.nan, 0.0], [3.0, 4.0])
    np.testing.assert_array_equal(segment.interpolate_point(1.0), [3.0, 4.0])


def test_length():
    assert LineSegment([0.0, 0.0], [3.0, 4.0]).length() == 5.0
    assert LineSegment([1.0, 1.0], [1.0, 1.0]).length() == 0.0


def test_length_non_finite_is_nan():
    assert math.isnan(LineSegment([0.0, math.inf], [3.0, 4.0]).length())
    assert math.isnan(LineSegment([0.0, 0.0], [math.nan, 4.0]).length())


def test_locate_point(segment):
    assert segment.locate_point([0.0, 5.0]) == 0.5
    assert segment.locate_point([-3.0, 1.0]) == 0.0
    assert segment.locate_point([3.0, -1.0]) == 1.0
    assert segment.locate_point([math.nan, 0.0]) is None


def test_locate_point_zero_length():
    assert LineSegment([2.0, 2.0], [2.0, 2.0]).locate_point([0.0, 0.0]) == 0.0


def test_closest_point_and_distance(segment):
    np.testing.assert_array_equal(segment.closest_point([0.5, 2.0]), [0.5, 0.0])
    assert segment.distance_to([0.5, 2.0]) == 2.0
    assert segment.distance_to([4.0, 4.0]) == 5.0


def test_length_large_finite_coordinates():
    length = LineSegment([0.0, 0.0], [1e200, 1e200]).length()
    assert np.isfinite(length)
    np.testing.assert_allclose(length, math.sqrt(2.0) * 1e200)

# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""LineSegment - Pure geometry primitive for directed 2D line segments."""

import numpy as np

from .ordering import Ordering, compare


class LineSegment:
    """
    Represent a directed 2D line segment defined by start and end points.

    Coordinates may be non-finite. Operations never modify the segment and
    return None instead of raising when a result cannot be computed finitely.
    """

    def __init__(self, start, end):
        """
        Initialize line segment from start and end points.

        Args:
            start: Start point [x, y]
            end: End point [x, y]

        Raises
        ------
        ValueError
            If points are not 2D

        """
        self.start = np.array(start, dtype=float)
        self.end = np.array(end, dtype=float)

        if self.start.shape != (2,) or self.end.shape != (2,):
            raise ValueError("Start and end must be 2D points [x, y]")

    def is_finite(self):
        """Check that both endpoints have finite coordinates."""
        return bool(np.all(np.isfinite(self.start)) and np.all(np.isfinite(self.end)))

    def length(self):
        """
        Calculate Euclidean length of the segment.

        Returns
        -------
        float
            Non-negative length, or NaN if any coordinate is not finite

        """
        if not self.is_finite():
            return float('nan')
        return float(np.hypot(*(self.end - self.start)))

    def interpolate_point(self, fraction):
        """
        Get the point a given fraction of the way from start to end.

        Fractions at or below 0 (including -inf) return the start point and
        fractions at or above 1 (including inf) return the end point, without
        touching the other endpoint.

        Args:
            fraction: Fraction of the segment length, any real value

        Returns
        -------
        np.ndarray or None
            Interpolated point, or None if fraction is NaN or the point
            has non-finite coordinates

        """
        order = compare(fraction, 0.0)
        if order is Ordering.UNDEFINED:
            return None
        if order is not Ordering.GREATER:
            return self.start.copy()

        if compare(fraction, 1.0) is not Ordering.LESS:
            return self.end.copy()

        with np.errstate(invalid='ignore', over='ignore'):
            point = self.start + fraction * (self.end - self.start)

        if np.all(np.isfinite(point)):
            return point
        return None

    def locate_point(self, point):
        """
        Get the fraction of the segment closest to a query point.

        Args:
            point: Query point [x, y]

        Returns
        -------
        float or None
            Fraction in [0, 1] of the projection onto the segment, 0.0 for a
            zero-length segment, None if the result is not finite

        """
        point = np.asarray(point, dtype=float)
        direction = self.end - self.start

        with np.errstate(invalid='ignore', over='ignore'):
            length_sq = float(np.dot(direction, direction))
            if length_sq == 0.0:
                return 0.0
            fraction = float(np.dot(point - self.start, direction)) / length_sq

        if not np.isfinite(fraction):
            return None
        return min(max(fraction, 0.0), 1.0)

    def closest_point(self, point):
        """Get the point on the segment closest to a query point, or None."""
        fraction = self.locate_point(point)
        if fraction is None:
            return None
        return self.interpolate_point(fraction)

    def distance_to(self, point):
        """Euclidean distance from a query point to the segment (NaN if undefined)."""
        closest = self.closest_point(point)
        if closest is None:
            return float('nan')
        return float(np.hypot(*(np.asarray(point, dtype=float) - closest)))

    def __repr__(self):
        """Return string representation of line segment."""
        return f"LineSegment(length={self.length():.3f})"

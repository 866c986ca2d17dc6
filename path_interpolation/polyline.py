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

"""Polyline - Ordered 2D path measured by cumulative arc length."""

from dataclasses import dataclass

import numpy as np

from .line_segment import LineSegment
from .ordering import Ordering, compare


@dataclass(frozen=True)
class SegmentProgress:
    """Arc length already traced before a segment and how its end compares to the target."""

    length_before: float
    order: Ordering
    length: float
    segment: LineSegment


class Polyline:
    """
    Represent a path through zero or more 2D points.

    Consecutive points form the segments of the path. Fractions passed to
    interpolate_point and returned by locate_point are ratios of arc length
    to total length, not vertex indices.
    """

    def __init__(self, points):
        """
        Initialize polyline from a sequence of points.

        Args:
            points: Sequence of [x, y] points, may be empty

        Raises
        ------
        ValueError
            If points are not 2D

        """
        coords = np.array(points, dtype=float)
        if coords.size == 0:
            coords = coords.reshape(0, 2)

        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("Points must be a sequence of 2D points [x, y]")

        self.points = coords

    def __len__(self):
        """Return the number of points."""
        return len(self.points)

    def segments(self):
        """Yield consecutive LineSegments in path order."""
        for start, end in zip(self.points[:-1], self.points[1:]):
            yield LineSegment(start, end)

    def is_finite(self):
        """Check that every coordinate is finite."""
        return bool(np.all(np.isfinite(self.points)))

    def length(self):
        """
        Calculate total Euclidean length of the path.

        Returns
        -------
        float
            Sum of segment lengths (0.0 with fewer than two points), or NaN
            if any coordinate is not finite

        """
        if not self.is_finite():
            return float('nan')
        return float(sum((segment.length() for segment in self.segments()), 0.0))

    def first_point(self):
        """Return a copy of the first point, or None for an empty path."""
        if len(self.points) == 0:
            return None
        return self.points[0].copy()

    def last_point(self):
        """Return a copy of the last point, or None for an empty path."""
        if len(self.points) == 0:
            return None
        return self.points[-1].copy()

    def interpolate_point(self, fraction):
        """
        Get the point lying a given fraction of the way along the path.

        Fractions below 0 resolve to the first point and fractions above 1
        to the last point.

        Args:
            fraction: Fraction of the total arc length, any real value

        Returns
        -------
        np.ndarray or None
            Interpolated point, or None if fraction is NaN, the path is
            empty, or the path contains non-finite coordinates

        """
        total_length = self.length()
        target_length = total_length * fraction

        progress = []
        length_before = 0.0
        for segment in self.segments():
            segment_length = segment.length()
            order = compare(length_before + segment_length, target_length)
            progress.append(
                SegmentProgress(length_before, order, segment_length, segment)
            )
            length_before += segment_length

        if any(entry.order is Ordering.UNDEFINED for entry in progress):
            return None

        for entry in progress:
            # first segment whose end reaches the target length
            if entry.order is not Ordering.LESS:
                if entry.order is Ordering.EQUAL and entry.length > 0.0:
                    # target is exactly the segment end
                    local_fraction = 1.0
                else:
                    with np.errstate(divide='ignore', invalid='ignore'):
                        local_fraction = (
                            np.float64(target_length - entry.length_before) / entry.length
                        )
                return entry.segment.interpolate_point(local_fraction)

        if compare(total_length, target_length) is Ordering.UNDEFINED:
            return None
        return self.last_point()

    def locate_point(self, point):
        """
        Get the arc length fraction of the path point closest to a query point.

        Args:
            point: Query point [x, y]

        Returns
        -------
        float or None
            Fraction in [0, 1], 0.0 for a zero-length path, None for an empty
            path, non-finite geometry, or when no segment projection is finite

        """
        point = np.asarray(point, dtype=float)
        if len(self.points) == 0 or not np.all(np.isfinite(point)):
            return None

        total_length = self.length()
        if not np.isfinite(total_length):
            return None
        if total_length == 0.0:
            return 0.0

        best_distance = np.inf
        best_fraction = None
        length_before = 0.0
        for segment in self.segments():
            segment_length = segment.length()
            segment_fraction = segment.locate_point(point)
            distance = segment.distance_to(point)
            if segment_fraction is not None and distance < best_distance:
                best_distance = distance
                best_fraction = (
                    length_before + segment_fraction * segment_length
                ) / total_length
            length_before += segment_length

        return best_fraction

    def closest_point(self, point):
        """
        Get the point on the path closest to a query point.

        Returns
        -------
        np.ndarray or None
            Closest point, the only point of a single-point path, or None for
            an empty path, non-finite geometry, or when no segment projection
            is finite

        """
        point = np.asarray(point, dtype=float)
        if not self.is_finite() or not np.all(np.isfinite(point)):
            return None
        if len(self.points) == 1:
            return self.first_point()

        best_distance = np.inf
        best_point = None
        for segment in self.segments():
            candidate = segment.closest_point(point)
            if candidate is None:
                continue
            distance = float(np.hypot(*(point - candidate)))
            if distance < best_distance:
                best_distance = distance
                best_point = candidate

        return best_point

    def __repr__(self):
        """Return string representation of polyline."""
        return f"Polyline(points={len(self.points)}, length={self.length():.3f})"

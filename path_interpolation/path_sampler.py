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


"""Path sampler - evaluates arc length fractions along tracks."""

import math


class PathSampler:
    """
    Sample points along tracks at evenly spaced and requested fractions.

    Modifies track objects in-place following the Mutable State pattern.
    """

    MAX_POINTS = 10000

    def __init__(self, parameters):
        """
        Initialize sampler with sampling parameters.

        Args:
            parameters : dict
                Dictionary with keys:
                - num_points: Number of evenly spaced samples per track

        """
        self.num_points = parameters['num_points']

        if isinstance(self.num_points, bool) or not isinstance(self.num_points, int):
            raise ValueError(f"num_points must be an integer, got {self.num_points!r}")
        if not (1 <= self.num_points <= self.MAX_POINTS):
            raise ValueError(
                f"num_points must be between 1 and {self.MAX_POINTS}, got {self.num_points}"
            )

    def even_fractions(self):
        """Return num_points fractions spread evenly over [0, 1]."""
        return [i / max(1, self.num_points - 1) for i in range(self.num_points)]

    def sample(self, track):
        """
        Generate samples for a track.

        Modifies track object in-place by setting track.samples and
        track.is_sampled. Fractions whose point is undefined are recorded
        with a point of None.

        Args:
            track : Track
                Track object to process

        Returns
        -------
        bool
            True if every sample is defined, False otherwise

        """
        fractions = self.even_fractions() + track.fractions

        samples = [
            self._build_sample(track.polyline, fraction, i)
            for i, fraction in enumerate(fractions)
        ]

        track.samples = samples
        track.is_sampled = True

        return all(sample['point'] is not None for sample in samples)

    def _build_sample(self, polyline, fraction, index):
        """Interpolate one fraction into a JSON-ready sample, non-finite values as None."""
        point = polyline.interpolate_point(fraction)
        return {
            'index': index,
            'fraction': fraction if math.isfinite(fraction) else None,
            'point': None if point is None else point.tolist()
        }

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

"""Track - Named path with requested fractions and sampled points."""

import math

from .polyline import Polyline


class Track:
    """
    Represent a named path from a job file.

    Wraps a Polyline for geometry and holds sampling state.
    """

    def __init__(self, track_dict, default_name='path'):
        """
        Initialize track from YAML dictionary.

        Args:
            track_dict : dict
                Dictionary with 'points' and optional 'name' and 'fractions' keys
            default_name : str, optional
                Name used when the dictionary has none

        """
        self.name = str(track_dict.get('name', default_name))
        self.polyline = Polyline(track_dict['points'])
        self.fractions = [float(f) for f in track_dict.get('fractions', [])]
        self.samples = None
        self.is_sampled = False

    def to_dict(self):
        """
        Convert track to dictionary for JSON export.

        Returns
        -------
        dict
            Dictionary with path data and sampled points

        Raises
        ------
        RuntimeError
            If samples not generated yet

        """
        if not self.is_sampled:
            raise RuntimeError(f"Cannot export track '{self.name}' - not sampled yet")

        length = self.polyline.length()
        return {
            'points': [
                [value if math.isfinite(value) else None for value in point]
                for point in self.polyline.points.tolist()
            ],
            'length': length if math.isfinite(length) else None,
            'samples': self.samples,
            'num_samples': len(self.samples) if self.samples else 0,
            'num_undefined': sum(1 for s in self.samples if s['point'] is None)
        }

    def __repr__(self):
        """Return string representation of track."""
        status = "sampled" if self.is_sampled else "not sampled"
        return f"Track({self.name!r}, points={len(self.polyline)}, {status})"

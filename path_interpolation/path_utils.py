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


"""File I/O utilities for loading YAML jobs and exporting JSON samples."""

import json
import yaml
from pathlib import Path
from datetime import datetime
from .track import Track


def load_interpolation_job(yaml_path):
    """
    Load interpolation job configuration from a YAML file.

    Parameters
    ----------
    yaml_path : str
        Path to the YAML configuration file.

    Returns
    -------
    tuple
        A tuple containing the following elements:
        - tracks : list
            List of Track objects.
        - parameters : dict
            Dictionary of sampling parameters.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML structure is invalid.

    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError("Top level of YAML must be a mapping")

    required_keys = ['paths', 'parameters']
    for key in required_keys:
        if key not in config:
            raise ValueError(f"Missing required key in YAML: '{key}'")

    if not isinstance(config['parameters'], dict):
        raise ValueError("'parameters' must be a mapping")

    required_params = ['num_points']
    for param in required_params:
        if param not in config['parameters']:
            raise ValueError(f"Missing required parameter: '{param}'")

    if not config['paths']:
        raise ValueError("No paths defined in configuration")

    tracks = []
    names = set()
    for i, track_dict in enumerate(config['paths']):
        if not isinstance(track_dict, dict):
            raise ValueError(f"Path {i} must be a mapping")
        if 'points' not in track_dict:
            raise ValueError(f"Path {i} missing 'points'")

        track = Track(track_dict, default_name=f'path_{i}')
        if track.name in names:
            raise ValueError(f"Duplicate path name: '{track.name}'")
        names.add(track.name)
        tracks.append(track)

    return tracks, config['parameters']


def export_to_json(tracks, output_path, metadata=None):
    """
    Export sampled tracks to a JSON file.

    Parameters
    ----------
    tracks : list
        List of Track objects. Samples must be generated before export.
    output_path : str
        Path where the JSON file will be written.
    metadata : dict, optional
        Optional metadata to include in the output file.

    Raises
    ------
    RuntimeError
        If any track has not been sampled yet.

    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    for track in tracks:
        if not track.is_sampled:
            raise RuntimeError(f"Track '{track.name}' has not been sampled yet - cannot export")

    data = {
        'metadata': {
            'generated_at': datetime.now().isoformat(),
            'num_paths': len(tracks),
            'total_samples': sum(len(track.samples) for track in tracks)
        },
        'paths': {}
    }

    if metadata:
        data['metadata'].update(metadata)

    for track in tracks:
        data['paths'][track.name] = track.to_dict()

    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2, allow_nan=False)


def auto_generate_output_path(input_path, output_dir=None):
    """
    Build a timestamped JSON path named after the job file.

    Parameters
    ----------
    input_path : str
        Path of the YAML job; its stem prefixes the output file name.
    output_dir : str, optional
        Directory for the output file. Defaults to the `generated/`
        directory beside the `path_interpolation` package, which is the
        repository root in a source checkout.

    Returns
    -------
    Path
        `<output_dir>/<job>_<YYYYmmdd_HHMMSS>.json`; the directory is created.

    """
    if output_dir is None:
        output_dir = Path(__file__).parent.parent / "generated"
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return output_dir / f"{Path(input_path).stem}_{timestamp}.json"

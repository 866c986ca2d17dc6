#!/usr/bin/env python3

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

"""Main user entry point - orchestrates loading, sampling, and exporting."""

import sys
import argparse
from pathlib import Path

if __name__ == '__main__':
    sys.path.insert(0, str(Path(__file__).parent.parent))

from path_interpolation import path_utils
from path_interpolation.path_sampler import PathSampler


def parse_arguments(argv=None):
    """Parse command line arguments with smart defaults."""
    parser = argparse.ArgumentParser(
        description="Interpolate points along 2D paths by arc length fraction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use default config
  %(prog)s

  # Specify input config
  %(prog)s --input my_paths.yaml

  # Specify both input and output
  %(prog)s --input my_paths.yaml --output my_samples.json

  # Verbose output
  %(prog)s --input my_paths.yaml --verbose
        """
    )

    default_config = Path(__file__).parent.parent / "config" / "path_config.yaml"

    parser.add_argument(
        '--input', '-i',
        type=str,
        default=str(default_config) if default_config.exists() else None,
        help='Input YAML configuration file (default: config/path_config.yaml)'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=None,
        help='Output JSON file (default: auto-generated in generated/)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Print detailed information during sampling'
    )

    return parser.parse_args(argv)


def _format_point(point):
    """Format a point for console output."""
    if point is None:
        return "undefined"
    return f"[{point[0]:.3f}, {point[1]:.3f}]"


def main(argv=None):
    """Orchestrate loading, sampling, and exporting of paths."""
    args = parse_arguments(argv)

    if args.input is None:
        print("ERROR: No input file specified and default config not found")
        print("Use --input to specify a YAML configuration file")
        return 1

    try:
        # Load Configuration
        if args.verbose:
            print(f"Loading configuration from: {args.input}")

        tracks, parameters = path_utils.load_interpolation_job(args.input)

        if args.verbose:
            print(f"  Job: {Path(args.input).stem}")
            print(f"  Number of paths: {len(tracks)}")
            print(f"  Points per path: {parameters['num_points']}")
            print()

        sampler = PathSampler(parameters)

        # Sample Each Path
        if args.verbose:
            print(f"Sampling {len(tracks)} path(s)...")

        all_defined = True
        for track in tracks:
            polyline = track.polyline

            if args.verbose:
                print(f"  Processing path '{track.name}':")
                print(f"    Start: {_format_point(polyline.first_point())}")
                print(f"    End:   {_format_point(polyline.last_point())}")
                print(f"    Length: {polyline.length():.3f}")

            if not sampler.sample(track):
                all_defined = False
                undefined = [s['fraction'] for s in track.samples if s['point'] is None]
                print(f"✗ Path '{track.name}': undefined at fraction(s) {undefined}")

            if args.verbose:
                for sample in track.samples:
                    print(f"    f={sample['fraction']}: {_format_point(sample['point'])}")

        print(f"Sampled {len(tracks)} path(s)")
        print()

        # Export to JSON
        if args.output is None:
            output_path = path_utils.auto_generate_output_path(args.input)
            if args.verbose:
                print(f"Auto-generated output path: {output_path}")
        else:
            output_path = Path(args.output)

        metadata = {
            'input_file': str(Path(args.input).resolve()),
            'num_points': parameters['num_points']
        }

        path_utils.export_to_json(tracks, output_path, metadata)

        if args.verbose:
            print(f"Wrote samples to: {output_path}")

        return 0 if all_defined else 1

    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        return 1
    except ValueError as e:
        print(f"ERROR: Invalid configuration - {e}")
        return 1
    except Exception as e:
        print(f"ERROR: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())

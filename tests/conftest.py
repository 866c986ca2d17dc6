"""Shared fixtures for path interpolation tests."""

import pytest

from path_interpolation import Polyline


@pytest.fixture
def straight_path():
    """Three collinear points along the x axis, total length 2."""
    return Polyline([[-1.0, 0.0], [0.0, 0.0], [1.0, 0.0]])


@pytest.fixture
def corner_path():
    """Two unit segments meeting at a right angle, total length 2."""
    return Polyline([[-1.0, 0.0], [0.0, 0.0], [0.0, 1.0]])


@pytest.fixture
def job_file(tmp_path):
    """Write a small valid job file and return its path."""
    path = tmp_path / "job.yaml"
    path.write_text(
        "parameters:\n"
        "  num_points: 3\n"
        "paths:\n"
        "  - name: straight\n"
        "    points: [[-1.0, 0.0], [0.0, 0.0], [1.0, 0.0]]\n"
        "    fractions: [0.25]\n"
        "  - points: [[0.0, 0.0], [0.0, 2.0]]\n"
    )
    return path

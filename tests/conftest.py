import os

import pytest

import gpxkit.appconfig as gcfg
from gpxkit.models import Document, Point, Segment, Track

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), "fileformats", "samples")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep a developer's config file and GPXKIT_* variables out of the tests."""
    monkeypatch.setattr(gcfg, "_FILE_PATHS", [])
    for var in gcfg._ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sample_path():
    return os.path.join(SAMPLES_DIR, "strava-running-sample.gpx")


@pytest.fixture
def zero_duration_path():
    return os.path.join(SAMPLES_DIR, "zero-duration.gpx")


@pytest.fixture
def sample_bytes(sample_path):
    with open(sample_path, "rb") as f:
        return f.read()


def make_document(*points: Point) -> Document:
    """Wrap points into a one-track, one-segment document."""
    return Document(creator="pytest", version="1.1", tracks=(Track(segments=(Segment(points=points),)),))

import gzip

import pytest

from gpxkit.errors import DecodeError
from gpxkit.loader import is_gzipped, load_gpx, read_bytes


def test_is_gzipped():
    assert is_gzipped("run.gpx.gz")
    assert is_gzipped("RUN.GPX.GZ")
    assert not is_gzipped("run.gpx")


def test_load_plain_file(sample_path):
    gpx = load_gpx(sample_path)
    assert gpx.creator == "StravaGPX"
    assert len(gpx.points()) == 11


def test_load_gzipped_file(tmp_path, sample_bytes):
    gz_path = tmp_path / "activity.gpx.gz"
    with gzip.open(gz_path, "wb") as f:
        f.write(sample_bytes)

    assert load_gpx(str(gz_path)).duration() == 34.0


def test_leading_whitespace_is_stripped(tmp_path, sample_bytes):
    path = tmp_path / "padded.gpx"
    path.write_bytes(b"\n\n   " + sample_bytes)

    assert read_bytes(str(path)) == sample_bytes
    assert load_gpx(str(path)).creator == "StravaGPX"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_gpx(str(tmp_path / "nope.gpx"))


def test_load_invalid_file(tmp_path):
    path = tmp_path / "notes.gpx"
    path.write_bytes(b"remember to buy milk")

    with pytest.raises(DecodeError):
        load_gpx(str(path))

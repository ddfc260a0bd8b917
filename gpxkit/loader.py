"""Read GPX files from disk for gpxkit.

Plain ``.gpx`` files and gzipped ``.gpx.gz`` exports (as downloaded from
Strava or Garmin bulk exports) are both accepted.
"""

import gzip
import logging
import os

from gpxkit.decoder import decode
from gpxkit.models import Document

logger = logging.getLogger(__name__)


def is_gzipped(file_path: str) -> bool:
    return file_path.lower().endswith(".gz")


def read_bytes(file_path: str) -> bytes:
    """Return the raw document bytes, gunzipping ``.gz`` files."""
    if is_gzipped(file_path):
        with gzip.open(file_path, "rb") as f:
            data = f.read()
    else:
        with open(file_path, "rb") as f:
            data = f.read()
    # some exporters pad the file before the XML declaration
    return data.lstrip()


def load_gpx(file_path: str) -> Document:
    """Decode the GPX file at ``file_path``."""
    logger.debug("Loading %s", os.path.basename(file_path))
    return decode(read_bytes(file_path))

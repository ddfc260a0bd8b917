"""GPX 1.1 document model.

Schema documentation: https://www.topografix.com/GPX/1/1/

Only the parts of the schema needed for recorded activities are modelled:
the document header, metadata time and tracks. Routes and document-level
waypoints are not. Instances are frozen and collections are tuples, so a
decoded document is read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from gpxkit.geo import haversine_km
from gpxkit.metrics import ActivityMetrics, GeoPoint
from gpxkit.timeutils import parse_or_zero


class Fix(Enum):
    """Type of GPS fix. ``None`` on a point means the fix is unknown."""

    NONE = "none"
    TWO_D = "2d"
    THREE_D = "3d"
    DGPS = "dgps"
    PPS = "pps"  # military signal


@dataclass(frozen=True)
class Link:
    """A link to an external resource (web page, photo, video clip, ...)."""

    url: str = ""
    text: str = ""
    type: str = ""  # MIME type hint


@dataclass(frozen=True)
class Extensions:
    """Inner markup of an ``<extensions>`` element, kept as-is (UTF-8)."""

    raw: bytes = b""


@dataclass(frozen=True)
class DeviceExtension:
    """Garmin TrackPointExtension telemetry. ``None`` means not recorded."""

    temperature: float | None = None  # air, degrees Celsius
    water_temperature: float | None = None
    depth: float | None = None  # meters
    heart_rate: int | None = None  # beats per minute
    cadence: int | None = None  # revolutions/steps per minute


@dataclass(frozen=True)
class Point:
    """A track point (``trkpt``)."""

    latitude: float
    longitude: float
    elevation: float | None = None  # meters
    timestamp: str = ""  # RFC 3339 text, parsed on demand by time()
    magnetic_variation: float | None = None  # degrees, 0 <= value < 360
    geoid_height: float | None = None
    name: str = ""
    comment: str = ""
    description: str = ""
    source: str = ""
    links: tuple[Link, ...] = ()
    symbol: str = ""
    type: str = ""
    fix: Fix | None = None
    satellites: int | None = None
    hdop: float | None = None
    vdop: float | None = None
    pdop: float | None = None
    age_of_gps_data: float | None = None  # seconds since last DGPS update
    dgps_id: int | None = None  # 0 <= value <= 1023
    extension: DeviceExtension | None = None

    def time(self) -> datetime:
        """Return the timestamp as a datetime, or ``ZERO_TIME`` if it cannot be parsed."""
        return parse_or_zero(self.timestamp)

    def distance_to(self, other: Point) -> float:
        """Great-circle distance to ``other`` in kilometers."""
        return haversine_km(self.latitude, self.longitude, other.latitude, other.longitude)

    def geo_point(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)


@dataclass(frozen=True)
class Segment:
    """Points that are logically connected in order (``trkseg``)."""

    points: tuple[Point, ...] = ()
    extensions: Extensions | None = None


@dataclass(frozen=True)
class Track:
    """An ordered list of points describing a path (``trk``)."""

    name: str = ""
    comment: str = ""
    description: str = ""
    source: str = ""
    links: tuple[Link, ...] = ()
    number: int | None = None
    type: str = ""
    extensions: Extensions | None = None
    segments: tuple[Segment, ...] = ()


@dataclass(frozen=True)
class Metadata:
    timestamp: str = ""


@dataclass(frozen=True)
class Document(ActivityMetrics):
    """Root of a GPX document (``gpx``)."""

    creator: str = ""
    version: str = ""
    metadata: Metadata | None = None
    tracks: tuple[Track, ...] = ()

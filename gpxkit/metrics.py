"""Running metrics derived from a decoded GPX document.

Every metric reads the first segment of the first track only. Aggregating
several tracks or segments would need a policy for the gaps between them,
which this module does not define.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, NamedTuple

from gpxkit.errors import ContractViolation
from gpxkit.geo import KM_PER_MILE

if TYPE_CHECKING:
    from gpxkit.models import Point, Track


class Pace(NamedTuple):
    """Time per distance unit, truncated to whole seconds."""

    minutes: int
    seconds: int

    def __str__(self) -> str:
        return f"{self.minutes}:{self.seconds:02d}"


class GeoPoint(NamedTuple):
    """A bare latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


def _pace(duration: float, distance: float) -> Pace:
    if distance <= 0:
        raise ContractViolation("cannot compute pace over zero distance")
    minutes, seconds = divmod(int(duration / distance), 60)
    return Pace(minutes, seconds)


class ActivityMetrics:
    """Metric methods mixed into :class:`gpxkit.models.Document`."""

    tracks: tuple[Track, ...]

    def points(self) -> tuple[Point, ...]:
        """Return the points of the first segment of the first track."""
        if not self.tracks:
            raise ContractViolation("document has no tracks")
        segments = self.tracks[0].segments
        if not segments:
            raise ContractViolation("first track has no segments")
        return segments[0].points

    def _points_or_fail(self) -> tuple[Point, ...]:
        points = self.points()
        if not points:
            raise ContractViolation("first segment has no points")
        return points

    def start_time(self) -> datetime:
        """Time of the first point (``ZERO_TIME`` when it has none)."""
        return self._points_or_fail()[0].time()

    def duration(self) -> float:
        """Elapsed seconds between the first and the last point.

        Returns 0.0 when the last point is not strictly later than the first,
        which also covers points whose timestamps could not be parsed.
        """
        points = self._points_or_fail()
        start = points[0].time()
        end = points[-1].time()
        if end <= start:
            return 0.0
        return (end - start).total_seconds()

    def distance(self) -> float:
        """Total distance in kilometers, summed over consecutive points."""
        points = self.points()
        total = 0.0
        for i in range(1, len(points)):
            total += points[i - 1].distance_to(points[i])
        return total

    def distance_in_miles(self) -> float:
        return self.distance() / KM_PER_MILE

    def pace_in_km(self) -> Pace:
        """Running pace per kilometer."""
        return _pace(self.duration(), self.distance())

    def pace_in_mile(self) -> Pace:
        """Running pace per mile."""
        return _pace(self.duration(), self.distance() / KM_PER_MILE)

    def elevations(self) -> list[float]:
        """Elevation of every point in meters; unrecorded elevations read as 0.0."""
        return [p.elevation if p.elevation is not None else 0.0 for p in self.points()]

    def elevation_extent(self) -> tuple[float, float]:
        """Return ``(min, max)`` elevation in meters."""
        elevations = self.elevations()
        if not elevations:
            raise ContractViolation("first segment has no points")
        lowest = highest = elevations[0]
        for value in elevations:
            if value < lowest:
                lowest = value
            if value > highest:
                highest = value
        return lowest, highest

    def coordinates(self) -> list[GeoPoint]:
        return [p.geo_point() for p in self.points()]

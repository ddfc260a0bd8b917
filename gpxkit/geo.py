"""Great-circle helpers (spherical Earth)."""

from __future__ import annotations

import math

# https://en.wikipedia.org/wiki/Earth_radius
EARTH_RADIUS_KM = 6371
KM_PER_MILE = 1.609344


def to_radians(degrees: float) -> float:
    """Convert decimal degrees to radians."""
    return degrees * math.pi / 180.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute the haversine distance in kilometers between two lat/lon points.

    Args:
        lat1: Latitude 1 in degrees.
        lon1: Longitude 1 in degrees.
        lat2: Latitude 2 in degrees.
        lon2: Longitude 2 in degrees.

    Returns:
        Distance in kilometers.
    """
    # https://www.movable-type.co.uk/scripts/latlong.html
    phi1 = to_radians(lat1)
    phi2 = to_radians(lat2)
    d_phi = to_radians(lat2 - lat1)
    d_lambda = to_radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c

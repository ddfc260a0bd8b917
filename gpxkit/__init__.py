"""This is the init module for gpxkit"""

from .decoder import decode
from .errors import ContractViolation, DecodeError, GPXError
from .loader import load_gpx
from .metrics import GeoPoint, Pace
from .models import (
    DeviceExtension,
    Document,
    Extensions,
    Fix,
    Link,
    Metadata,
    Point,
    Segment,
    Track,
)

__version__ = "0.1.0"
__all__ = [
    "ContractViolation",
    "DecodeError",
    "DeviceExtension",
    "Document",
    "Extensions",
    "Fix",
    "GPXError",
    "GeoPoint",
    "Link",
    "Metadata",
    "Pace",
    "Point",
    "Segment",
    "Track",
    "decode",
    "load_gpx",
]

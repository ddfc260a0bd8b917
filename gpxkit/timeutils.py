"""Timestamp parsing and formatting utilities."""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta, timezone

# Stand-in for "no usable timestamp". Compare against it, never do
# calendar arithmetic with it.
ZERO_TIME = datetime.min.replace(tzinfo=UTC)

_RFC3339 = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})$"
)


def _tzinfo(offset: str) -> timezone:
    if offset == "Z":
        return UTC
    sign = -1 if offset[0] == "-" else 1
    hours, minutes = offset[1:].split(":")
    return timezone(sign * timedelta(hours=int(hours), minutes=int(minutes)))


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 timestamp such as ``2019-10-26T21:21:11Z``.

    The result is timezone-aware and keeps the offset written in the text.
    Fractional seconds beyond microseconds are truncated.

    Raises:
        ValueError: If ``text`` is not an RFC 3339 date-time or names an
            impossible date.
    """
    match = _RFC3339.match(text)
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {text!r}")
    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    return datetime(
        int(match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
        int(fraction),
        tzinfo=_tzinfo(match["offset"]),
    )


def parse_or_zero(text: str) -> datetime:
    """Like :func:`parse_rfc3339` but returns :data:`ZERO_TIME` on failure."""
    try:
        return parse_rfc3339(text)
    except ValueError:
        return ZERO_TIME


def duration_hms(seconds: float) -> str:
    """Format a duration in seconds as ``h:mm:ss`` (whole seconds)."""
    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    return f"{hours}:{minutes:02d}:{total % 60:02d}"

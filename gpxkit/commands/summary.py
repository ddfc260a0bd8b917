"""CLI command: summary — show running metrics for one GPX file."""

from typing import Any
from zoneinfo import ZoneInfo

from tabulate import tabulate

from gpxkit.errors import ContractViolation
from gpxkit.loader import load_gpx
from gpxkit.timeutils import ZERO_TIME, duration_hms


def summary_rows(file_path: str, config: dict[str, Any], units: str | None = None) -> list[list[str]]:
    """Return ``[label, value]`` rows describing the track in ``file_path``."""
    units = units or config["units"]
    gpx = load_gpx(file_path)

    points = gpx.points()
    start = gpx.start_time()
    if start == ZERO_TIME:
        started = "—"
    else:
        try:
            start = start.astimezone(ZoneInfo(config["timezone"]))
        except OverflowError:
            # converting would leave the datetime range; keep the recorded offset
            pass
        started = start.strftime("%Y-%m-%d %H:%M:%S %Z")

    if units == "mile":
        distance = gpx.distance_in_miles()
        unit_label = "mi"
    else:
        distance = gpx.distance()
        unit_label = "km"

    try:
        pace = gpx.pace_in_mile() if units == "mile" else gpx.pace_in_km()
        pace_str = f"{pace} /{unit_label}"
    except ContractViolation:
        # a track that never moved has no pace
        pace_str = "—"

    lowest, highest = gpx.elevation_extent()

    return [
        ["Creator", gpx.creator or "—"],
        ["Track", gpx.tracks[0].name or "—"],
        ["Points", f"{len(points):,}"],
        ["Start", started],
        ["Duration", duration_hms(gpx.duration())],
        ["Distance", f"{distance:.2f} {unit_label}"],
        ["Pace", pace_str],
        ["Elevation", f"{lowest:.1f} – {highest:.1f} m"],
    ]


def run(file_path: str, config: dict[str, Any], units: str | None = None) -> None:
    """Print the summary table for ``file_path``."""
    print(tabulate(summary_rows(file_path, config, units), tablefmt=config["table_format"]))

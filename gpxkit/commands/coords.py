"""CLI command: coords — print the coordinates of every track point."""

import csv
import sys
from typing import Any

from tabulate import tabulate

from gpxkit.loader import load_gpx


def run(file_path: str, config: dict[str, Any], as_csv: bool = False) -> None:
    """Print one latitude/longitude row per point of the first segment."""
    coordinates = load_gpx(file_path).coordinates()

    if as_csv:
        writer = csv.writer(sys.stdout)
        writer.writerow(["latitude", "longitude"])
        writer.writerows(coordinates)
        return

    print(
        tabulate(
            coordinates,
            headers=["Latitude", "Longitude"],
            tablefmt=config["table_format"],
            floatfmt=".7f",
        )
    )

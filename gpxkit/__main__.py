# pylint: disable=import-outside-toplevel
"""Main entry point for the gpxkit CLI.

This module provides the command-line interface for gpxkit, allowing users to
summarize a recorded run from a GPX file and export its coordinates.
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

USAGE = """
gpxkit - Running metrics from GPX tracks.

Usage:
    python -m gpxkit [--debug] <command>

Commands:
    summary FILE  Show distance, duration, pace and elevation for a track
                  (--units km|mile overrides the configured units)
    coords FILE   Print the latitude/longitude of every track point
                  (--csv for comma separated output)
    help          Show this help and usage documentation

Only the first segment of the first track is measured. FILE may be a
.gpx or a gzipped .gpx.gz export.

Configuration:
    gpxkit_config.json in the working directory, or GPXKIT_DEBUG,
    GPXKIT_UNITS, GPXKIT_TIMEZONE and GPXKIT_TABLE_FORMAT (also read
    from .env).
"""


def main(argv: list[str] | None = None) -> int:
    """Main function for the gpxkit CLI."""
    parser = argparse.ArgumentParser(prog="gpxkit", description="gpxkit CLI")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    summary_parser = subparsers.add_parser("summary", help="Show running metrics for a GPX file")
    summary_parser.add_argument("file", help="Path to a .gpx or .gpx.gz file")
    summary_parser.add_argument("--units", choices=["km", "mile"], help="Distance and pace units")

    coords_parser = subparsers.add_parser("coords", help="Print track point coordinates")
    coords_parser.add_argument("file", help="Path to a .gpx or .gpx.gz file")
    coords_parser.add_argument("--csv", action="store_true", help="Print CSV instead of a table")

    subparsers.add_parser("help", help="Show usage and documentation")

    args = parser.parse_args(argv)

    if args.command == "help":
        print(USAGE)
        return 0

    from gpxkit.appconfig import load_config
    from gpxkit.errors import GPXError

    try:
        config = load_config()
    except ValueError as e:
        print(f"gpxkit: configuration error: {e}", file=sys.stderr)
        return 1

    debug = args.debug or config["debug"]
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)

    try:
        if args.command == "summary":
            from gpxkit.commands.summary import run

            run(args.file, config, units=args.units)
        elif args.command == "coords":
            from gpxkit.commands.coords import run

            run(args.file, config, as_csv=args.csv)
    except (GPXError, OSError) as e:
        print(f"gpxkit: {args.file}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

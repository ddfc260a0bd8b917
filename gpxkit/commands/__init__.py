"""CLI subcommands for gpxkit."""

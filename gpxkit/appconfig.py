"""Application configuration helpers.

Settings are layered, later layers winning:
  - built-in ``DEFAULT_CONFIG``,
  - the first JSON config file found in ``_FILE_PATHS``,
  - ``GPXKIT_*`` environment variables (a ``.env`` file is loaded by the CLI).

No config file is required; the defaults always produce a working setup.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_CONFIG: dict[str, Any] = {
    "debug": False,
    "units": "km",  # "km" or "mile"
    "timezone": "UTC",  # used to display start times
    "table_format": "simple",  # any tabulate tablefmt
}

UNITS = ("km", "mile")

# Candidate JSON config file locations (searched in order)
_FILE_PATHS: list[Path] = [
    Path("gpxkit_config.json"),
    Path("../gpxkit_config.json"),
]

_ENV_VARS: dict[str, str] = {
    "GPXKIT_DEBUG": "debug",
    "GPXKIT_UNITS": "units",
    "GPXKIT_TIMEZONE": "timezone",
    "GPXKIT_TABLE_FORMAT": "table_format",
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_from_file() -> dict[str, Any] | None:
    """Try each candidate path; return parsed JSON or ``None``."""
    for path in _FILE_PATHS:
        if path.exists():
            try:
                with open(path) as f:
                    return json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("Skipping unreadable config file %s: %s", path, e)
    return None


def _load_from_env() -> dict[str, Any]:
    config: dict[str, Any] = {}
    for var, key in _ENV_VARS.items():
        value = os.environ.get(var)
        if value is None or value == "":
            continue
        if key == "debug":
            config[key] = value.strip().lower() in ("1", "true", "yes", "on")
        else:
            config[key] = value.strip()
    return config


def _validate(config: dict[str, Any]) -> None:
    if config["units"] not in UNITS:
        raise ValueError(f"Invalid units {config['units']!r}, expected one of {', '.join(UNITS)}")
    try:
        ZoneInfo(config["timezone"])
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Invalid timezone {config['timezone']!r}") from exc


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config() -> dict[str, Any]:
    """Return the effective configuration.

    Raises:
        ValueError: If ``units`` or ``timezone`` hold unsupported values.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    file_cfg = _load_from_file()
    if file_cfg is not None:
        config.update(file_cfg)
    config.update(_load_from_env())
    _validate(config)
    return config

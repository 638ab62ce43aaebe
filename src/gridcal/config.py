"""Configuration management for gridcal."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

GRIDCAL_HOME = Path(os.environ.get("GRIDCAL_HOME", Path.home() / ".gridcal"))
CONFIG_FILE = GRIDCAL_HOME / "gridcal.conf"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Default grid settings."""

    first_day_of_week: int = 0
    prefill: bool = True
    postfill: bool = True
    duration: int = 0


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}")
    return default


def _parse_int(key: str, value: str, default: int, low: int, high: int | None = None) -> int:
    try:
        number = int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}")
        return default
    if number < low or (high is not None and number > high):
        logger.warning(f"{key.upper()} out of range: {number}")
        return default
    return number


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from gridcal.conf."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "first_day_of_week":
                config.first_day_of_week = _parse_int(key, value, config.first_day_of_week, 0, 6)
            case "prefill":
                config.prefill = _parse_bool(key, value, config.prefill)
            case "postfill":
                config.postfill = _parse_bool(key, value, config.postfill)
            case "duration":
                config.duration = _parse_int(key, value, config.duration, 0)

    return config

"""
Settings Module for Knight Quest

Persistent user preferences (default algorithm, IDS ceiling, benchmark
repeats, debug logging) stored as JSON in config.json in the working
directory. Values read from disk are checked before use: anything of the
wrong type or out of range is dropped in favour of the default.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "astar",
    "benchmark_repeats": 40,
    "ids_max_depth": 15,
}

# Smallest accepted value for integer settings
_MINIMUMS = {
    "benchmark_repeats": 1,
    "ids_max_depth": 0,
}


def _is_valid(key: str, value: Any) -> bool:
    default = DEFAULT_SETTINGS[key]
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        # bool is an int subclass; reject it for counts
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return value >= _MINIMUMS.get(key, 0)
    if isinstance(default, str):
        return isinstance(value, str) and bool(value.strip())
    return True


def sanitize_settings(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge raw values over the defaults, keeping only valid known keys.

    Args:
        raw: Settings as read from disk

    Returns:
        Complete settings dictionary
    """
    result = DEFAULT_SETTINGS.copy()
    for key, value in raw.items():
        if key not in DEFAULT_SETTINGS:
            logger.debug(f"Ignoring unknown setting: {key}")
            continue
        if not _is_valid(key, value):
            logger.warning(f"Invalid value for {key}: {value!r}, using {DEFAULT_SETTINGS[key]!r}")
            continue
        result[key] = value
    return result


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file to read (defaults to SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(raw, dict):
        logger.warning(f"Settings file {path} does not hold an object, using defaults")
        return DEFAULT_SETTINGS.copy()

    settings = sanitize_settings(raw)
    logger.debug(f"Settings loaded: {settings}")
    return settings


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save the known keys of a settings dictionary to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file to write (defaults to SETTINGS_FILE)
    """
    path = path or SETTINGS_FILE
    data = sanitize_settings(settings)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        logger.debug(f"Settings saved: {data}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")

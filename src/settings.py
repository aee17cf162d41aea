"""
Settings Module for the AoC 2023 solvers

Provides persistent storage for user preferences using JSON.
Settings are stored in config.json in the working directory.
Each stored value is checked on load; a bad value falls back to its
default without discarding the rest of the file.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict

from src.puzzles import get_default_puzzle_name, get_puzzle_names

logger = logging.getLogger(__name__)

# Settings file location (project root)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "puzzle_name": get_default_puzzle_name(),
    "input_dir": "inputs",
}

# Validity check per setting key
_VALIDATORS: Dict[str, Callable[[Any], bool]] = {
    "debug_enabled": lambda v: isinstance(v, bool),
    "puzzle_name": lambda v: v in get_puzzle_names(),
    "input_dir": lambda v: isinstance(v, str) and bool(v.strip()),
}


def validate_settings(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge stored values over the defaults, keeping only valid known keys.

    Args:
        raw: Decoded JSON object

    Returns:
        Complete settings dictionary
    """
    result = DEFAULT_SETTINGS.copy()
    for key, value in raw.items():
        check = _VALIDATORS.get(key)
        if check is None:
            logger.debug(f"Ignoring unknown setting: {key}")
        elif check(value):
            result[key] = value
        else:
            logger.warning(f"Invalid value for {key}: {value!r}, using {result[key]!r}")
    return result


def load_settings() -> Dict[str, Any]:
    """
    Load settings from config.json.

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    if not SETTINGS_FILE.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(SETTINGS_FILE, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(raw, dict):
        logger.warning("Settings file is not a JSON object, using defaults")
        return DEFAULT_SETTINGS.copy()

    settings = validate_settings(raw)
    logger.debug(f"Settings loaded: {settings}")
    return settings


def save_settings(settings: Dict[str, Any]) -> None:
    """
    Save the known settings keys to config.json.

    Args:
        settings: Settings dictionary to save
    """
    stored = {key: settings[key] for key in DEFAULT_SETTINGS if key in settings}
    try:
        with open(SETTINGS_FILE, 'w', encoding='utf-8') as f:
            json.dump(stored, f, indent=2)
        logger.debug(f"Settings saved: {stored}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")


def get_input_dir(settings: Dict[str, Any]) -> Path:
    """
    Directory holding puzzle input files, with "~" expanded.

    Args:
        settings: Loaded settings dictionary

    Returns:
        Input directory path (not required to exist)
    """
    raw = settings.get("input_dir") or DEFAULT_SETTINGS["input_dir"]
    return Path(raw).expanduser()

"""JSON-based settings persistence for the multi-date picker."""

import calendar
import json
import logging
import os
import re

logger = logging.getLogger(__name__)

SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".multi-date-picker.json")

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")

_DEFAULTS = {
    "first_weekday": calendar.SUNDAY,
    "accent": "#0078D4",
    "window_width": None,
    "window_height": None,
}


def load_settings(path: str = SETTINGS_PATH) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", path)
        return settings

    wd = stored.get("first_weekday")
    if isinstance(wd, int) and not isinstance(wd, bool) and 0 <= wd <= 6:
        settings["first_weekday"] = wd
    accent = stored.get("accent")
    if isinstance(accent, str) and _HEX_COLOR.match(accent):
        settings["accent"] = accent
    for key in ("window_width", "window_height"):
        value = stored.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            settings[key] = value
    return settings


def save_settings(settings: dict, path: str = SETTINGS_PATH) -> None:
    """Persist settings to disk."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    logger.debug("Saved settings to %s", path)

"""JSON-based settings for the calendar dialog."""

import json
import os

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".medcal-settings.json")

_DEFAULTS = {
    "scroll_delay_ms": 200,
    "years_before": 100,
    "years_after": 50,
}

_INT_KEYS = ("scroll_delay_ms", "years_before", "years_after")


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(path or _SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return settings
    if not isinstance(stored, dict):
        return settings
    for key in _INT_KEYS:
        value = stored.get(key)
        # bool is an int subclass; reject it explicitly
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            settings[key] = value
    return settings


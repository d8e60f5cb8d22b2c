"""Widget options and JSON-based settings for the calendar."""

import calendar
import json
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".calendar-lite-settings.json")

DEFAULT_OPTIONS = {
    "footer_text": None,
    "first_weekday": calendar.SUNDAY,
}

# Accepted spellings that map onto a recognized option
_ALIASES = {"footerHTML": "footer_text"}


def merge_options(options: dict | None = None) -> dict:
    """Return DEFAULT_OPTIONS overridden by ``options``.

    Unknown keys are logged and ignored, never fatal.
    """
    merged = dict(DEFAULT_OPTIONS)
    allowed = ", ".join(DEFAULT_OPTIONS)
    for key, value in (options or {}).items():
        name = _ALIASES.get(key, key)
        if name not in DEFAULT_OPTIONS:
            logger.warning("Invalid option supplied for CalendarLite: %s. Allowed: %s",
                           key, allowed)
            continue
        merged[name] = value

    if merged["footer_text"] is not None and not isinstance(merged["footer_text"], str):
        logger.warning("footer_text must be a string, got %r", merged["footer_text"])
        merged["footer_text"] = None
    first = merged["first_weekday"]
    if isinstance(first, bool) or not isinstance(first, int) or not 0 <= first <= 6:
        logger.warning("first_weekday must be an int in 0..6, got %r", first)
        merged["first_weekday"] = DEFAULT_OPTIONS["first_weekday"]
    return merged


def load_settings(path: str | None = None) -> dict:
    """Load options from disk, returning defaults for missing keys."""
    path = path or _SETTINGS_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return merge_options()
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not read settings from %s: %s", path, e)
        return merge_options()
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings in %s: expected a JSON object", path)
        return merge_options()
    return merge_options(stored)

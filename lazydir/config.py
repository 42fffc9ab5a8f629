"""Read-only JSON config helpers.

Supplies the theme name, input poll timeout, and log file location.
Malformed or missing config falls back to defaults.
lazydir never writes this file.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazydir"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_POLL_TIMEOUT_MS = 16


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_theme_name() -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def load_log_file() -> Path | None:
    value = _load_string("log_file")
    return Path(value).expanduser() if value is not None else None


def load_poll_timeout_ms() -> int:
    """Return the input poll timeout in milliseconds.

    Booleans, non-integers, and values outside ``1..1000`` fall back to the
    default.
    """
    value = load_config().get("poll_timeout_ms")
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_POLL_TIMEOUT_MS
    if value < 1 or value > 1000:
        return DEFAULT_POLL_TIMEOUT_MS
    return value


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_POLL_TIMEOUT_MS",
    "load_config",
    "load_theme_name",
    "load_log_file",
    "load_poll_timeout_ms",
]

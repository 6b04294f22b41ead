"""Persistent JSON config helpers.

Stores the UI theme name and the left pane width percentage.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import math
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "bindsheet"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep rendering
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _percent_value(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value <= 0 or value >= 100:
        return None
    return float(value)


def load_left_pane_percent(data: dict[str, object] | None = None) -> float | None:
    """Load the left pane width percentage, constrained to (0, 100)."""
    if data is None:
        data = load_config()
    return _percent_value(data.get("left_pane_percent"))


def save_left_pane_percent(percent: float) -> None:
    """Persist the left pane percentage clamped to ``[1.0, 99.0]``."""
    config = load_config()
    config["left_pane_percent"] = round(max(1.0, min(99.0, float(percent))), 2)
    save_config(config)


def load_theme_name(data: dict[str, object] | None = None) -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    if data is None:
        data = load_config()
    value = data.get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_left_pane_percent",
    "save_left_pane_percent",
    "load_theme_name",
    "save_theme_name",
]

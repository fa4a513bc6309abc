"""JSON config helpers.

Reads color mode, theme name, and the fallback terminal width from a
user-edited file. Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .terminal import DEFAULT_COLUMNS
from .ui_theme import DEFAULT_THEME, normalize_theme_name

APP_NAME = "lazyls"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

COLOR_AUTO = "auto"
COLOR_ALWAYS = "always"
COLOR_NEVER = "never"
COLOR_MODES: tuple[str, ...] = (COLOR_AUTO, COLOR_ALWAYS, COLOR_NEVER)


@dataclass(frozen=True)
class Settings:
    """Validated config values."""

    color: str = COLOR_AUTO
    theme: str = DEFAULT_THEME.name
    fallback_columns: int = DEFAULT_COLUMNS

    def use_color(self, is_tty: bool) -> bool:
        """Return whether names should be decorated for this output."""
        if self.color == COLOR_ALWAYS:
            return True
        if self.color == COLOR_NEVER:
            return False
        if os.environ.get("NO_COLOR"):
            return False
        return is_tty


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


def _coerce_color_mode(value: object) -> str:
    if isinstance(value, str) and value.strip().lower() in COLOR_MODES:
        return value.strip().lower()
    return COLOR_AUTO


def _coerce_positive_int(value: object, default: int) -> int:
    """Booleans, non-integers and values below 1 fall back to ``default``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value <= 0:
        return default
    return value


def load_settings() -> Settings:
    """Load config and normalize every key into a ``Settings``."""
    data = load_config()
    raw_theme = data.get("theme")
    return Settings(
        color=_coerce_color_mode(data.get("color")),
        theme=normalize_theme_name(raw_theme if isinstance(raw_theme, str) else None),
        fallback_columns=_coerce_positive_int(data.get("fallback_columns"), DEFAULT_COLUMNS),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "COLOR_AUTO",
    "COLOR_ALWAYS",
    "COLOR_NEVER",
    "COLOR_MODES",
    "Settings",
    "load_config",
    "load_settings",
]

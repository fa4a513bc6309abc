"""Listing theme definitions and selection helpers.

Themes are ANSI palettes keyed by color category. ``plain`` has no escapes and
is what rendering uses when color output is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by name decoration."""

    name: str
    directory: str
    symlink: str
    executable: str
    archive: str
    special: str
    reset: str

    def style_for(self, category: str) -> str:
        """Return the escape sequence for ``category`` (``""`` for plain)."""
        return {
            "directory": self.directory,
            "symlink": self.symlink,
            "executable": self.executable,
            "archive": self.archive,
            "special": self.special,
        }.get(category, "")


DEFAULT_THEME = ListingTheme(
    name="default",
    directory="\033[1;34m",
    symlink="\033[1;35m",
    executable="\033[1;32m",
    archive="\033[1;31m",
    special="\033[7m",
    reset="\033[0m",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    directory="\033[1;38;5;45m",
    symlink="\033[38;5;141m",
    executable="\033[38;5;42m",
    archive="\033[38;5;209m",
    special="\033[7;38;5;117m",
    reset="\033[0m",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    directory="",
    symlink="",
    executable="",
    archive="",
    special="",
    reset="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "normalize_theme_name",
    "resolve_theme",
]

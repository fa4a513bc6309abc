"""Color category classification and name decoration."""

from __future__ import annotations

from .listing_model.types import (
    FILE_TYPE_DIRECTORY,
    FILE_TYPE_REGULAR,
    FILE_TYPE_SYMLINK,
    SPECIAL_FILE_TYPES,
    DirectoryEntry,
    Permissions,
)
from .ui_theme import DEFAULT_THEME, ListingTheme

CATEGORY_DIRECTORY = "directory"
CATEGORY_SYMLINK = "symlink"
CATEGORY_EXECUTABLE = "executable"
CATEGORY_ARCHIVE = "archive"
CATEGORY_SPECIAL = "special"
CATEGORY_PLAIN = "plain"

ARCHIVE_SUFFIXES: tuple[str, ...] = (".tar", ".tgz", ".gz", ".zip")


def classify_entry(file_type: str, permissions: Permissions, name: str) -> str:
    """Return exactly one color category for an entry.

    Rules are checked in a fixed order: symlink, directory, executable regular
    file, special file, archive suffix, plain. A symlink to a directory is
    still a symlink.
    """
    if file_type == FILE_TYPE_SYMLINK:
        return CATEGORY_SYMLINK
    if file_type == FILE_TYPE_DIRECTORY:
        return CATEGORY_DIRECTORY
    if file_type == FILE_TYPE_REGULAR and permissions.has_any_execute:
        return CATEGORY_EXECUTABLE
    if file_type in SPECIAL_FILE_TYPES:
        return CATEGORY_SPECIAL
    if name.endswith(ARCHIVE_SUFFIXES):
        return CATEGORY_ARCHIVE
    return CATEGORY_PLAIN


def category_for(entry: DirectoryEntry) -> str:
    metadata = entry.metadata
    return classify_entry(metadata.file_type, metadata.permissions, entry.name)


def decorate_name(name: str, category: str, theme: ListingTheme | None = None) -> str:
    """Wrap ``name`` in the theme attribute for ``category``; plain stays bare."""
    active_theme = theme or DEFAULT_THEME
    style = active_theme.style_for(category)
    if not style:
        return name
    return f"{style}{name}{active_theme.reset}"


def decorate_entry(entry: DirectoryEntry, theme: ListingTheme | None = None) -> str:
    return decorate_name(entry.name, category_for(entry), theme)


__all__ = [
    "CATEGORY_DIRECTORY",
    "CATEGORY_SYMLINK",
    "CATEGORY_EXECUTABLE",
    "CATEGORY_ARCHIVE",
    "CATEGORY_SPECIAL",
    "CATEGORY_PLAIN",
    "ARCHIVE_SUFFIXES",
    "classify_entry",
    "category_for",
    "decorate_name",
    "decorate_entry",
]

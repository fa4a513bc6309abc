"""Directory listing orchestration and recursive descent.

``list_directory`` collects, sorts and renders one directory, then (for
``-R``) recurses depth-first into child directories. Descent uses the
``lstat`` type of each entry, so symlinks are never followed and link cycles
cannot be entered.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from .classify import decorate_entry
from .errors import DirectoryUnreadable, ListingError
from .listing_model import DirectoryEntry, collect_entries, sort_entries
from .render import format_long_listing, layout_horizontal, layout_vertical, max_name_width
from .terminal import DEFAULT_COLUMNS, resolve_terminal_columns
from .ui_theme import DEFAULT_THEME, ListingTheme

MODE_DEFAULT = "default"
MODE_LONG = "long"
MODE_HORIZONTAL = "horizontal"
DISPLAY_MODES: tuple[str, ...] = (MODE_DEFAULT, MODE_LONG, MODE_HORIZONTAL)

DIAGNOSTIC_PREFIX = "lazyls"


@dataclass(frozen=True)
class ListingOptions:
    """Immutable rendering context shared by every call of one run.

    ``columns`` pins the terminal width; when ``None`` it is re-queried from
    ``out`` on each directory.
    """

    theme: ListingTheme = DEFAULT_THEME
    fallback_columns: int = DEFAULT_COLUMNS
    columns: int | None = None
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)


def report(options: ListingOptions, error: ListingError) -> None:
    """Write a one-line diagnostic for ``error`` to the error stream."""
    options.err.write(f"{DIAGNOSTIC_PREFIX}: {error.diagnostic()}\n")


def render_entries(entries: list[DirectoryEntry], mode: str, options: ListingOptions) -> list[str]:
    """Render sorted ``entries`` for ``mode`` into output lines."""
    if mode == MODE_LONG:
        return format_long_listing(entries, decorate=lambda entry: decorate_entry(entry, options.theme))

    if options.columns is not None:
        terminal_width = max(1, options.columns)
    else:
        terminal_width = resolve_terminal_columns(options.out, fallback=options.fallback_columns)

    names = [entry.name for entry in entries]
    decorated = {entry.name: decorate_entry(entry, options.theme) for entry in entries}
    decorate = decorated.__getitem__

    if mode == MODE_HORIZONTAL:
        return layout_horizontal(names, terminal_width, decorate=decorate)
    return layout_vertical(names, max_name_width(names), terminal_width, decorate=decorate)


def list_directory(
    path: Path | str,
    mode: str = MODE_DEFAULT,
    recursive: bool = False,
    options: ListingOptions | None = None,
    *,
    _nested: bool = False,
) -> bool:
    """List ``path`` and, when ``recursive``, every subdirectory below it.

    Returns ``False`` when ``path`` itself could not be opened. Unreadable
    subdirectories and vanished entries only produce diagnostics. Raises
    ``ValueError`` for a ``mode`` outside ``DISPLAY_MODES``.
    """
    if mode not in DISPLAY_MODES:
        raise ValueError(f"unknown display mode: {mode!r}")
    options = options or ListingOptions()
    path = Path(path)

    try:
        entries = sort_entries(collect_entries(path, on_error=lambda exc: report(options, exc)))
    except DirectoryUnreadable as exc:
        report(options, exc)
        return False

    if recursive:
        if _nested:
            options.out.write("\n")
        options.out.write(f"{path}:\n")

    for line in render_entries(entries, mode, options):
        options.out.write(line + "\n")

    if recursive:
        for entry in entries:
            if not entry.metadata.is_dir:
                continue
            list_directory(entry.path, mode, recursive, options, _nested=True)
    return True


__all__ = [
    "MODE_DEFAULT",
    "MODE_LONG",
    "MODE_HORIZONTAL",
    "DISPLAY_MODES",
    "ListingOptions",
    "report",
    "render_entries",
    "list_directory",
]

"""Column layout for the default (down-then-across) and ``-x`` (across) modes.

Both layouts measure names by terminal display width and return printable
rows without trailing newlines; the caller terminates each row.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..ansi import pad_display, text_display_width

COLUMN_SPACING = 2


def _identity(name: str) -> str:
    return name


def max_name_width(names: Sequence[str]) -> int:
    return max((text_display_width(name) for name in names), default=0)


def column_width_for(max_width: int) -> int:
    return max(1, max_width + COLUMN_SPACING)


def vertical_grid_shape(count: int, max_width: int, terminal_width: int) -> tuple[int, int]:
    """Return ``(rows, columns)`` for ``count`` names in column-major order."""
    if count <= 0:
        return 0, 0
    columns = max(1, terminal_width // column_width_for(max_width))
    rows = (count + columns - 1) // columns
    return rows, columns


def vertical_grid_indices(count: int, max_width: int, terminal_width: int) -> list[list[int | None]]:
    """Return the source index shown in each ``(row, col)`` cell.

    Cell ``(r, c)`` holds index ``c * rows + r``; positions past ``count``
    are ``None``.
    """
    rows, columns = vertical_grid_shape(count, max_width, terminal_width)
    grid: list[list[int | None]] = []
    for r in range(rows):
        row: list[int | None] = []
        for c in range(columns):
            idx = c * rows + r
            row.append(idx if idx < count else None)
        grid.append(row)
    return grid


def layout_vertical(
    names: Sequence[str],
    max_width: int,
    terminal_width: int,
    decorate: Callable[[str], str] | None = None,
) -> list[str]:
    """Lay out ``names`` down-then-across, one string per output row."""
    decorate = decorate or _identity
    col_width = column_width_for(max_width)
    rows: list[str] = []
    for grid_row in vertical_grid_indices(len(names), max_width, terminal_width):
        cells: list[str] = []
        for idx in grid_row:
            if idx is None:
                continue
            name = names[idx]
            cells.append(pad_display(decorate(name), text_display_width(name), col_width))
        rows.append("".join(cells))
    return rows


def layout_horizontal(
    names: Sequence[str],
    terminal_width: int,
    decorate: Callable[[str], str] | None = None,
) -> list[str]:
    """Lay out ``names`` across, wrapping before a name that would overflow.

    A name whose padded width alone exceeds ``terminal_width`` ends up on a
    line of its own.
    """
    decorate = decorate or _identity
    lines: list[str] = []
    current: list[str] = []
    current_width = 0
    for name in names:
        width = text_display_width(name)
        padded = width + COLUMN_SPACING
        if current and current_width + padded > terminal_width:
            lines.append("".join(current))
            current = []
            current_width = 0
        current.append(decorate(name) + " " * COLUMN_SPACING)
        current_width += padded
    if current:
        lines.append("".join(current))
    return lines


__all__ = [
    "COLUMN_SPACING",
    "max_name_width",
    "column_width_for",
    "vertical_grid_shape",
    "vertical_grid_indices",
    "layout_vertical",
    "layout_horizontal",
]

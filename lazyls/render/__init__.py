"""Rendering for the three display modes.

Column layouts (down-then-across and across) live in ``columns``; the ``-l``
record format lives in ``long``. Both are pure and return lines.
"""

from __future__ import annotations

from .columns import (
    COLUMN_SPACING,
    column_width_for,
    layout_horizontal,
    layout_vertical,
    max_name_width,
    vertical_grid_indices,
    vertical_grid_shape,
)
from .long import format_long_listing, format_timestamp, group_name, owner_name

__all__ = [
    "COLUMN_SPACING",
    "column_width_for",
    "layout_horizontal",
    "layout_vertical",
    "max_name_width",
    "vertical_grid_indices",
    "vertical_grid_shape",
    "format_long_listing",
    "format_timestamp",
    "group_name",
    "owner_name",
]

"""Terminal geometry for column layout.

Width comes from the terminal attached to the output stream. Piped output and
failed queries fall back to a fixed width. Nothing is cached: every listing
call re-queries so nested directories see the current size.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from typing import TextIO

DEFAULT_COLUMNS = 80


def stream_is_tty(stream: TextIO) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def resolve_terminal_columns(
    stream: TextIO | None = None,
    fallback: int = DEFAULT_COLUMNS,
    get_terminal_size: Callable[[int], os.terminal_size] = os.get_terminal_size,
) -> int:
    """Return the column count of ``stream``'s terminal or ``fallback``."""
    if fallback <= 0:
        fallback = DEFAULT_COLUMNS
    out = stream if stream is not None else sys.stdout
    if not stream_is_tty(out):
        return fallback
    try:
        columns = get_terminal_size(out.fileno()).columns
    except (AttributeError, ValueError, OSError):
        return fallback
    if columns <= 0:
        return fallback
    return columns


__all__ = [
    "DEFAULT_COLUMNS",
    "stream_is_tty",
    "resolve_terminal_columns",
]

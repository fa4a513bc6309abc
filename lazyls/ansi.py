"""Terminal display-width utilities.

Column layout pads by display width, so East Asian wide characters count
twice and combining marks count zero. Names are measured as raw text; the
escape sequences a theme wraps around them are added after measuring.
"""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def text_display_width(text: str) -> int:
    """Return the number of terminal columns the raw ``text`` occupies.

    Every character is counted, including ``ESC`` and the rest of any escape
    sequence that is part of a file name.
    """
    return sum(char_display_width(ch) for ch in text)


def pad_display(text: str, visible_width: int, width: int) -> str:
    """Right-pad styled ``text`` whose visible width is ``visible_width``."""
    return text + " " * max(0, width - visible_width)

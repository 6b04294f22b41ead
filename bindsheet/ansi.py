"""ANSI-aware text measurement helpers.

Width math is shared by the table layout and the grid painter so column
widths computed for a row always match the cells the row paints into.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks and control characters consume no columns, and East Asian
    wide/fullwidth characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if ch and (ord(ch) < 32 or ord(ch) == 127):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the display width of plain ``text`` (no escape sequences)."""
    return sum(char_display_width(ch) for ch in text)


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def visible_width(text: str) -> int:
    """Return display columns of a styled line, ignoring escape sequences."""
    return display_width(strip_ansi(text))


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "display_width",
    "strip_ansi",
    "visible_width",
]

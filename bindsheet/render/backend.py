"""Serialize a styled grid into text with ANSI SGR escape sequences.

Rows are written left to right, top to bottom. Each row starts from the
default style, emits codes only when a cell's style differs from the one
last emitted, and ends with a reset plus newline.
"""

from __future__ import annotations

from collections.abc import Callable

from ..style import BASE_COLORS, BRIGHT_COLORS, DEFAULT_STYLE, Style
from .grid import Frame, Grid, StyledChar

ESC = "\x1b"
SGR_RESET = f"{ESC}[0m"
BRIGHT_OFFSET = 60


def color_to_ansi(color: str | None, is_bg: bool = False) -> str:
    """Return the SGR parameter for a named color, or ``""`` when unmapped."""
    base = 40 if is_bg else 30
    if color in BASE_COLORS:
        return str(base + BASE_COLORS.index(color))
    if color in BRIGHT_COLORS:
        return str(base + BRIGHT_OFFSET + BRIGHT_COLORS.index(color))
    return ""


def style_to_ansi(style: Style) -> str:
    """Return escape codes for ``style``: bold, underline, dim, fg, then bg."""
    out: list[str] = []
    if style.bold:
        out.append(f"{ESC}[1m")
    if style.underline:
        out.append(f"{ESC}[4m")
    if style.dim:
        out.append(f"{ESC}[2m")
    fg_code = color_to_ansi(style.fg, is_bg=False)
    if fg_code:
        out.append(f"{ESC}[{fg_code}m")
    bg_code = color_to_ansi(style.bg, is_bg=True)
    if bg_code:
        out.append(f"{ESC}[{bg_code}m")
    return "".join(out)


def serialize_row(cells: list[StyledChar], out: list[str], current_style: Style = DEFAULT_STYLE) -> Style:
    """Append one row to ``out``; returns the style in effect before the reset."""
    for cell in cells:
        if cell.style != current_style:
            out.append(style_to_ansi(cell.style))
            current_style = cell.style
        if cell.skip:
            continue
        out.append(cell.symbol or " ")
    out.append(SGR_RESET)
    out.append("\n")
    return current_style


def serialize_grid(grid: Grid) -> str:
    out: list[str] = []
    for row in grid.rows:
        serialize_row(row, out, DEFAULT_STYLE)
    return "".join(out)


def draw_to_string(width: int, height: int, draw_fn: Callable[[Frame], None]) -> str:
    """Paint through ``draw_fn`` onto a fresh ``width x height`` grid and serialize it.

    A zero-sized target renders nothing. Exceptions raised while drawing
    propagate; no partial output is produced.
    """
    if width <= 0 or height <= 0:
        return ""
    grid = Grid(width, height)
    draw_fn(Frame(grid))
    return serialize_grid(grid)


__all__ = [
    "ESC",
    "SGR_RESET",
    "color_to_ansi",
    "style_to_ansi",
    "serialize_row",
    "serialize_grid",
    "draw_to_string",
]

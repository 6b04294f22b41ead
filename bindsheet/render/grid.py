"""Rectangles and the styled character grid widgets paint into."""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import char_display_width
from ..style import DEFAULT_STYLE, Style


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersection(self, other: Rect) -> Rect:
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))


@dataclass(frozen=True)
class StyledChar:
    """One grid cell.

    ``skip`` marks the trailing cell covered by a wide character; it emits no
    text so the row keeps its column count.
    """

    symbol: str = " "
    style: Style = DEFAULT_STYLE
    skip: bool = False


BLANK = StyledChar()


def _is_control(ch: str) -> bool:
    return ord(ch) < 32 or ord(ch) == 127


class Grid:
    """A ``width x height`` array of styled characters, blank by default."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.rows: list[list[StyledChar]] = [[BLANK] * self.width for _ in range(self.height)]

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_char(self, x: int, y: int, symbol: str, style: Style) -> None:
        """Write one cell, patching ``style`` over the cell's current style."""
        if not self.in_bounds(x, y):
            return
        row = self.rows[y]
        current = row[x]
        row[x] = StyledChar(symbol, current.style.patch(style))
        # Overwriting either half of a wide character blanks the other half.
        if current.skip and x > 0:
            row[x - 1] = StyledChar(" ", row[x - 1].style)
        if x + 1 < self.width and row[x + 1].skip:
            row[x + 1] = StyledChar(" ", row[x + 1].style)

    def set_style(self, area: Rect, style: Style) -> None:
        clipped = area.intersection(self.area)
        for y in range(clipped.y, clipped.bottom):
            row = self.rows[y]
            for x in range(clipped.x, clipped.right):
                cell = row[x]
                row[x] = StyledChar(cell.symbol, cell.style.patch(style), cell.skip)

    def put_string(self, x: int, y: int, text: str, style: Style, max_width: int) -> int:
        """Paint ``text`` from ``(x, y)`` using at most ``max_width`` columns.

        Returns the number of columns used. A wide character that does not fit
        entirely is dropped along with the rest of the text. Combining marks
        join the symbol of the cell painted just before them.
        """
        if not 0 <= y < self.height:
            return 0
        limit = min(x + max(0, max_width), self.width)
        col = x
        last: int | None = None
        for ch in text:
            w = char_display_width(ch)
            if w == 0:
                if last is not None and not _is_control(ch):
                    cell = self.rows[y][last]
                    self.rows[y][last] = StyledChar(cell.symbol + ch, cell.style, cell.skip)
                continue
            if col + w > limit:
                break
            self.set_char(col, y, ch, style)
            for extra in range(1, w):
                covered = self.rows[y][col + extra]
                self.rows[y][col + extra] = StyledChar("", covered.style.patch(style), skip=True)
            last = col
            col += w
        return col - x


@dataclass
class Frame:
    """Drawing surface handed to render callbacks."""

    grid: Grid

    def area(self) -> Rect:
        return self.grid.area

    def render_widget(self, widget, area: Rect) -> None:
        widget.render(area.intersection(self.grid.area), self.grid)


def split_horizontal(area: Rect, left_percent: float = 50.0) -> tuple[Rect, Rect]:
    """Split ``area`` into left/right columns, the left taking ``left_percent``."""
    percent = max(0.0, min(100.0, float(left_percent)))
    left_width = int(area.width * percent / 100.0 + 0.5)
    left_width = max(0, min(area.width, left_width))
    left = Rect(area.x, area.y, left_width, area.height)
    right = Rect(area.x + left_width, area.y, area.width - left_width, area.height)
    return left, right


__all__ = [
    "Rect",
    "StyledChar",
    "BLANK",
    "Grid",
    "Frame",
    "split_horizontal",
]

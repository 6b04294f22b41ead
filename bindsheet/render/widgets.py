"""Styled text and the bordered table widget the cheat-sheet panes use.

Widgets are plain values; ``render(area, grid)`` paints them and clips at the
area edge, so callers never have to pre-trim content.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..ansi import display_width
from ..style import DEFAULT_STYLE, Style
from .grid import Grid, Rect

BORDER_VERTICAL = "│"


@dataclass(frozen=True)
class Span:
    content: str
    style: Style = DEFAULT_STYLE

    def width(self) -> int:
        return display_width(self.content)


@dataclass(frozen=True)
class Line:
    spans: tuple[Span, ...] = ()

    @classmethod
    def raw(cls, text: str) -> Line:
        return cls((Span(text),)) if text else cls()

    @classmethod
    def styled(cls, text: str, style: Style) -> Line:
        return cls((Span(text, style),))

    @classmethod
    def from_spans(cls, spans: Iterable[Span]) -> Line:
        return cls(tuple(spans))

    def width(self) -> int:
        return sum(span.width() for span in self.spans)

    def plain(self) -> str:
        return "".join(span.content for span in self.spans)

    def render(self, area: Rect, grid: Grid) -> None:
        if area.is_empty():
            return
        x = area.x
        for span in self.spans:
            remaining = area.right - x
            if remaining <= 0:
                break
            x += grid.put_string(x, area.y, span.content, span.style, remaining)


@dataclass(frozen=True)
class Row:
    cells: tuple[Line, ...]


@dataclass(frozen=True)
class Block:
    """Pane frame: a title on the first line and a right-hand border."""

    title: str = ""
    title_style: Style = DEFAULT_STYLE
    border_style: Style = DEFAULT_STYLE
    right_border: bool = True

    def inner(self, area: Rect) -> Rect:
        x, y, width, height = area.x, area.y, area.width, area.height
        if self.right_border:
            width -= 1
        if self.title:
            y += 1
            height -= 1
        return Rect(x, y, max(0, width), max(0, height))

    def render(self, area: Rect, grid: Grid) -> None:
        if area.is_empty():
            return
        if self.right_border:
            border_x = area.right - 1
            for y in range(area.y, area.bottom):
                grid.set_char(border_x, y, BORDER_VERTICAL, self.border_style)
        if self.title:
            title_width = area.width - (1 if self.right_border else 0)
            grid.put_string(area.x, area.y, self.title, self.title_style, title_width)


@dataclass(frozen=True)
class Table:
    """Rows of single-line cells laid out in fixed-width columns.

    ``widths`` are column lengths in display columns; columns are separated
    by ``column_spacing`` blanks and anything past the area edge is clipped.
    ``selected`` rows are patched with ``highlight_style``.
    """

    rows: tuple[Row, ...]
    widths: tuple[int, ...]
    block: Block | None = None
    column_spacing: int = 1
    highlight_style: Style = DEFAULT_STYLE
    selected: int | None = None

    def column_offsets(self) -> list[int]:
        offsets: list[int] = []
        x = 0
        for i, width in enumerate(self.widths):
            if i:
                x += self.column_spacing
            offsets.append(x)
            x += width
        return offsets

    def render(self, area: Rect, grid: Grid) -> None:
        if area.is_empty():
            return
        inner = area
        if self.block is not None:
            self.block.render(area, grid)
            inner = self.block.inner(area)
        if inner.is_empty():
            return

        offsets = self.column_offsets()
        for row_idx, row in enumerate(self.rows):
            y = inner.y + row_idx
            if y >= inner.bottom:
                break
            if self.selected == row_idx:
                grid.set_style(Rect(inner.x, y, inner.width, 1), self.highlight_style)
            for col_idx, cell in enumerate(row.cells):
                if col_idx >= len(self.widths):
                    break
                x = inner.x + offsets[col_idx]
                if x >= inner.right:
                    break
                width = min(self.widths[col_idx], inner.right - x)
                cell.render(Rect(x, y, width, 1), grid)


def table(
    rows: Sequence[Row],
    widths: Sequence[int],
    *,
    block: Block | None = None,
    column_spacing: int = 1,
    highlight_style: Style = DEFAULT_STYLE,
    selected: int | None = None,
) -> Table:
    return Table(
        rows=tuple(rows),
        widths=tuple(widths),
        block=block,
        column_spacing=column_spacing,
        highlight_style=highlight_style,
        selected=selected,
    )


__all__ = [
    "BORDER_VERTICAL",
    "Span",
    "Line",
    "Row",
    "Block",
    "Table",
    "table",
]

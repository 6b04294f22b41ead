"""Turn sorted binding lists into column-aligned pane tables."""

from __future__ import annotations

from collections.abc import Sequence

from .actions import Binding
from .diffing import action_cells, key_cells, sliding_window
from .render.widgets import Block, Row, Table, table
from .ui_theme import DEFAULT_THEME, UITheme

SHARED_TITLE = "Shared"


def calculate_column_widths(rows_widths: Sequence[Sequence[int]]) -> list[int]:
    """Return the per-column maximum width; short rows count as width 0."""
    widths: list[int] = []
    for row in rows_widths:
        for i, width in enumerate(row):
            if i >= len(widths):
                widths.append(width)
            elif width > widths[i]:
                widths[i] = width
    return widths


def binding_row(
    binding: Binding,
    prev: Binding | None,
    nxt: Binding | None,
    theme: UITheme = DEFAULT_THEME,
) -> tuple[Row, list[int]]:
    """Build one row: modifier, separator, base key, connector, action text."""
    cells = key_cells(binding.key, prev.key if prev is not None else None, theme)
    cells.extend(
        action_cells(
            binding.actions,
            prev.actions if prev is not None else None,
            nxt.actions if nxt is not None else None,
            theme,
        )
    )
    return Row(tuple(line for line, _width in cells)), [width for _line, width in cells]


def keybinds_to_table(
    bindings: Sequence[Binding],
    title: str,
    theme: UITheme = DEFAULT_THEME,
    selected: int | None = None,
) -> Table:
    rows: list[Row] = []
    row_widths: list[list[int]] = []
    for prev, binding, nxt in sliding_window(bindings):
        row, widths = binding_row(binding, prev, nxt, theme)
        rows.append(row)
        row_widths.append(widths)

    block = Block(
        title=title,
        title_style=theme.title,
        border_style=theme.border,
        right_border=True,
    )
    return table(
        rows,
        calculate_column_widths(row_widths),
        block=block,
        column_spacing=1,
        highlight_style=theme.highlight,
        selected=selected,
    )


__all__ = [
    "SHARED_TITLE",
    "calculate_column_widths",
    "binding_row",
    "keybinds_to_table",
]

"""Per-row styling that dims whatever repeats from the row above.

Every builder returns ``(Line, width)`` pairs, one per table column, so the
layout can size columns without re-measuring styled text.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

from .actions import Action
from .keys import Key, key_to_parts
from .render.widgets import Line, Span
from .tokens import Token, action_tokens
from .ui_theme import DEFAULT_THEME, UITheme

T = TypeVar("T")

GLYPH_START = "┳"
GLYPH_MIDDLE = "┫"
GLYPH_END = "┛"
GLYPH_SINGLE = "━"

CellWidth = tuple[Line, int]


def sliding_window(data: Sequence[T]) -> Iterator[tuple[T | None, T, T | None]]:
    """Yield ``(previous, item, next)`` for each item, ``None`` at the edges."""
    last = len(data) - 1
    for i, item in enumerate(data):
        prev = data[i - 1] if i > 0 else None
        nxt = data[i + 1] if i < last else None
        yield prev, item, nxt


def key_cells(key: Key, prev: Key | None, theme: UITheme = DEFAULT_THEME) -> list[CellWidth]:
    """Style ``[modifier, separator, base]`` for one key.

    The separator is always dimmed; the modifier is dimmed only when it is
    non-empty and repeats the previous key's modifier.
    """
    parts = key_to_parts(key)
    prev_parts = key_to_parts(prev) if prev is not None else None
    cells: list[CellWidth] = []
    for i, part in enumerate(parts):
        repeated_modifier = i == 0 and bool(part) and prev_parts is not None and prev_parts[0] == part
        style = theme.dim if i == 1 or repeated_modifier else theme.text
        line = Line.styled(part, style)
        cells.append((line, line.width()))
    return cells


def connector_glyph(prev_match: bool, next_match: bool) -> str:
    if prev_match and next_match:
        return GLYPH_MIDDLE
    if next_match:
        return GLYPH_START
    if prev_match:
        return GLYPH_END
    return GLYPH_SINGLE


def tokens_to_line(tokens: Sequence[Token], prev_tokens: Sequence[Token], theme: UITheme = DEFAULT_THEME) -> Line:
    """Dim the shared token prefix with the previous row, then show the rest.

    Once the streams diverge, comparison stops for good; later symbols stay
    highlighted even if they happen to match. Syntax tokens are always dim.
    """
    spans: list[Span] = []
    differing = False
    for i, token in enumerate(tokens):
        if not differing:
            if i < len(prev_tokens) and token == prev_tokens[i]:
                spans.append(Span(token.text, theme.dim))
                continue
            differing = True
        style = theme.dim if token.is_syntax else theme.text
        spans.append(Span(token.text, style))
    return Line.from_spans(spans)


def action_cells(
    actions: Sequence[Action],
    prev: Sequence[Action] | None,
    nxt: Sequence[Action] | None,
    theme: UITheme = DEFAULT_THEME,
) -> list[CellWidth]:
    """Return the connector glyph cell and the styled action text cell.

    An action sequence equal to the previous row's renders as empty text so
    the connector visually groups it under the row above.
    """
    prev_match = prev is not None and tuple(prev) == tuple(actions)
    next_match = nxt is not None and tuple(nxt) == tuple(actions)
    glyph = Line.styled(connector_glyph(prev_match, next_match), theme.connector)

    if prev_match:
        text = Line()
    else:
        prev_tokens = action_tokens(prev) if prev is not None else []
        text = tokens_to_line(action_tokens(actions), prev_tokens, theme)
    return [(glyph, 1), (text, text.width())]


__all__ = [
    "GLYPH_START",
    "GLYPH_MIDDLE",
    "GLYPH_END",
    "GLYPH_SINGLE",
    "sliding_window",
    "key_cells",
    "connector_glyph",
    "tokens_to_line",
    "action_cells",
]

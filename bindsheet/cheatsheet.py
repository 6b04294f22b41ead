"""Render the two-pane cheat-sheet into an ANSI string.

The left pane lists bindings exclusive to the active mode, the right pane
lists bindings shared with other modes. Rendering is a pure function of the
keybinding snapshot, the active mode, and the target size.
"""

from __future__ import annotations

from .actions import ModeKeybinds
from .classify import classify_bindings
from .render.backend import draw_to_string
from .render.grid import Frame, split_horizontal
from .tables import SHARED_TITLE, keybinds_to_table
from .ui_theme import DEFAULT_THEME, UITheme

DEFAULT_LEFT_PANE_PERCENT = 50.0


def render_cheatsheet(
    keybinds: ModeKeybinds,
    mode: str,
    width: int,
    height: int,
    *,
    theme: UITheme = DEFAULT_THEME,
    left_percent: float = DEFAULT_LEFT_PANE_PERCENT,
) -> str:
    """Return exactly ``height`` lines of ``width`` columns, or ``""`` if empty."""
    if width <= 0 or height <= 0:
        return ""

    classified = classify_bindings(keybinds, mode)
    mode_table = keybinds_to_table(classified.mode, mode, theme)
    shared_table = keybinds_to_table(classified.shared, SHARED_TITLE, theme)

    def draw(frame: Frame) -> None:
        left, right = split_horizontal(frame.area(), left_percent)
        frame.render_widget(mode_table, left)
        frame.render_widget(shared_table, right)

    return draw_to_string(width, height, draw)


__all__ = ["DEFAULT_LEFT_PANE_PERCENT", "render_cheatsheet"]

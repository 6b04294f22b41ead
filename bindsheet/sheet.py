"""Host-facing cheat-sheet state.

The host delivers mode-change snapshots through ``update`` and asks for a
frame through ``render``. Only the latest snapshot is kept; each render
recomputes classification and layout from it.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from .actions import ModeKeybinds
from .cheatsheet import DEFAULT_LEFT_PANE_PERCENT, render_cheatsheet
from .ui_theme import UITheme, resolve_theme

logger = logging.getLogger(__name__)

DEFAULT_MODE = "Normal"


@dataclass(frozen=True)
class ModeUpdate:
    """Host notification carrying the active mode and the full keybinding table."""

    mode: str
    keybinds: ModeKeybinds


def _truthy(value: str | None) -> bool:
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class CheatSheet:
    configuration: dict[str, str] = field(default_factory=dict)
    mode: str = DEFAULT_MODE
    keybinds: ModeKeybinds = field(default_factory=list)

    def load(self, configuration: Mapping[str, str]) -> None:
        self.configuration = dict(configuration)

    def update(self, event: object) -> bool:
        """Store a ``ModeUpdate`` snapshot; returns whether a re-render is due."""
        if not isinstance(event, ModeUpdate):
            return False
        self.mode = event.mode
        self.keybinds = list(event.keybinds)
        logger.debug("mode update: %s (%d modes)", self.mode, len(self.keybinds))
        return True

    @property
    def theme(self) -> UITheme:
        return resolve_theme(
            self.configuration.get("theme"),
            no_color=_truthy(self.configuration.get("no_color")),
        )

    @property
    def left_percent(self) -> float:
        raw = self.configuration.get("left_pane_percent")
        if raw is None:
            return DEFAULT_LEFT_PANE_PERCENT
        try:
            value = float(raw)
        except (TypeError, ValueError):
            logger.debug("ignoring invalid left_pane_percent %r", raw)
            return DEFAULT_LEFT_PANE_PERCENT
        if not math.isfinite(value) or value <= 0 or value >= 100:
            return DEFAULT_LEFT_PANE_PERCENT
        return value

    def render(self, rows: int, cols: int) -> str:
        """Render into ``(cols - 1) x (rows - 1)``, leaving the host's margin cell."""
        if rows <= 0 or cols <= 0:
            return ""
        return render_cheatsheet(
            self.keybinds,
            self.mode,
            cols - 1,
            rows - 1,
            theme=self.theme,
            left_percent=self.left_percent,
        )


__all__ = ["DEFAULT_MODE", "ModeUpdate", "CheatSheet"]

"""Color names and cell styles shared by widgets and the ANSI backend.

Colors are plain strings so themes and config can name them directly.
Only the sixteen named colors have an SGR mapping; anything else (``reset``,
``idx:N`` palette indices) is carried through but emits no code.
"""

from __future__ import annotations

from dataclasses import dataclass

BLACK = "black"
RED = "red"
GREEN = "green"
YELLOW = "yellow"
BLUE = "blue"
MAGENTA = "magenta"
CYAN = "cyan"
GRAY = "gray"
DARK_GRAY = "dark_gray"
LIGHT_RED = "light_red"
LIGHT_GREEN = "light_green"
LIGHT_YELLOW = "light_yellow"
LIGHT_BLUE = "light_blue"
LIGHT_MAGENTA = "light_magenta"
LIGHT_CYAN = "light_cyan"
WHITE = "white"
RESET = "reset"

BASE_COLORS: tuple[str, ...] = (BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, GRAY)
BRIGHT_COLORS: tuple[str, ...] = (
    DARK_GRAY,
    LIGHT_RED,
    LIGHT_GREEN,
    LIGHT_YELLOW,
    LIGHT_BLUE,
    LIGHT_MAGENTA,
    LIGHT_CYAN,
    WHITE,
)


@dataclass(frozen=True)
class Style:
    """Foreground/background colors plus bold, underline and dim flags."""

    fg: str | None = None
    bg: str | None = None
    bold: bool = False
    underline: bool = False
    dim: bool = False

    def patch(self, other: Style) -> Style:
        """Overlay ``other`` on this style; unset colors keep the current ones."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            bold=self.bold or other.bold,
            underline=self.underline or other.underline,
            dim=self.dim or other.dim,
        )


DEFAULT_STYLE = Style()


__all__ = [
    "BLACK",
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "MAGENTA",
    "CYAN",
    "GRAY",
    "DARK_GRAY",
    "LIGHT_RED",
    "LIGHT_GREEN",
    "LIGHT_YELLOW",
    "LIGHT_BLUE",
    "LIGHT_MAGENTA",
    "LIGHT_CYAN",
    "WHITE",
    "RESET",
    "BASE_COLORS",
    "BRIGHT_COLORS",
    "Style",
    "DEFAULT_STYLE",
]

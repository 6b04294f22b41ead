"""UI theme definitions and selection helpers.

Themes name the styles the cheat-sheet paints with: pane titles, the pane
border, novel text, repeated (dimmed) text, and the selection highlight.
"""

from __future__ import annotations

from dataclasses import dataclass

from .style import (
    BLUE,
    CYAN,
    DARK_GRAY,
    DEFAULT_STYLE,
    LIGHT_BLUE,
    LIGHT_CYAN,
    WHITE,
    YELLOW,
    Style,
)


@dataclass(frozen=True)
class UITheme:
    """Semantic style palette used by the table builder and diff engine."""

    name: str
    title: Style
    border: Style
    text: Style
    dim: Style
    connector: Style
    highlight: Style


DEFAULT_THEME = UITheme(
    name="default",
    title=Style(fg=YELLOW),
    border=Style(fg=DARK_GRAY),
    text=Style(fg=WHITE),
    dim=Style(fg=DARK_GRAY),
    connector=DEFAULT_STYLE,
    highlight=Style(bg=BLUE),
)

OCEAN_THEME = UITheme(
    name="ocean",
    title=Style(fg=LIGHT_CYAN),
    border=Style(fg=BLUE),
    text=Style(fg=LIGHT_CYAN),
    dim=Style(fg=BLUE),
    connector=Style(fg=CYAN),
    highlight=Style(bg=LIGHT_BLUE),
)

PLAIN_THEME = UITheme(
    name="plain",
    title=DEFAULT_STYLE,
    border=DEFAULT_STYLE,
    text=DEFAULT_STYLE,
    dim=DEFAULT_STYLE,
    connector=DEFAULT_STYLE,
    highlight=DEFAULT_STYLE,
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]

"""Command-line front door for bindsheet.

Loads a keybinding snapshot, resolves the active mode and pane size, and
writes the rendered cheat-sheet to stdout.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from . import config
from .actions import mode_names
from .keybinds_file import KeybindFileError, load_keybinds
from .sheet import CheatSheet, ModeUpdate
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _pane_percent(value: str) -> float:
    """argparse type for a left pane percentage in (0, 100)."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if not 0 < parsed < 100:
        raise argparse.ArgumentTypeError("value must be between 0 and 100")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bindsheet",
        description="Render a two-pane keybinding cheat-sheet for one input mode.",
    )
    parser.add_argument("path", help="JSON keybinding snapshot.")
    parser.add_argument("--mode", default=None, help="Active mode (default: the snapshot's mode, else the first mode).")
    parser.add_argument("--rows", type=_positive_int, default=None, help="Pane rows (default: terminal height).")
    parser.add_argument("--cols", type=_positive_int, default=None, help="Pane columns (default: terminal width).")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--left-percent",
        type=_pane_percent,
        default=None,
        help="Left pane width as a percentage of the columns (default: 50).",
    )
    parser.add_argument("--save", action="store_true", help="Persist --theme and --left-percent as defaults.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--list-modes", action="store_true", help="Print the snapshot's modes and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr.")
    return parser


def _configuration(args: argparse.Namespace) -> dict[str, str]:
    """Merge persisted config with command-line overrides into host-style settings."""
    data = config.load_config()
    settings: dict[str, str] = {}
    theme = args.theme or config.load_theme_name(data)
    if theme:
        settings["theme"] = theme
    left_percent = args.left_percent
    if left_percent is None:
        left_percent = config.load_left_pane_percent(data)
    if left_percent is not None:
        settings["left_pane_percent"] = str(left_percent)
    if args.no_color:
        settings["no_color"] = "true"
    return settings


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the cheat-sheet for the chosen mode."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.save:
        if args.theme:
            config.save_theme_name(args.theme)
        if args.left_percent is not None:
            config.save_left_pane_percent(args.left_percent)

    path = Path(args.path)
    try:
        snapshot = load_keybinds(path)
    except KeybindFileError as exc:
        raise SystemExit(str(exc)) from exc

    modes = mode_names(snapshot.keybinds)
    if args.list_modes:
        sys.stdout.write("".join(f"{mode}\n" for mode in modes))
        return

    mode = args.mode or snapshot.mode or (modes[0] if modes else None)
    if mode is None:
        raise SystemExit(f"No modes found in {path}")
    if mode not in modes:
        raise SystemExit(f"Unknown mode {mode!r}; available: {', '.join(modes)}")

    term = shutil.get_terminal_size((80, 24))
    rows = args.rows if args.rows is not None else term.lines
    cols = args.cols if args.cols is not None else term.columns

    sheet = CheatSheet()
    sheet.load(_configuration(args))
    sheet.update(ModeUpdate(mode=mode, keybinds=snapshot.keybinds))
    logger.debug("rendering %s at %dx%d", mode, cols, rows)
    sys.stdout.write(sheet.render(rows, cols))


if __name__ == "__main__":
    main()

"""Load a keybinding snapshot from a JSON document.

Accepted shapes::

    {"mode": "Normal",
     "keybinds": {"Normal": [{"key": "Ctrl p", "actions": ["SwitchToMode(Pane)"]}]}}

    {"keybinds": [{"mode": "Normal", "bindings": [...]}]}

Mode order follows the document. ``mode`` (the active mode) is optional.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from .actions import Binding, ModeKeybinds, action_sequence
from .keys import KeyParseError, parse_key


class KeybindFileError(ValueError):
    """Raised for unreadable or malformed keybinding documents."""


@dataclass(frozen=True)
class KeybindSnapshot:
    mode: str | None
    keybinds: ModeKeybinds


def _parse_binding(raw: object, where: str) -> Binding:
    if not isinstance(raw, dict):
        raise KeybindFileError(f"{where}: binding must be an object")
    key_text = raw.get("key")
    if not isinstance(key_text, str):
        raise KeybindFileError(f"{where}: missing string 'key'")
    actions = raw.get("actions")
    if isinstance(actions, str):
        actions = [actions]
    if not isinstance(actions, list) or not all(isinstance(a, str) for a in actions):
        raise KeybindFileError(f"{where}: 'actions' must be a list of strings")
    try:
        key = parse_key(key_text)
    except KeyParseError as exc:
        raise KeybindFileError(f"{where}: {exc}") from exc
    return Binding(key, action_sequence(actions))


def _parse_bindings(mode: str, raw: object) -> list[Binding]:
    if not isinstance(raw, list):
        raise KeybindFileError(f"mode {mode!r}: bindings must be a list")
    return [_parse_binding(item, f"mode {mode!r} binding {i}") for i, item in enumerate(raw)]


def parse_keybinds_document(data: object) -> KeybindSnapshot:
    """Validate a decoded JSON document and build the keybinding snapshot."""
    if not isinstance(data, dict):
        raise KeybindFileError("document must be a JSON object")

    mode = data.get("mode")
    if mode is not None and not isinstance(mode, str):
        raise KeybindFileError("'mode' must be a string")

    raw_keybinds = data.get("keybinds")
    keybinds: ModeKeybinds = []
    if isinstance(raw_keybinds, dict):
        for mode_name, raw_bindings in raw_keybinds.items():
            keybinds.append((str(mode_name), _parse_bindings(str(mode_name), raw_bindings)))
    elif isinstance(raw_keybinds, list):
        for i, entry in enumerate(raw_keybinds):
            if not isinstance(entry, dict) or not isinstance(entry.get("mode"), str):
                raise KeybindFileError(f"keybinds entry {i}: expected an object with a string 'mode'")
            mode_name = entry["mode"]
            keybinds.append((mode_name, _parse_bindings(mode_name, entry.get("bindings", []))))
    else:
        raise KeybindFileError("'keybinds' must be an object or a list")

    return KeybindSnapshot(mode=mode, keybinds=keybinds)


def load_keybinds(path: Path) -> KeybindSnapshot:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise KeybindFileError(f"cannot read {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise KeybindFileError(f"{path}: invalid JSON ({exc})") from exc
    return parse_keybinds_document(data)


__all__ = [
    "KeybindFileError",
    "KeybindSnapshot",
    "parse_keybinds_document",
    "load_keybinds",
]

"""Key values, their canonical text, and display parts.

Keys order by canonical text (``Char('a')``, ``Ctrl('p')``, ``Left``,
``F(1)``), which is also what the sorter uses as its secondary key.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

CHAR = "Char"
CTRL = "Ctrl"
ALT = "Alt"
FUNCTION = "F"

NAMED_KEYS: tuple[str, ...] = (
    "Left",
    "Right",
    "Up",
    "Down",
    "Home",
    "End",
    "PageUp",
    "PageDown",
    "Backspace",
    "Delete",
    "Insert",
    "Tab",
    "BackTab",
    "Esc",
    "Null",
)
_NAMED_BY_FOLDED = {name.casefold(): name for name in NAMED_KEYS}
_NAMED_ALIASES = {
    "escape": "Esc",
    "del": "Delete",
    "pgup": "PageUp",
    "pgdn": "PageDown",
    "shift+tab": "BackTab",
}
_CHAR_ALIASES = {"enter": "\n", "return": "\n", "space": " "}
_CHAR_ESCAPES = {"\n": "\\n", "\t": "\\t", "\r": "\\r", "'": "\\'", "\\": "\\\\"}
_CHAR_UNESCAPES = {v: k for k, v in _CHAR_ESCAPES.items()}

_CANONICAL_CHAR_RE = re.compile(r"^(Char|Ctrl|Alt)\('(.+)'\)$")
_CANONICAL_F_RE = re.compile(r"^F\((\d+)\)$")
_FUNCTION_RE = re.compile(r"^[Ff](\d{1,2})$")
_MODIFIER_RE = re.compile(r"^(ctrl|alt)\s*[-+\s]\s*(.+)$", re.IGNORECASE)


class KeyParseError(ValueError):
    """Raised when a key spelling cannot be mapped to a ``Key``."""


@dataclass(frozen=True)
class Key:
    """One input key: a plain/modified character or a named key.

    ``char`` holds the character for ``Char``/``Ctrl``/``Alt`` keys and the
    number for function keys; it is empty for the other named keys.
    """

    name: str
    char: str = ""

    def canonical_text(self) -> str:
        if self.name in {CHAR, CTRL, ALT}:
            return f"{self.name}('{_CHAR_ESCAPES.get(self.char, self.char)}')"
        if self.name == FUNCTION:
            return f"F({self.char})"
        return self.name

    def __str__(self) -> str:
        return self.canonical_text()

    def __lt__(self, other: Key) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self.canonical_text() < other.canonical_text()


def char_key(ch: str) -> Key:
    return Key(CHAR, ch)


def ctrl_key(ch: str) -> Key:
    return Key(CTRL, ch)


def alt_key(ch: str) -> Key:
    return Key(ALT, ch)


def function_key(number: int) -> Key:
    return Key(FUNCTION, str(number))


def named_key(name: str) -> Key:
    if name not in NAMED_KEYS:
        raise KeyParseError(f"unknown key name: {name!r}")
    return Key(name)


def _parse_char(text: str) -> str:
    alias = _CHAR_ALIASES.get(text.casefold())
    if alias is not None:
        return alias
    if text in _CHAR_UNESCAPES:
        return _CHAR_UNESCAPES[text]
    if len(text) == 1:
        return text
    raise KeyParseError(f"expected a single character, got {text!r}")


def parse_key(text: str) -> Key:
    """Parse a human spelling into a ``Key``.

    Accepts canonical forms (``Ctrl('p')``, ``F(1)``), modifier spellings
    (``Ctrl p``, ``Ctrl+p``, ``alt-h``), ``Enter``/``Space``, function keys
    (``F1``), named keys, and single characters.
    """
    if not isinstance(text, str) or text == "":
        raise KeyParseError(f"empty key spelling: {text!r}")
    if len(text) == 1:
        return char_key(text)

    stripped = text.strip()
    if not stripped:
        raise KeyParseError(f"empty key spelling: {text!r}")

    match = _CANONICAL_CHAR_RE.match(stripped)
    if match:
        return Key(match.group(1), _parse_char(match.group(2)))
    match = _CANONICAL_F_RE.match(stripped) or _FUNCTION_RE.match(stripped)
    if match:
        return function_key(int(match.group(1)))

    folded = stripped.casefold()
    if folded in _CHAR_ALIASES:
        return char_key(_CHAR_ALIASES[folded])
    if folded in _NAMED_ALIASES:
        return Key(_NAMED_ALIASES[folded])
    if folded in _NAMED_BY_FOLDED:
        return Key(_NAMED_BY_FOLDED[folded])

    match = _MODIFIER_RE.match(stripped)
    if match:
        modifier = CTRL if match.group(1).casefold() == "ctrl" else ALT
        return Key(modifier, _parse_char(match.group(2)))

    raise KeyParseError(f"unknown key spelling: {text!r}")


def key_to_parts(key: Key) -> tuple[str, str, str]:
    """Split a key into ``(modifier, separator, base)`` display parts."""
    if key.name == CTRL:
        return ("Ctrl", "+", key.char)
    if key.name == ALT:
        return ("Alt", "+", key.char)
    if key.name == CHAR:
        if key.char == "\n":
            return ("", "", "Enter")
        if key.char == " ":
            return ("", "", "Space")
        return ("", "", key.char)
    return ("", "", key.canonical_text())


__all__ = [
    "Key",
    "KeyParseError",
    "NAMED_KEYS",
    "char_key",
    "ctrl_key",
    "alt_key",
    "function_key",
    "named_key",
    "parse_key",
    "key_to_parts",
]

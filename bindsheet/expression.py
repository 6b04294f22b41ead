"""Recursive-descent parser for debug-formatted value dumps.

Grammar::

    value   := name? (list | tuple | braces) | term
    list    := "[" items "]"
    tuple   := "(" items ")"
    braces  := "{" (entries | items) "}"       entries when the first item is `key:`
    items   := (value ("," value)* ","?)?
    entries := key ":" value ("," key ":" value)* ","?
    term    := atom | '"' string '"' | "'" char "'"
    atom    := [\\w.+-]+ ("::" [\\w.+-]+)*

Whitespace (including newlines from pretty dumps) is insignificant between
tokens. Anything the grammar rejects raises ``ParseError``, as does nesting
deeper than ``MAX_DEPTH`` groups.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SET = "set"
MAP = "map"
LIST = "list"
TUPLE = "tuple"
TERM = "term"

_ATOM_RE = re.compile(r"[\w.+\-]+(?:::[\w.+\-]+)*")
_WS_RE = re.compile(r"\s*")
_CLOSERS = {"[": "]", "(": ")", "{": "}"}
MAX_DEPTH = 128


class ParseError(ValueError):
    """Malformed expression text; ``position`` is the offending offset."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.message = message
        self.position = position


@dataclass(frozen=True)
class Value:
    """One node of a parsed dump.

    ``kind`` is one of ``set``/``map``/``list``/``tuple``/``term``. Terms carry
    ``text``; sequences carry ``values``; maps carry ordered ``entries``.
    """

    kind: str
    name: str | None = None
    text: str = ""
    values: tuple[Value, ...] = ()
    entries: tuple[tuple[str, Value], ...] = ()


def term(text: str) -> Value:
    return Value(TERM, text=text)


class _Parser:
    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.depth = 0

    def skip_ws(self) -> None:
        self.pos = _WS_RE.match(self.source, self.pos).end()

    def peek(self) -> str:
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def expect(self, ch: str) -> None:
        self.skip_ws()
        if self.peek() != ch:
            found = self.peek() or "end of input"
            raise ParseError(f"expected {ch!r}, found {found!r}", self.pos)
        self.pos += 1

    def parse(self) -> Value:
        value = self.parse_value()
        self.skip_ws()
        if self.pos != len(self.source):
            raise ParseError(f"unexpected trailing text {self.source[self.pos:]!r}", self.pos)
        return value

    def parse_value(self) -> Value:
        self.skip_ws()
        ch = self.peek()
        if ch == "":
            raise ParseError("unexpected end of input", self.pos)
        if ch in _CLOSERS:
            return self.parse_group(None)
        if ch == '"' or ch == "'":
            return term(self.parse_quoted(ch))

        match = _ATOM_RE.match(self.source, self.pos)
        if match is None:
            raise ParseError(f"unexpected character {ch!r}", self.pos)
        self.pos = match.end()
        atom = match.group(0)

        after_atom = self.pos
        self.skip_ws()
        if self.peek() in _CLOSERS:
            return self.parse_group(atom)
        self.pos = after_atom
        return term(atom)

    def parse_quoted(self, quote: str) -> str:
        start = self.pos
        self.pos += 1
        while self.pos < len(self.source):
            ch = self.source[self.pos]
            if ch == "\\":
                self.pos += 2
                continue
            self.pos += 1
            if ch == quote:
                return self.source[start:self.pos]
        raise ParseError("unterminated literal", start)

    def parse_group(self, name: str | None) -> Value:
        if self.depth >= MAX_DEPTH:
            raise ParseError("nesting too deep", self.pos)
        self.depth += 1
        try:
            return self._parse_group_body(name)
        finally:
            self.depth -= 1

    def _parse_group_body(self, name: str | None) -> Value:
        opener = self.peek()
        self.pos += 1
        closer = _CLOSERS[opener]
        if opener == "{":
            entries = self.try_parse_entries()
            if entries is not None:
                return Value(MAP, name=name, entries=entries)
            kind = SET
        else:
            kind = LIST if opener == "[" else TUPLE
        values = self.parse_items(closer)
        return Value(kind, name=name, values=values)

    def parse_items(self, closer: str) -> tuple[Value, ...]:
        values: list[Value] = []
        while True:
            self.skip_ws()
            if self.peek() == closer:
                self.pos += 1
                return tuple(values)
            values.append(self.parse_value())
            self.skip_ws()
            if self.peek() == ",":
                self.pos += 1
                continue
            self.expect(closer)
            return tuple(values)

    def parse_key(self) -> str | None:
        self.skip_ws()
        ch = self.peek()
        if ch == '"' or ch == "'":
            return self.parse_quoted(ch)
        match = _ATOM_RE.match(self.source, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return match.group(0)

    def at_entry_colon(self) -> bool:
        self.skip_ws()
        return self.peek() == ":" and not self.source.startswith("::", self.pos)

    def try_parse_entries(self) -> tuple[tuple[str, Value], ...] | None:
        """Parse ``key: value`` entries, or rewind and return ``None`` for a set."""
        start = self.pos
        self.skip_ws()
        if self.peek() == "}":
            self.pos += 1
            return ()
        key = self.parse_key()
        if key is None or not self.at_entry_colon():
            self.pos = start
            return None

        entries: list[tuple[str, Value]] = []
        while True:
            self.pos += 1  # ':'
            entries.append((key, self.parse_value()))
            self.skip_ws()
            if self.peek() == ",":
                self.pos += 1
                self.skip_ws()
                if self.peek() == "}":
                    self.pos += 1
                    return tuple(entries)
                key = self.parse_key()
                if key is None:
                    raise ParseError("expected map key", self.pos)
                if not self.at_entry_colon():
                    raise ParseError("expected ':' after map key", self.pos)
                continue
            self.expect("}")
            return tuple(entries)


def parse_expression(source: str) -> Value:
    """Parse one debug-formatted value, raising ``ParseError`` when malformed."""
    return _Parser(source).parse()


__all__ = [
    "SET",
    "MAP",
    "LIST",
    "TUPLE",
    "TERM",
    "MAX_DEPTH",
    "ParseError",
    "Value",
    "term",
    "parse_expression",
]

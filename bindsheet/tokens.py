"""Flatten parsed action dumps into symbol/syntax token streams."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .actions import Action, sequence_dump, sequence_literal
from .expression import LIST, MAP, SET, TERM, TUPLE, ParseError, Value, parse_expression

logger = logging.getLogger(__name__)

SYMBOL = "symbol"
SYNTAX = "syntax"

_BRACKETS = {LIST: ("[", "]"), TUPLE: ("(", ")"), SET: ("{", "}")}


@dataclass(frozen=True)
class Token:
    kind: str
    text: str

    @property
    def is_syntax(self) -> bool:
        return self.kind == SYNTAX


def symbol(text: str) -> Token:
    return Token(SYMBOL, text)


def syntax(text: str) -> Token:
    return Token(SYNTAX, text)


def _unpack(value: Value, out: list[Token]) -> None:
    if value.name is not None:
        out.append(symbol(value.name))

    if value.kind == TERM:
        out.append(symbol(value.text))
    elif value.kind == MAP:
        for i, (key, item) in enumerate(value.entries):
            if i:
                out.append(syntax(", "))
            out.append(symbol(key))
            out.append(syntax(": "))
            _unpack(item, out)
    else:
        opener, closer = _BRACKETS[value.kind]
        out.append(syntax(opener))
        for i, item in enumerate(value.values):
            if i:
                out.append(syntax(", "))
            _unpack(item, out)
        out.append(syntax(closer))


def value_tokens(value: Value) -> list[Token]:
    """Return the flat token stream for one parsed value."""
    out: list[Token] = []
    _unpack(value, out)
    return out


def action_tokens(actions: Sequence[Action]) -> list[Token]:
    """Tokenize an action sequence without its wrapping list brackets.

    A dump the parser rejects degrades to one symbol holding the sequence
    literal so the row still renders.
    """
    dump = sequence_dump(actions)
    try:
        parsed = parse_expression(dump)
    except ParseError as exc:
        logger.debug("falling back to literal action text for %r: %s", dump, exc)
        return [symbol(sequence_literal(actions))]
    return value_tokens(parsed)[1:-1]


def tokens_text(tokens: Sequence[Token]) -> str:
    return "".join(token.text for token in tokens)


def canonical_action_text(actions: Sequence[Action]) -> str:
    """Return the ordering text for an action sequence (its flattened tokens)."""
    return tokens_text(action_tokens(actions))


__all__ = [
    "SYMBOL",
    "SYNTAX",
    "Token",
    "symbol",
    "syntax",
    "value_tokens",
    "action_tokens",
    "tokens_text",
    "canonical_action_text",
]

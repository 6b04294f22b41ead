"""Bound actions, bindings, and the per-mode keybinding table."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .keys import Key


@dataclass(frozen=True)
class Action:
    """One opaque action, held as its debug text (``SwitchToMode(Normal)``)."""

    text: str

    def __str__(self) -> str:
        return self.text


ActionSequence = tuple[Action, ...]


def action_sequence(texts: Iterable[str]) -> ActionSequence:
    return tuple(Action(str(text)) for text in texts)


def sequence_literal(actions: Sequence[Action]) -> str:
    """Return the action texts joined the way they appear inside the dump."""
    return ", ".join(action.text for action in actions)


def sequence_dump(actions: Sequence[Action]) -> str:
    """Return the bracketed list dump the expression parser consumes."""
    return f"[{sequence_literal(actions)}]"


@dataclass(frozen=True)
class Binding:
    key: Key
    actions: ActionSequence

    def same_as(self, other: Binding) -> bool:
        return self.key == other.key and self.actions == other.actions


ModeKeybinds = list[tuple[str, list[Binding]]]


def mode_names(keybinds: ModeKeybinds) -> list[str]:
    seen: list[str] = []
    for mode, _bindings in keybinds:
        if mode not in seen:
            seen.append(mode)
    return seen


__all__ = [
    "Action",
    "ActionSequence",
    "Binding",
    "ModeKeybinds",
    "action_sequence",
    "sequence_literal",
    "sequence_dump",
    "mode_names",
]

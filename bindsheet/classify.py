"""Split the active mode's bindings into mode-specific and shared rows."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .actions import Binding, ModeKeybinds
from .tokens import canonical_action_text

EXCLUSIVE = "exclusive"
SHARED = "shared"

# A binding must repeat in more than this many other modes to count as shared.
SHARED_MIN_OTHER_MODES = 1


@dataclass
class ClassifiedBindings:
    mode: list[Binding] = field(default_factory=list)
    shared: list[Binding] = field(default_factory=list)


def other_mode_count(keybinds: ModeKeybinds, active_mode: str, binding: Binding) -> int:
    """Count non-active mode entries that bind the same key to the same actions."""
    return sum(
        1
        for mode, bindings in keybinds
        if mode != active_mode and any(other.same_as(binding) for other in bindings)
    )


def classify_binding(keybinds: ModeKeybinds, active_mode: str, binding: Binding) -> str:
    if other_mode_count(keybinds, active_mode, binding) > SHARED_MIN_OTHER_MODES:
        return SHARED
    return EXCLUSIVE


def binding_sort_key(binding: Binding) -> tuple[str, str]:
    return canonical_action_text(binding.actions), binding.key.canonical_text()


def sort_bindings(bindings: Sequence[Binding]) -> list[Binding]:
    """Order by action text, then key text; the sort is stable for exact ties."""
    return sorted(bindings, key=binding_sort_key)


def classify_bindings(keybinds: ModeKeybinds, active_mode: str) -> ClassifiedBindings:
    """Partition and sort every binding listed under ``active_mode``."""
    result = ClassifiedBindings()
    for mode, bindings in keybinds:
        if mode != active_mode:
            continue
        for binding in bindings:
            if classify_binding(keybinds, active_mode, binding) == SHARED:
                result.shared.append(binding)
            else:
                result.mode.append(binding)
    result.mode = sort_bindings(result.mode)
    result.shared = sort_bindings(result.shared)
    return result


__all__ = [
    "EXCLUSIVE",
    "SHARED",
    "SHARED_MIN_OTHER_MODES",
    "ClassifiedBindings",
    "other_mode_count",
    "classify_binding",
    "binding_sort_key",
    "sort_bindings",
    "classify_bindings",
]

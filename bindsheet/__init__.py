"""Public package surface for bindsheet.

Exports ``render_cheatsheet`` for programmatic rendering and ``main`` for
CLI invocation. Most implementation lives in submodules under ``bindsheet``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def render_cheatsheet(*args, **kwargs):
    """Lazily import the renderer; see ``bindsheet.cheatsheet.render_cheatsheet``."""
    from .cheatsheet import render_cheatsheet as _render_cheatsheet

    return _render_cheatsheet(*args, **kwargs)


__all__ = ["main", "render_cheatsheet"]

"""
Textual user interface for the chat profile editor.
"""

from __future__ import annotations

__all__ = ["ProfileEditorApp", "run_tui"]


def __getattr__(name: str):
    if name in __all__:
        from chatprofile.ui.tui import app
        return getattr(app, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

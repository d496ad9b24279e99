"""
TUI widget modules for the profile editor.

Contains:
- EditableFieldRow: one scalar field, read-only or editable
- IconFieldRow: icon preview with load/remove actions
- ValueInput / ModelSelect: editor widgets
"""

from __future__ import annotations

__all__ = [
    "EditableFieldRow",
    "IconFieldRow",
    "ValueInput",
    "ModelSelect",
    "EditorCommitted",
    "EditorRejected",
]


# Lazy imports to avoid importing Textual until a widget is needed
def __getattr__(name: str):
    if name in {"EditableFieldRow", "IconFieldRow"}:
        from chatprofile.ui.tui.widgets import editable_field
        return getattr(editable_field, name)
    if name in {"ValueInput", "ModelSelect", "EditorCommitted", "EditorRejected"}:
        from chatprofile.ui.tui.widgets import editors
        return getattr(editors, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

"""Screens for the chat profile editor TUI."""

from __future__ import annotations

__all__ = ["ProfileSettingsScreen"]


def __getattr__(name: str):
    if name == "ProfileSettingsScreen":
        from chatprofile.ui.tui.screens.profile import ProfileSettingsScreen
        return ProfileSettingsScreen
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

"""State models for TUI screens and app-wide UI state."""

from __future__ import annotations

from .app_state import AppState, AppStateSnapshot, Notification
from .profile_view_model import ProfileActionResult, ProfileSnapshot, ProfileTableRow, ProfileViewModel

__all__ = [
    "AppState",
    "AppStateSnapshot",
    "Notification",
    "ProfileActionResult",
    "ProfileSnapshot",
    "ProfileTableRow",
    "ProfileViewModel",
]

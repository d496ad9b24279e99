"""
Main TUI application for the chat profile editor.

Hosts the profile form, records notifications, and navigates between the
loaded profiles.
"""

from __future__ import annotations

from typing import Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from chatprofile.config.models import EditorConfig
from chatprofile.logging import get_logger
from chatprofile.profiles import ProfileEvent, SettingsRecord
from chatprofile.profiles.events import resolve_notification_theme
from chatprofile.ui.tui.screens.profile import ProfileSettingsScreen
from chatprofile.ui.tui.state import AppState

logger = get_logger(__name__)

_TEXTUAL_THEMES = {"light": "textual-light", "dark": "textual-dark"}


class ProfileEditorApp(App):
    """Terminal editor for chat profiles."""

    TITLE = "Chat Profile"

    CSS = """
    .profile-field {
        height: auto;
        layout: horizontal;
        margin: 0 1;
    }
    .profile-label {
        width: 16;
        text-style: bold;
    }
    .profile-value, .profile-default-label {
        width: 1fr;
    }
    .profile-kv-table {
        height: 12;
    }
    #profile-form {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "next_profile", "Next profile", show=True),
        Binding("ctrl+p", "previous_profile", "Previous profile", show=True),
        Binding("ctrl+s", "submit", "Submit", show=True),
    ]

    def __init__(
        self,
        config: EditorConfig,
        profiles: Sequence[Optional[SettingsRecord]] = (),
        *,
        read_only: bool = False,
    ) -> None:
        super().__init__()
        self.config = config
        self.read_only = read_only
        self._profiles: list[Optional[SettingsRecord]] = list(profiles) or [None]
        self.ui_state = AppState(profile_count=len(self._profiles), read_only=read_only)

    @property
    def profile(self) -> Optional[SettingsRecord]:
        """Profile currently shown by the form. None shows the placeholder."""
        return self._profiles[self.ui_state.profile_index]

    def compose(self) -> ComposeResult:
        yield Header()
        yield ProfileSettingsScreen(self.config, read_only=self.read_only, id="profile-screen")
        yield Footer()

    def on_mount(self) -> None:
        self.theme = _TEXTUAL_THEMES[resolve_notification_theme(self.config.theme)]
        self._update_subtitle()

    async def action_next_profile(self) -> None:
        await self._step_profile(1)

    async def action_previous_profile(self) -> None:
        await self._step_profile(-1)

    async def action_submit(self) -> None:
        if self.read_only:
            return
        await self.query_one(ProfileSettingsScreen).execute_command("submit")

    async def _step_profile(self, delta: int) -> None:
        if self.ui_state.step_profile(delta) is None:
            return
        self._update_subtitle()
        await self.query_one(ProfileSettingsScreen).refresh_from_profile()

    def _update_subtitle(self) -> None:
        profile = self.profile
        name = (profile.name if profile is not None else "") or "New profile"
        position = f"{self.ui_state.profile_index + 1}/{self.ui_state.profile_count}"
        mode = " (read-only)" if self.read_only else ""
        self.sub_title = f"{name} [{position}]{mode}"

    def notify_event(self, event: ProfileEvent) -> None:
        """Record a core notification and display it as a toast."""
        notification = self.ui_state.push_event(event)
        timeout = (
            self.config.notifications.error_timeout
            if notification.severity == "error"
            else self.config.notifications.timeout
        )
        self.notify(event.message, severity=notification.severity, timeout=timeout)


def run_tui(
    config: EditorConfig,
    profiles: Sequence[Optional[SettingsRecord]] = (),
    *,
    read_only: bool = False,
) -> int:
    """
    Run the TUI application.

    Returns:
        Exit code (0 for success)
    """
    app = ProfileEditorApp(config, profiles, read_only=read_only)
    app.run()
    return 0

"""Global TUI application state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal, Optional

from chatprofile.profiles.events import NotificationTheme, ProfileEvent

Severity = Literal["information", "warning", "error"]

_EVENT_SEVERITY: dict[str, Severity] = {
    "error": "error",
    "success": "information",
}


@dataclass(frozen=True)
class Notification:
    """Single UI notification event."""

    message: str
    severity: Severity = "information"
    theme: NotificationTheme = "light"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class AppStateSnapshot:
    """Immutable snapshot of global UI state."""

    profile_index: int
    profile_count: int
    read_only: bool
    notifications: tuple[Notification, ...]


class AppState:
    """Typed mutable container for cross-screen UI state."""

    def __init__(
        self,
        *,
        profile_count: int = 0,
        read_only: bool = False,
    ) -> None:
        self._profile_index = 0
        self._profile_count = max(0, profile_count)
        self._read_only = read_only
        self._notifications: list[Notification] = []

    @property
    def profile_index(self) -> int:
        return self._profile_index

    @property
    def profile_count(self) -> int:
        return self._profile_count

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def notifications(self) -> tuple[Notification, ...]:
        return tuple(self._notifications)

    def snapshot(self) -> AppStateSnapshot:
        """Return an immutable snapshot of current app UI state."""
        return AppStateSnapshot(
            profile_index=self._profile_index,
            profile_count=self._profile_count,
            read_only=self._read_only,
            notifications=tuple(self._notifications),
        )

    def step_profile(self, delta: int) -> Optional[int]:
        """Move to a neighbouring profile, wrapping around. None when there are none."""
        if self._profile_count == 0:
            return None
        self._profile_index = (self._profile_index + delta) % self._profile_count
        return self._profile_index

    def push_notification(
        self,
        message: str,
        *,
        severity: Severity = "information",
        theme: NotificationTheme = "light",
    ) -> Notification:
        notification = Notification(message=message, severity=severity, theme=theme)
        self._notifications.append(notification)
        return notification

    def push_event(self, event: ProfileEvent) -> Notification:
        return self.push_notification(
            event.message,
            severity=_EVENT_SEVERITY.get(event.kind, "information"),
            theme=event.theme,
        )

    def clear_notifications(self) -> None:
        self._notifications.clear()

    def drain_notifications(self) -> list[Notification]:
        items = list(self._notifications)
        self._notifications.clear()
        return items

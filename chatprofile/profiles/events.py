"""
Notification events emitted by the profile editor core.

The core reports validation failures and submit confirmations as named events;
rendering them is left to the host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional

EventKind = Literal["error", "success"]
NotificationTheme = Literal["light", "dark"]


@dataclass(frozen=True)
class ProfileEvent:
    """Single notification request."""

    kind: EventKind
    message: str
    theme: NotificationTheme = "light"


NotificationSink = Callable[[ProfileEvent], None]


def resolve_notification_theme(theme: Optional[str]) -> NotificationTheme:
    return "dark" if theme == "dark" else "light"


class EventRecorder:
    """Sink that keeps emitted events in order."""

    def __init__(self) -> None:
        self.events: list[ProfileEvent] = []

    def __call__(self, event: ProfileEvent) -> None:
        self.events.append(event)

    def drain(self) -> list[ProfileEvent]:
        items = list(self.events)
        self.events.clear()
        return items

"""
Draft synchronization for the profile form.

``DraftSynchronizer`` owns the in-progress copy of a profile. It rebinds the
draft whenever the supplied record changes subject and applies field edits as
shallow merges. Every rebind starts a new generation; edits tagged with an
older generation target a previous subject and are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Literal, Optional

from chatprofile.config.models.constants import SUCCESS_MESSAGE
from chatprofile.logging import get_logger

from .errors import ProfileValidationError
from .events import EventKind, NotificationSink, ProfileEvent, resolve_notification_theme
from .models import (
    EDITABLE_FIELDS,
    ImageSource,
    SettingsRecord,
    build_placeholder_record,
    clone_record,
    same_subject,
)

logger = get_logger(__name__)

DraftState = Literal["bound", "placeholder"]


@dataclass(frozen=True)
class _PendingSync:
    source: Optional[SettingsRecord]


@dataclass(frozen=True)
class _PendingEdit:
    field: str
    value: Any
    generation: int


class DraftSynchronizer:
    """Owner of the profile draft."""

    def __init__(
        self,
        source: Optional[SettingsRecord] = None,
        *,
        notify: Optional[NotificationSink] = None,
        theme: Optional[str] = None,
        placeholder_factory: Callable[[], SettingsRecord] = build_placeholder_record,
    ) -> None:
        self._notify_sink = notify
        self._theme = resolve_notification_theme(theme)
        self._placeholder_factory = placeholder_factory
        self._source: Optional[SettingsRecord] = None
        self._draft: SettingsRecord = placeholder_factory()
        self._generation = 0
        self._dirty_fields: set[str] = set()
        self._is_syncing = False
        self._pending_syncs: list[_PendingSync] = []
        self._pending_edits: list[_PendingEdit] = []
        self._bind(source)

    @property
    def state(self) -> DraftState:
        return "placeholder" if self._source is None else "bound"

    @property
    def source(self) -> Optional[SettingsRecord]:
        return self._source

    @property
    def generation(self) -> int:
        """Counter identifying the current subject binding."""
        return self._generation

    @property
    def draft(self) -> SettingsRecord:
        """Copy of the current draft."""
        return clone_record(self._draft)

    @property
    def dirty_fields(self) -> frozenset[str]:
        return frozenset(self._dirty_fields)

    def sync(self, source: Optional[SettingsRecord]) -> bool:
        """Rebind when ``source`` is a different subject. Returns True on rebind."""
        if self._is_syncing:
            return False
        if same_subject(source, self._source):
            return False
        self._bind(source)
        return True

    def reset(self) -> None:
        """Discard unsaved edits and rebind to the current source."""
        self._bind(self._source)

    def _bind(self, source: Optional[SettingsRecord]) -> None:
        self._is_syncing = True
        try:
            self._source = source
            self._draft = clone_record(source) if source is not None else self._placeholder_factory()
            self._generation += 1
            self._dirty_fields.clear()
        finally:
            self._is_syncing = False
        logger.debug(
            "Draft rebound (state=%s, id=%r, generation=%d)",
            self.state,
            getattr(source, "id", None),
            self._generation,
        )

    def apply(self, field: str, value: Any, *, generation: Optional[int] = None) -> bool:
        """
        Merge one field into the draft.

        Returns False without touching the draft when ``generation`` refers to
        an earlier subject.

        Raises:
            ValueError: If ``field`` is not an editable profile field.
            TypeError: If an icon value is not an ``ImageSource``.
        """
        if generation is not None and generation != self._generation:
            logger.debug(
                "Dropping stale edit to %s (generation %d, current %d)",
                field,
                generation,
                self._generation,
            )
            return False
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown profile field '{field}'")
        if field == "icon" and value is not None and not isinstance(value, ImageSource):
            raise TypeError(f"icon must be an ImageSource, got {type(value).__name__}")

        self._draft = replace(self._draft, **{field: value})
        self._dirty_fields.add(field)
        return True

    def updater(self, field: str) -> Callable[[Any], None]:
        """Return a setter for ``field`` bound to the current generation."""
        generation = self._generation

        def _update(value: Any) -> None:
            self.apply(field, value, generation=generation)

        return _update

    def enqueue_sync(self, source: Optional[SettingsRecord]) -> None:
        self._pending_syncs.append(_PendingSync(source))

    def enqueue_edit(self, field: str, value: Any, *, generation: Optional[int] = None) -> None:
        self._pending_edits.append(
            _PendingEdit(field, value, self._generation if generation is None else generation)
        )

    def flush(self) -> int:
        """
        Process queued events for the current tick.

        Subject changes run before edits, so an edit queued against the old
        subject is dropped. Returns the number of edits applied.
        """
        syncs, self._pending_syncs = self._pending_syncs, []
        edits, self._pending_edits = self._pending_edits, []
        for pending_sync in syncs:
            self.sync(pending_sync.source)
        applied = 0
        for edit in edits:
            if self.apply(edit.field, edit.value, generation=edit.generation):
                applied += 1
        return applied

    def submit(self, *, read_only: bool = False) -> Optional[SettingsRecord]:
        """
        Validate the draft and return a copy of it.

        Read-only forms have no submit path and return None without validating.

        Raises:
            ProfileValidationError: If the draft is invalid. The draft is left
                unchanged.
        """
        if read_only:
            logger.debug("Submit ignored for read-only form")
            return None
        try:
            self._draft.validate(read_only=False)
        except ProfileValidationError as exc:
            logger.warning("Profile validation failed: %s", exc)
            self._notify("error", str(exc))
            raise
        self._notify("success", SUCCESS_MESSAGE)
        return clone_record(self._draft)

    def report_error(self, message: str) -> None:
        """Forward an error from a field controller to the notification sink."""
        self._notify("error", message)

    def _notify(self, kind: EventKind, message: str) -> None:
        if self._notify_sink is None:
            return
        self._notify_sink(ProfileEvent(kind=kind, message=message, theme=self._theme))

"""Profile view model and immutable state snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from chatprofile.config.models import EditorConfig
from chatprofile.logging import get_logger
from chatprofile.profiles import (
    DraftState,
    DraftSynchronizer,
    EditableField,
    ImageSourceAdapter,
    MalformedImageError,
    ProfileValidationError,
    SettingsRecord,
    build_field,
    build_field_specs,
)
from chatprofile.profiles.events import NotificationSink
from chatprofile.profiles.fields import Editor, ReadOnlyProjection, format_value
from chatprofile.profiles.models import ImageType

logger = get_logger(__name__)

ICON_FIELD = "icon"


@dataclass(frozen=True)
class ProfileSnapshot:
    """Immutable snapshot of profile editor state."""

    source: Optional[SettingsRecord]
    draft: SettingsRecord
    state: DraftState
    read_only: bool
    dirty_fields: frozenset[str]
    validation_errors: dict[str, str]


@dataclass(frozen=True)
class ProfileActionResult:
    """Result value for view model actions."""

    handled: bool
    changed_fields: tuple[str, ...] = ()
    error: Optional[str] = None


@dataclass(frozen=True)
class ProfileTableRow:
    """Single key/value row rendered in the profile command table."""

    key: str
    value: str
    state: str


class ProfileViewModel:
    """ViewModel for editing one chat profile at a time."""

    def __init__(
        self,
        record: Optional[SettingsRecord],
        *,
        config: Optional[EditorConfig] = None,
        read_only: bool = False,
        notify: Optional[NotificationSink] = None,
    ) -> None:
        self._config = config or EditorConfig()
        self._read_only = read_only
        self._specs = build_field_specs(self._config)
        self._sync = DraftSynchronizer(record, notify=notify, theme=self._config.theme)
        self._validation_errors: dict[str, str] = {}

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def state(self) -> DraftState:
        return self._sync.state

    @property
    def draft(self) -> SettingsRecord:
        """Copy of the editable draft."""
        return self._sync.draft

    @property
    def dirty_fields(self) -> frozenset[str]:
        return self._sync.dirty_fields

    @property
    def validation_errors(self) -> dict[str, str]:
        """Current validation errors indexed by field id."""
        return dict(self._validation_errors)

    @property
    def field_names(self) -> tuple[str, ...]:
        return (ICON_FIELD, *self._specs.keys())

    def snapshot(self) -> ProfileSnapshot:
        """Return an immutable copy of current editor state."""
        return ProfileSnapshot(
            source=self._sync.source,
            draft=self._sync.draft,
            state=self._sync.state,
            read_only=self._read_only,
            dirty_fields=self._sync.dirty_fields,
            validation_errors=dict(self._validation_errors),
        )

    def load(self, record: Optional[SettingsRecord]) -> ProfileActionResult:
        """Bind a new source record. Unsaved edits are discarded on subject change."""
        if not self._sync.sync(record):
            return ProfileActionResult(handled=False)
        self._validation_errors.clear()
        return ProfileActionResult(handled=True, changed_fields=self.field_names)

    def field(self, name: str, editor: Optional[Editor] = None) -> EditableField[Any]:
        """Build a transient controller for one scalar field."""
        spec = self._specs[name]
        return build_field(
            spec,
            self._sync.draft,
            read_only=self._read_only,
            editor=editor,
            on_value_change=self._sync.updater(name),
        )

    def field_parser(self, name: str) -> Callable[[str], Any]:
        """Return the editor-domain parser for a scalar field."""
        return self._specs[name].parser

    def icon_adapter(self) -> ImageSourceAdapter:
        return ImageSourceAdapter(
            self._sync.draft.icon,
            on_image_change=self._sync.updater(ICON_FIELD),
            read_only=self._read_only,
            config=self._config.icon,
        )

    def set_field(self, name: str, text: str) -> ProfileActionResult:
        """Parse ``text`` with the field's editor domain and apply it."""
        spec = self._specs.get(name)
        if self._read_only or spec is None:
            return ProfileActionResult(handled=False)
        try:
            value = spec.parser(text)
        except ValueError as exc:
            return self._fail(name, str(exc))

        controller = self.field(name)
        if spec.overridable and value is None:
            changed = controller.use_default()
        else:
            changed = controller.edit(value)
        return self._done(name, changed)

    def default_field(self, name: str) -> ProfileActionResult:
        """Switch a field back to its default."""
        if self._read_only or name not in self._specs:
            return ProfileActionResult(handled=False)
        return self._done(name, self.field(name).use_default())

    def custom_field(self, name: str) -> ProfileActionResult:
        """Switch a field to custom mode, starting from its effective value."""
        if self._read_only or name not in self._specs:
            return ProfileActionResult(handled=False)
        return self._done(name, self.field(name).use_custom())

    def set_icon(self, data: str, image_type: ImageType) -> ProfileActionResult:
        if self._read_only:
            return ProfileActionResult(handled=False)
        try:
            changed = self.icon_adapter().replace(data, image_type)
        except MalformedImageError as exc:
            return self._fail(ICON_FIELD, str(exc))
        return self._done(ICON_FIELD, changed)

    def set_icon_file(self, path: Path | str) -> ProfileActionResult:
        if self._read_only:
            return ProfileActionResult(handled=False)
        try:
            changed = self.icon_adapter().load_file(path)
        except MalformedImageError as exc:
            return self._fail(ICON_FIELD, str(exc))
        except OSError as exc:
            return self._fail(ICON_FIELD, f"Could not read icon file: {exc}")
        return self._done(ICON_FIELD, changed)

    def remove_icon(self) -> ProfileActionResult:
        if self._read_only:
            return ProfileActionResult(handled=False)
        return self._done(ICON_FIELD, self.icon_adapter().remove())

    def discard(self) -> ProfileActionResult:
        """Reset the draft to the bound source record."""
        if self._read_only:
            return ProfileActionResult(handled=False)
        self._sync.reset()
        self._validation_errors.clear()
        return ProfileActionResult(handled=True, changed_fields=self.field_names)

    def submit(self) -> ProfileActionResult:
        """Validate the draft. Read-only forms have no submit path."""
        if self._read_only:
            return ProfileActionResult(handled=False)
        try:
            self._sync.submit(read_only=False)
        except ProfileValidationError as exc:
            self._validation_errors[exc.field or "_submit"] = str(exc)
            return ProfileActionResult(handled=True, error=str(exc))
        self._validation_errors.clear()
        return ProfileActionResult(handled=True)

    def table_rows(self) -> list[ProfileTableRow]:
        """Build key/value rows for every field, icon first."""
        dirty = self._sync.dirty_fields
        view = self.icon_adapter().render()
        rows = [ProfileTableRow(key=ICON_FIELD, value=view.summary, state=self._row_state(None, ICON_FIELD in dirty))]
        for name in self._specs:
            controller = self.field(name)
            rows.append(
                ProfileTableRow(
                    key=name,
                    value=self._display_value(controller),
                    state=self._row_state(controller, name in dirty),
                )
            )
        return rows

    def _display_value(self, controller: EditableField[Any]) -> str:
        if self._read_only:
            projection = controller.render()
            assert isinstance(projection, ReadOnlyProjection)
            return projection.text
        if controller.mode == "default":
            return controller.binding.default_label
        value = controller.value
        return "" if value is None else format_value(value)

    def _row_state(self, controller: Optional[EditableField[Any]], dirty: bool) -> str:
        if self._read_only:
            return "read-only"
        parts: list[str] = []
        if controller is not None and controller.overridable:
            parts.append(controller.mode)
        if dirty:
            parts.append("dirty")
        return ", ".join(parts)

    def _done(self, name: str, changed: bool) -> ProfileActionResult:
        if not changed:
            return ProfileActionResult(handled=True)
        self._validation_errors.pop(name, None)
        return ProfileActionResult(handled=True, changed_fields=(name,))

    def reject(self, name: str, message: str) -> ProfileActionResult:
        """Record an edit an editor refused before it reached the draft."""
        if self._read_only:
            return ProfileActionResult(handled=False)
        return self._fail(name, message)

    def _fail(self, name: str, message: str) -> ProfileActionResult:
        logger.warning("Rejected %s edit: %s", name, message)
        self._validation_errors[name] = message
        self._sync.report_error(message)
        return ProfileActionResult(handled=True, changed_fields=(name,), error=message)

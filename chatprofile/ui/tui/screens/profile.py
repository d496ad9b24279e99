"""Profile settings screen for the chat profile editor TUI."""

from __future__ import annotations

import shlex
from typing import Any, Optional

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widget import Widget
from textual.widgets import DataTable, Input, Static

from chatprofile.config.models import EditorConfig
from chatprofile.logging import get_logger
from chatprofile.profiles import ProfileEvent, SettingsRecord
from chatprofile.profiles.fields import Editor
from chatprofile.ui.tui.state import ProfileActionResult, ProfileViewModel
from chatprofile.ui.tui.widgets.editable_field import EditableFieldRow, IconFieldRow
from chatprofile.ui.tui.widgets.editors import (
    EditorCommitted,
    EditorRejected,
    model_select_editor,
    number_editor,
    text_editor,
)

logger = get_logger(__name__)

COMMAND_HELP = (
    "Commands: set <field> <value> | default <field> | custom <field> | "
    "icon load <path> | icon remove | discard | submit"
)


class ProfileSettingsScreen(Widget):
    """Controller for the profile form and its command table."""

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        read_only: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config or EditorConfig()
        self._read_only = read_only
        self._view_model: Optional[ProfileViewModel] = None
        self._source_profile: Optional[SettingsRecord] = None
        self._is_refreshing = False

    @property
    def view_model(self) -> Optional[ProfileViewModel]:
        return self._view_model

    def compose(self) -> ComposeResult:
        with Vertical(id="profile-layout"):
            yield Static("", id="profile-status")
            yield VerticalScroll(id="profile-form")
            yield DataTable(id="profile-table", classes="profile-kv-table")
            if not self._read_only:
                yield Input(placeholder="set <field> <value> | submit", id="profile-command")
                yield Static(COMMAND_HELP, classes="profile-command-help")

    async def on_mount(self) -> None:
        table = self.query_one("#profile-table", DataTable)
        if not table.columns:
            table.add_columns("Field", "Value", "State")
            table.cursor_type = "row"
            table.zebra_stripes = True
        await self.refresh_from_profile()

    async def refresh_from_profile(self) -> None:
        """Re-sync with the app's current profile and redraw."""
        view_model = self._ensure_view_model()
        if view_model is None:
            return
        await self._refresh_view()

    def _ensure_view_model(self) -> Optional[ProfileViewModel]:
        profile = getattr(self.app, "profile", None)

        if self._view_model is None:
            self._view_model = ProfileViewModel(
                profile,
                config=self._config,
                read_only=self._read_only,
                notify=self._on_profile_event,
            )
            self._source_profile = profile
            return self._view_model

        if profile is not self._source_profile:
            self._view_model.load(profile)
            self._source_profile = profile

        return self._view_model

    def _editor_for(self, name: str) -> Optional[Editor]:
        view_model = self._view_model
        if view_model is None or self._read_only:
            return None
        parser = view_model.field_parser(name)
        if name == "model":
            return model_select_editor(name, self._config.model_choices)
        if name in {"seed", "temperature", "top_p"}:
            return number_editor(name, parser)
        return text_editor(name, parser, placeholder=f"Enter {name}")

    async def _refresh_view(self) -> None:
        view_model = self._view_model
        if view_model is None or self._is_refreshing:
            return
        self._is_refreshing = True
        try:
            rows: list[Widget] = [IconFieldRow(view_model.icon_adapter())]
            for name in view_model.field_names:
                if name == "icon":
                    continue
                rows.append(EditableFieldRow(view_model.field(name, editor=self._editor_for(name))))
            form = self.query_one("#profile-form", VerticalScroll)
            await form.remove_children()
            await form.mount_all(rows)

            table = self.query_one("#profile-table", DataTable)
            table.clear()
            for row in view_model.table_rows():
                table.add_row(row.key, row.value, row.state)
        finally:
            self._is_refreshing = False

    async def on_editor_committed(self, event: EditorCommitted) -> None:
        event.stop()
        await self._refresh_view()

    async def on_editor_rejected(self, event: EditorRejected) -> None:
        event.stop()
        if self._view_model is not None:
            await self._apply_action_result(self._view_model.reject(event.field_id, event.message))

    async def on_icon_field_row_load_requested(self, event: IconFieldRow.LoadRequested) -> None:
        event.stop()
        if self._view_model is not None:
            await self._apply_action_result(self._view_model.set_icon_file(event.path))

    async def on_icon_field_row_remove_requested(self, event: IconFieldRow.RemoveRequested) -> None:
        event.stop()
        if self._view_model is not None:
            await self._apply_action_result(self._view_model.remove_icon())

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "profile-command":
            return
        command = (event.value or "").strip()
        event.input.value = ""
        if command:
            await self.execute_command(command)

    async def execute_command(self, command: str) -> None:
        view_model = self._ensure_view_model()
        if view_model is None:
            self._set_status("No profile available.", True)
            return

        try:
            tokens = shlex.split(command)
        except ValueError as exc:
            self._set_status(f"Command parse error: {exc}", True)
            return
        if not tokens:
            return

        verb = tokens[0].lower()
        result: Optional[ProfileActionResult] = None

        if verb == "set":
            if len(tokens) < 2:
                self._set_status("Usage: set <field> <value>", True)
                return
            result = view_model.set_field(tokens[1], " ".join(tokens[2:]))
        elif verb in {"default", "custom"}:
            if len(tokens) != 2:
                self._set_status(f"Usage: {verb} <field>", True)
                return
            if verb == "default":
                result = view_model.default_field(tokens[1])
            else:
                result = view_model.custom_field(tokens[1])
        elif verb == "icon":
            if len(tokens) >= 3 and tokens[1] == "load":
                result = view_model.set_icon_file(" ".join(tokens[2:]))
            elif len(tokens) == 2 and tokens[1] == "remove":
                result = view_model.remove_icon()
            else:
                self._set_status("Usage: icon load <path> | icon remove", True)
                return
        elif verb == "discard":
            result = view_model.discard()
            if result.handled:
                self._set_status("Unsaved changes discarded.", False)
        elif verb == "submit":
            result = view_model.submit()
            if result.handled and result.error is None:
                self._set_status("Profile is valid.", False)
        else:
            self._set_status(f"Unknown command: {verb}", True)
            return

        await self._apply_action_result(result)

    async def _apply_action_result(self, result: ProfileActionResult) -> None:
        if not result.handled:
            self._set_status("Nothing to change.", False)
            return
        if result.error:
            self._set_status(result.error, True)
        await self._refresh_view()

    def _on_profile_event(self, event: ProfileEvent) -> None:
        notify = getattr(self.app, "notify_event", None)
        if not callable(notify):
            return
        try:
            notify(event)
        except Exception:
            logger.exception("Failed to emit profile notification")

    def _set_status(self, message: str, error: bool) -> None:
        try:
            widget = self.query_one("#profile-status", Static)
            widget.update(f"[red]{message}[/red]" if error else message)
        except Exception:
            logger.warning(message)

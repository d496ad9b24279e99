"""Field row widgets for the profile form."""

from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Input, Static, Switch

from chatprofile.profiles import EditableField, ImageSourceAdapter, ReadOnlyProjection
from chatprofile.ui.tui.widgets.editors import EditorCommitted


class EditableFieldRow(Widget):
    """Renders one ``EditableField`` controller."""

    DEFAULT_CSS = """
    EditableFieldRow {
        height: auto;
    }
    """

    def __init__(self, controller: EditableField[Any], **kwargs: Any) -> None:
        super().__init__(id=f"profile-{controller.field_id}-row", classes="profile-field", **kwargs)
        self.controller = controller

    def compose(self) -> ComposeResult:
        rendering = self.controller.render()
        yield Static(rendering.label, classes="profile-label")
        if isinstance(rendering, ReadOnlyProjection):
            yield Static(rendering.text, classes="profile-value")
            return

        if rendering.overridable:
            yield Switch(
                value=rendering.mode == "default",
                id=f"profile-{rendering.field_id}-default",
            )
        if rendering.mode == "default":
            yield Static(f"Default: {rendering.default_label}", classes="profile-default-label")
        else:
            yield rendering.control

    def on_switch_changed(self, event: Switch.Changed) -> None:
        event.stop()
        if event.value:
            changed = self.controller.use_default()
        else:
            changed = self.controller.use_custom()
        if changed:
            self.post_message(EditorCommitted(self.controller.field_id))
        else:
            # Keep the switch on the mode the field is actually in.
            event.switch.value = self.controller.mode == "default"


class IconFieldRow(Widget):
    """Renders the icon adapter with load/remove actions."""

    DEFAULT_CSS = """
    IconFieldRow {
        height: auto;
    }
    """

    class LoadRequested(Message):
        """Posted when the user submits an icon file path."""

        def __init__(self, path: str) -> None:
            super().__init__()
            self.path = path

    class RemoveRequested(Message):
        """Posted when the user removes the icon."""

    def __init__(self, adapter: ImageSourceAdapter, **kwargs: Any) -> None:
        super().__init__(id="profile-icon-row", classes="profile-field", **kwargs)
        self.adapter = adapter

    def compose(self) -> ComposeResult:
        view = self.adapter.render()
        yield Static("Icon", classes="profile-label")
        yield Static(view.summary, id="profile-icon-preview", classes="profile-value")
        if self.adapter.read_only:
            return
        yield Horizontal(
            Input(placeholder="Path to .svg/.png/.jpg", id="profile-icon-path"),
            Button("Remove", id="profile-icon-remove", disabled=view.placeholder),
            classes="profile-actions",
        )

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "profile-icon-path":
            return
        event.stop()
        path = (event.value or "").strip()
        if path:
            self.post_message(self.LoadRequested(path))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "profile-icon-remove":
            return
        event.stop()
        self.post_message(self.RemoveRequested())

"""
Textual editor strategies for profile fields.

Each factory returns an ``Editor``: a callable taking the current value and an
``on_change`` callback and returning the widget that edits the value.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from textual.message import Message
from textual.widgets import Input, Select

from chatprofile.config.models.constants import MODEL_NONE_LABEL
from chatprofile.profiles.fields import Editor, ValueCallback, format_value


class EditorRejected(Message):
    """Posted when an editor could not parse the user's input."""

    def __init__(self, field_id: str, message: str) -> None:
        super().__init__()
        self.field_id = field_id
        self.message = message


class EditorCommitted(Message):
    """Posted after an editor reported a new value."""

    def __init__(self, field_id: str) -> None:
        super().__init__()
        self.field_id = field_id


class ValueInput(Input):
    """Single-line input that parses and commits its value on Enter."""

    def __init__(
        self,
        field_id: str,
        value: Any,
        on_change: ValueCallback,
        parser: Callable[[str], Any],
        **kwargs: Any,
    ) -> None:
        text = "" if value is None else format_value(value)
        super().__init__(value=text, id=f"profile-{field_id}-editor", **kwargs)
        self.field_id = field_id
        self._current = value
        self._on_change = on_change
        self._parser = parser

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.commit(event.value)

    def commit(self, text: str) -> bool:
        try:
            value = self._parser(text)
        except ValueError as exc:
            self.post_message(EditorRejected(self.field_id, str(exc)))
            return False
        if value == self._current:
            return False
        self._current = value
        self._on_change(value)
        self.post_message(EditorCommitted(self.field_id))
        return True


class ModelSelect(Select[str]):
    """Model picker. The blank entry means "use the default model"."""

    def __init__(
        self,
        field_id: str,
        value: Optional[str],
        on_change: ValueCallback,
        choices: Iterable[str],
        *,
        allow_none: bool = True,
        none_label: str = MODEL_NONE_LABEL,
    ) -> None:
        names = list(choices)
        if value is not None and value not in names:
            names.append(value)
        options = [(name, name) for name in names]
        initial = value if value is not None else Select.BLANK
        super().__init__(
            options,
            value=initial,
            allow_blank=allow_none,
            prompt=none_label,
            id=f"profile-{field_id}-editor",
        )
        self.field_id = field_id
        self._current = value
        self._on_change = on_change

    def on_select_changed(self, event: Select.Changed) -> None:
        event.stop()
        self.commit(None if event.value is Select.BLANK else str(event.value))

    def commit(self, value: Optional[str]) -> bool:
        if value == self._current:
            return False
        self._current = value
        self._on_change(value)
        self.post_message(EditorCommitted(self.field_id))
        return True


def text_editor(field_id: str, parser: Callable[[str], Any], *, placeholder: str = "") -> Editor:
    def _build(value: Any, on_change: ValueCallback) -> ValueInput:
        return ValueInput(field_id, value, on_change, parser, placeholder=placeholder)

    return _build


def number_editor(field_id: str, parser: Callable[[str], Any], *, placeholder: str = "") -> Editor:
    def _build(value: Any, on_change: ValueCallback) -> ValueInput:
        return ValueInput(field_id, value, on_change, parser, placeholder=placeholder, type="number")

    return _build


def model_select_editor(
    field_id: str,
    choices: Iterable[str],
    *,
    allow_none: bool = True,
    none_label: str = MODEL_NONE_LABEL,
) -> Editor:
    names = tuple(choices)

    def _build(value: Optional[str], on_change: ValueCallback) -> ModelSelect:
        return ModelSelect(field_id, value, on_change, names, allow_none=allow_none, none_label=none_label)

    return _build

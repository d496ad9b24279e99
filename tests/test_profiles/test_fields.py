from __future__ import annotations

from typing import Any, Optional
from unittest.mock import Mock

import pytest

from chatprofile.profiles import (
    PROFILE_FIELDS,
    EditableControl,
    EditableField,
    ReadOnlyProjection,
    SettingsRecord,
    build_field,
)
from chatprofile.profiles.fields import format_value


def _temperature(value: Optional[float], *, read_only: bool = False, editor=None, on_change=None) -> EditableField[float]:
    return EditableField(
        "temperature",
        "Temperature",
        value=value,
        default=1.0,
        default_label="1.0",
        editor=editor,
        on_value_change=on_change,
        read_only=read_only,
    )


def test_read_only_null_value_shows_default_label() -> None:
    rendering = _temperature(None, read_only=True).render()

    assert isinstance(rendering, ReadOnlyProjection)
    assert rendering.text == "1.0"
    assert rendering.is_default is True


def test_read_only_explicit_value_is_formatted() -> None:
    rendering = _temperature(0.25, read_only=True).render()

    assert isinstance(rendering, ReadOnlyProjection)
    assert rendering.text == "0.25"
    assert rendering.is_default is False


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_values_are_shown_verbatim(value: float) -> None:
    assert format_value(value) == str(value)

    rendering = _temperature(value, read_only=True).render()

    assert isinstance(rendering, ReadOnlyProjection)
    assert rendering.text == str(value)


def test_read_only_never_invokes_editor_or_callback() -> None:
    editor = Mock()
    on_change = Mock()
    field = _temperature(0.5, read_only=True, editor=editor, on_change=on_change)

    field.render()
    for attempt in range(10):
        assert field.edit(attempt / 10) is False
    assert field.use_default() is False
    assert field.use_custom() is False

    editor.assert_not_called()
    on_change.assert_not_called()


def test_missing_default_renders_no_default_indicator() -> None:
    field: EditableField[int] = EditableField("seed", "Seed", value=None, default=None, default_label="ignored")

    assert field.binding.default_label == "N/A"
    read_only = EditableField("seed", "Seed", value=None, default=None, read_only=True).render()
    assert isinstance(read_only, ReadOnlyProjection)
    assert read_only.text == "N/A"
    assert read_only.has_default is False

    editable = field.render()
    assert isinstance(editable, EditableControl)
    assert editable.mode == "default"
    assert editable.default_label == "N/A"
    assert editable.has_default is False


def test_default_mode_does_not_build_editor() -> None:
    editor = Mock()
    rendering = _temperature(None, editor=editor).render()

    assert isinstance(rendering, EditableControl)
    assert rendering.mode == "default"
    assert rendering.effective == 1.0
    assert rendering.control is None
    editor.assert_not_called()


def test_custom_mode_builds_editor_with_value_and_setter() -> None:
    seen: list[Any] = []
    on_change = Mock()

    def editor(value, set_value):
        seen.append(value)
        return ("slider", set_value)

    field = _temperature(0.7, editor=editor, on_change=on_change)
    rendering = field.render()

    assert isinstance(rendering, EditableControl)
    assert rendering.mode == "custom"
    assert seen == [0.7]
    _, set_value = rendering.control
    set_value(0.8)
    on_change.assert_called_once_with(0.8)
    assert field.value == 0.8


def test_use_custom_seeds_with_default_value() -> None:
    on_change = Mock()
    field = _temperature(None, on_change=on_change)

    assert field.use_custom() is True

    on_change.assert_called_once_with(1.0)
    assert field.mode == "custom"
    assert field.value == 1.0


def test_use_default_clears_override_once() -> None:
    on_change = Mock()
    field = _temperature(0.3, on_change=on_change)

    assert field.use_default() is True
    assert field.use_default() is False

    on_change.assert_called_once_with(None)
    assert field.mode == "default"


def test_use_custom_is_noop_when_already_custom() -> None:
    on_change = Mock()
    field = _temperature(0.3, on_change=on_change)

    assert field.use_custom() is False
    on_change.assert_not_called()


def test_each_edit_invokes_callback_exactly_once() -> None:
    on_change = Mock()
    field = _temperature(0.3, on_change=on_change)

    field.edit(0.4)
    field.edit(0.5)

    assert [call.args for call in on_change.call_args_list] == [(0.4,), (0.5,)]


def test_custom_mode_without_editor_is_an_error() -> None:
    with pytest.raises(ValueError, match="no editor"):
        _temperature(0.3).render()


def test_seed_field_uses_empty_seed_for_custom_mode() -> None:
    on_change = Mock()
    field = build_field(PROFILE_FIELDS["seed"], SettingsRecord(), read_only=False, on_value_change=on_change)

    assert field.use_custom() is True
    on_change.assert_called_once_with(0)


def test_field_without_default_or_seed_cannot_enter_custom_mode() -> None:
    on_change = Mock()
    field: EditableField[str] = EditableField("nickname", "Nickname", value=None, default=None, on_value_change=on_change)

    assert field.use_custom() is False
    on_change.assert_not_called()


def test_plain_field_is_always_custom_and_not_toggleable() -> None:
    on_change = Mock()
    record = SettingsRecord(name="")
    field = build_field(PROFILE_FIELDS["name"], record, read_only=False, on_value_change=on_change)

    assert field.mode == "custom"
    assert field.use_default() is False
    assert field.edit("Alice") is True
    on_change.assert_called_once_with("Alice")


def test_plain_field_read_only_empty_shows_na() -> None:
    record = SettingsRecord(name="", description="")

    name = build_field(PROFILE_FIELDS["name"], record, read_only=True).render()
    description = build_field(PROFILE_FIELDS["description"], record, read_only=True).render()

    assert isinstance(name, ReadOnlyProjection) and name.text == "N/A"
    assert isinstance(description, ReadOnlyProjection) and description.text == "N/A"


def test_registry_defaults_match_profile_form() -> None:
    assert PROFILE_FIELDS["temperature"].default == 1.0
    assert PROFILE_FIELDS["temperature"].default_label == "1.0"
    assert PROFILE_FIELDS["top_p"].default == 1.0
    assert PROFILE_FIELDS["model"].default_label == "gpt-4-turbo-preview"
    assert PROFILE_FIELDS["instructions"].default == "You are a helpful assistant."
    assert PROFILE_FIELDS["seed"].default is None
    assert PROFILE_FIELDS["name"].required is True

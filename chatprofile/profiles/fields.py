"""
Generic editable field controller.

An ``EditableField`` renders one profile field either as a read-only
projection of its effective value or as an editable control that toggles
between "default" and "custom" modes. The editor strategy is injected, so the
controller works for any value type.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, Literal, Optional, TypeVar

from chatprofile.config.models.constants import NO_DEFAULT_LABEL
from chatprofile.logging import get_logger

from . import resolver

logger = get_logger(__name__)

T = TypeVar("T")

FieldMode = Literal["default", "custom"]
ValueCallback = Callable[[Optional[T]], None]
Editor = Callable[[Optional[T], ValueCallback], Any]


@dataclass(frozen=True)
class ReadOnlyProjection:
    """Non-interactive rendering of a field's effective value."""

    field_id: str
    label: str
    text: str
    is_default: bool
    has_default: bool


@dataclass(frozen=True)
class EditableControl:
    """Interactive rendering of a field."""

    field_id: str
    label: str
    mode: FieldMode
    effective: Any
    default_label: str
    has_default: bool
    overridable: bool
    control: Any = None
    """Editor output. Only built in custom mode."""


FieldRendering = ReadOnlyProjection | EditableControl


def format_value(value: Any) -> str:
    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        return f"{value:g}" if value != int(value) else f"{value:.1f}"
    return str(value)


class EditableField(Generic[T]):
    """Controller for one editable field."""

    def __init__(
        self,
        field_id: str,
        label: str,
        *,
        value: Optional[T],
        default: Optional[T],
        default_label: Optional[str] = None,
        editor: Optional[Editor] = None,
        on_value_change: Optional[ValueCallback] = None,
        read_only: bool = False,
        overridable: bool = True,
        empty_seed: Optional[T] = None,
        formatter: Callable[[Any], str] = format_value,
    ) -> None:
        self.field_id = field_id
        self.label = label
        self._binding: resolver.FieldBinding[T] = resolver.FieldBinding(
            value=value,
            default=default,
            default_label=self._resolve_default_label(default, default_label),
        )
        self._editor = editor
        self._on_value_change = on_value_change
        self.read_only = read_only
        self.overridable = overridable
        self._empty_seed = empty_seed
        self._formatter = formatter

    @staticmethod
    def _resolve_default_label(default: Any, label: Optional[str]) -> str:
        if default is None:
            return NO_DEFAULT_LABEL
        return label if label is not None else format_value(default)

    @property
    def binding(self) -> resolver.FieldBinding[T]:
        return self._binding

    @property
    def value(self) -> Optional[T]:
        return self._binding.value

    @property
    def mode(self) -> FieldMode:
        if not self.overridable:
            return "custom"
        return "default" if self._binding.is_default else "custom"

    def render(self) -> FieldRendering:
        """Render the field for the current mode."""
        if self.read_only:
            return ReadOnlyProjection(
                field_id=self.field_id,
                label=self.label,
                text=self._projection_text(),
                is_default=self._binding.is_default,
                has_default=self._binding.has_default,
            )

        mode = self.mode
        control = None
        if mode == "custom":
            if self._editor is None:
                raise ValueError(f"Field '{self.field_id}' has no editor")
            control = self._editor(self._binding.value, self._emit)

        return EditableControl(
            field_id=self.field_id,
            label=self.label,
            mode=mode,
            effective=self._binding.effective,
            default_label=self._binding.default_label,
            has_default=self._binding.has_default,
            overridable=self.overridable,
            control=control,
        )

    def _projection_text(self) -> str:
        value = self._binding.value
        if value is None or (not self.overridable and value == ""):
            if self.overridable and self._binding.has_default:
                return self._binding.default_label
            return NO_DEFAULT_LABEL
        return self._formatter(value)

    def edit(self, value: Optional[T]) -> bool:
        """Report a new value from the editor. Returns False when ignored."""
        return self._emit(value)

    def use_default(self) -> bool:
        """Switch to default mode by clearing the override."""
        if self.read_only or not self.overridable or self._binding.is_default:
            return False
        return self._emit(resolver.toggle_to_default())

    def use_custom(self) -> bool:
        """Switch to custom mode, seeded with the current effective value."""
        if self.read_only or not self.overridable or not self._binding.is_default:
            return False
        seed = self._binding.default if self._binding.has_default else self._empty_seed
        if seed is None:
            logger.debug("Field %s has no starting value for custom mode", self.field_id)
            return False
        return self._emit(resolver.toggle_to_custom(seed))

    def _emit(self, value: Optional[T]) -> bool:
        if self.read_only:
            logger.debug("Ignoring change to read-only field %s", self.field_id)
            return False
        if self._on_value_change is None:
            return False
        self._on_value_change(value)
        self._binding = resolver.FieldBinding(
            value=value,
            default=self._binding.default,
            default_label=self._binding.default_label,
        )
        return True

"""
Field definitions for the chat profile form.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from chatprofile.config.models import EditorConfig
from chatprofile.config.models.constants import (
    DEFAULT_INSTRUCTIONS,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
    TEMPERATURE_RANGE,
    TOP_P_RANGE,
)

from . import editors
from .fields import Editor, EditableField, ValueCallback
from .models import SettingsRecord


@dataclass(frozen=True)
class FieldSpec:
    """Static description of one scalar profile field."""

    name: str
    label: str
    parser: Callable[[str], Any]
    default: Any = None
    default_label: Optional[str] = None
    overridable: bool = True
    required: bool = False
    empty_seed: Any = None
    multiline: bool = False
    choices: tuple[str, ...] = field(default_factory=tuple)


def build_field_specs(config: Optional[EditorConfig] = None) -> dict[str, FieldSpec]:
    """Build the scalar field registry. Model choices come from ``config``."""
    config = config or EditorConfig()
    temperature_min, temperature_max = TEMPERATURE_RANGE
    top_p_min, top_p_max = TOP_P_RANGE
    specs = (
        FieldSpec(
            name="name",
            label="Name",
            parser=editors.parse_text,
            overridable=False,
            required=True,
        ),
        FieldSpec(
            name="description",
            label="Description",
            parser=editors.parse_text,
            overridable=False,
            multiline=True,
        ),
        FieldSpec(
            name="instructions",
            label="Instructions",
            parser=editors.parse_optional_text,
            default=DEFAULT_INSTRUCTIONS,
            default_label=DEFAULT_INSTRUCTIONS,
            multiline=True,
        ),
        FieldSpec(
            name="model",
            label="Model",
            parser=editors.model_choice(config.model_choices),
            default=config.default_model,
            default_label=config.default_model,
            choices=tuple(config.model_choices),
        ),
        FieldSpec(
            name="seed",
            label="Seed",
            parser=editors.parse_seed,
            empty_seed=0,
        ),
        FieldSpec(
            name="temperature",
            label="Temperature",
            parser=editors.bounded_float(temperature_min, temperature_max, label="Temperature"),
            default=DEFAULT_TEMPERATURE,
            default_label=f"{DEFAULT_TEMPERATURE:.1f}",
        ),
        FieldSpec(
            name="top_p",
            label="Top P",
            parser=editors.bounded_float(top_p_min, top_p_max, label="Top P"),
            default=DEFAULT_TOP_P,
            default_label=f"{DEFAULT_TOP_P:.1f}",
        ),
    )
    return {spec.name: spec for spec in specs}


PROFILE_FIELDS: dict[str, FieldSpec] = build_field_specs()


def build_field(
    spec: FieldSpec,
    record: SettingsRecord,
    *,
    read_only: bool,
    editor: Optional[Editor] = None,
    on_value_change: Optional[ValueCallback] = None,
) -> EditableField[Any]:
    """Bind ``spec`` to the current value held by ``record``."""
    return EditableField(
        spec.name,
        spec.label,
        value=getattr(record, spec.name),
        default=spec.default,
        default_label=spec.default_label,
        editor=editor,
        on_value_change=on_value_change,
        read_only=read_only,
        overridable=spec.overridable,
        empty_seed=spec.empty_seed,
    )

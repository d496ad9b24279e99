"""
Chat profile editing core.

Record model, default/override resolution, field controllers, the icon
adapter, and draft synchronization.
"""

from __future__ import annotations

from .draft import DraftState, DraftSynchronizer
from .errors import MalformedImageError, ProfileError, ProfileValidationError
from .events import EventRecorder, ProfileEvent, resolve_notification_theme
from .fields import EditableControl, EditableField, ReadOnlyProjection
from .image import ImageSourceAdapter, ImageView
from .loader import build_profile_from_raw, load_profile_from_file, profile_to_raw
from .models import (
    ImageSource,
    SettingsRecord,
    build_placeholder_record,
    clone_record,
    same_subject,
)
from .registry import PROFILE_FIELDS, FieldSpec, build_field, build_field_specs
from .resolver import FieldBinding

__all__ = [
    "DraftState",
    "DraftSynchronizer",
    "EditableControl",
    "EditableField",
    "EventRecorder",
    "FieldBinding",
    "FieldSpec",
    "ImageSource",
    "ImageSourceAdapter",
    "ImageView",
    "MalformedImageError",
    "PROFILE_FIELDS",
    "ProfileError",
    "ProfileEvent",
    "ProfileValidationError",
    "ReadOnlyProjection",
    "SettingsRecord",
    "build_field",
    "build_field_specs",
    "build_placeholder_record",
    "build_profile_from_raw",
    "clone_record",
    "load_profile_from_file",
    "profile_to_raw",
    "resolve_notification_theme",
    "same_subject",
]

"""
Configuration data models for the chat profile editor.
"""

from .constants import (
    DEFAULT_INSTRUCTIONS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
    NO_DEFAULT_LABEL,
    TEMPERATURE_RANGE,
    TOP_P_RANGE,
)
from .editor_config import EditorConfig, IconConfig, NotificationConfig

__all__ = [
    "DEFAULT_INSTRUCTIONS",
    "DEFAULT_MODEL",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_TOP_P",
    "NO_DEFAULT_LABEL",
    "TEMPERATURE_RANGE",
    "TOP_P_RANGE",
    "EditorConfig",
    "IconConfig",
    "NotificationConfig",
]

"""
Editor configuration models.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .constants import (
    DEFAULT_MAX_VECTOR_BYTES,
    DEFAULT_MODEL,
    DEFAULT_NOTIFY_ERROR_TIMEOUT_SECONDS,
    DEFAULT_NOTIFY_TIMEOUT_SECONDS,
    DEFAULT_THEME,
    SUPPORTED_THEMES,
)


@dataclass
class IconConfig:
    """
    Policy for the icon field editor.
    """

    reset_type_on_remove: bool = False
    """When True, removing an icon resets its type to 'raster'."""

    max_vector_bytes: int = DEFAULT_MAX_VECTOR_BYTES
    """Maximum size of inline SVG markup accepted by the icon editor."""

    def validate(self) -> None:
        if self.max_vector_bytes < 1:
            raise ValueError(f"icon.max_vector_bytes must be positive, got {self.max_vector_bytes}")


@dataclass
class NotificationConfig:
    """
    Display timeouts for transient notifications.
    """

    timeout: float = DEFAULT_NOTIFY_TIMEOUT_SECONDS
    error_timeout: float = DEFAULT_NOTIFY_ERROR_TIMEOUT_SECONDS

    def validate(self) -> None:
        if self.timeout <= 0 or self.error_timeout <= 0:
            raise ValueError("notification timeouts must be positive")


@dataclass
class EditorConfig:
    """
    Top-level configuration for the chat profile editor.
    """

    theme: Optional[str] = None
    """UI theme ('light' or 'dark'). Falls back to CHATPROFILE_THEME, then 'light'."""

    default_model: str = DEFAULT_MODEL
    """Model used by the system when a profile leaves 'model' unset."""

    models: list[str] = field(default_factory=list)
    """Model names offered by the model picker."""

    icon: IconConfig = field(default_factory=IconConfig)
    """Icon editor policy."""

    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    """Notification display settings."""

    config_path: Optional[Path] = None
    """Path the configuration was loaded from, if any."""

    def __post_init__(self) -> None:
        if not self.theme:
            self.theme = os.getenv("CHATPROFILE_THEME") or DEFAULT_THEME
        self.theme = str(self.theme).strip().lower()
        self.default_model = str(self.default_model or DEFAULT_MODEL).strip()
        self.models = [str(name).strip() for name in self.models if str(name).strip()]

    @property
    def model_choices(self) -> list[str]:
        """Picker choices, with the default model always available."""
        choices = list(self.models)
        if self.default_model not in choices:
            choices.insert(0, self.default_model)
        return choices

    def validate(self) -> None:
        """Validate editor configuration."""
        if self.theme not in SUPPORTED_THEMES:
            raise ValueError(f"theme must be one of {sorted(SUPPORTED_THEMES)}, got '{self.theme}'")
        if not self.default_model:
            raise ValueError("default_model cannot be empty")
        self.icon.validate()
        self.notifications.validate()

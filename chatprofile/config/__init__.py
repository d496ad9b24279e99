"""
Configuration management for the chat profile editor.
"""

from .models import EditorConfig, IconConfig, NotificationConfig
from .loader import load_config_from_file, default_config

__all__ = [
    "EditorConfig",
    "IconConfig",
    "NotificationConfig",
    "default_config",
    "load_config_from_file",
]

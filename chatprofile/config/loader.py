"""
Configuration loader for the chat profile editor.

Handles loading configuration from JSON/YAML files and converting
to typed dataclass models.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

from .models import EditorConfig, IconConfig, NotificationConfig


def parse_config_text(content: str, path: Path | str) -> Dict[str, Any]:
    """
    Parse raw configuration content from JSON or YAML.

    Args:
        content: File content
        path: Path or filename used for extension detection
    """
    if isinstance(path, str):
        path = Path(path)

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(content) or {}
    if suffix == ".json":
        return json.loads(content)
    raise ValueError(
        f"Unsupported config format: {suffix}. "
        f"Use .json, .yaml, or .yml"
    )


def load_raw_config(path: Path) -> Dict[str, Any]:
    """
    Load raw configuration from a JSON or YAML file.

    Also loads environment variables from a .env file if present.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is unsupported
    """
    load_dotenv()

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = parse_config_text(path.read_text(encoding="utf-8"), path)
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return raw


def build_icon_config(raw: Dict[str, Any]) -> IconConfig:
    defaults = IconConfig()
    return IconConfig(
        reset_type_on_remove=bool(raw.get("reset_type_on_remove", defaults.reset_type_on_remove)),
        max_vector_bytes=int(raw.get("max_vector_bytes", defaults.max_vector_bytes)),
    )


def build_notification_config(raw: Dict[str, Any]) -> NotificationConfig:
    defaults = NotificationConfig()
    return NotificationConfig(
        timeout=float(raw.get("timeout", defaults.timeout)),
        error_timeout=float(raw.get("error_timeout", defaults.error_timeout)),
    )


def build_config_from_raw(raw: Dict[str, Any], path: Path | str | None = None) -> EditorConfig:
    """
    Build and validate EditorConfig from raw configuration data.
    """
    if isinstance(path, str):
        path = Path(path)
    if path is not None:
        path = path.expanduser().resolve()

    models = raw.get("models") or []
    if not isinstance(models, list):
        raise ValueError("'models' must be a list of model names")

    config = EditorConfig(
        theme=raw.get("theme"),
        default_model=raw.get("default_model") or EditorConfig.default_model,
        models=list(models),
        icon=build_icon_config(raw.get("icon") or {}),
        notifications=build_notification_config(raw.get("notifications") or {}),
        config_path=path,
    )
    config.validate()
    return config


def default_config() -> EditorConfig:
    """Build the configuration used when no config file is given."""
    load_dotenv()
    return build_config_from_raw({})


def load_config_from_file(path: Path | str) -> EditorConfig:
    """
    Load and validate editor configuration from file.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If configuration is invalid
    """
    if isinstance(path, str):
        path = Path(path)

    path = path.expanduser().resolve()
    raw = load_raw_config(path)
    return build_config_from_raw(raw, path)

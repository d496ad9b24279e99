"""
Profile loading from JSON/YAML files.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Dict, Optional

from chatprofile.config.loader import parse_config_text
from chatprofile.config.models.constants import DEFAULT_AUTHOR, DEFAULT_INSTRUCTIONS

from .models import AUTHORS, IMAGE_TYPES, ImageSource, SettingsRecord


def _optional_float(raw: Dict[str, Any], key: str) -> Optional[float]:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number or null, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"'{key}' must be a finite number, got {value!r}")
    return value


def _optional_int(raw: Dict[str, Any], key: str) -> Optional[int]:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer or null, got {value!r}")
    return value


def build_image_source(raw: Any) -> Optional[ImageSource]:
    """Build an ImageSource from ``{"data": ..., "type": ...}`` or None."""
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError("'icon' must be a mapping with 'data' and 'type'")
    image_type = str(raw.get("type") or "raster").strip().lower()
    if image_type not in IMAGE_TYPES:
        raise ValueError(f"icon.type must be one of {sorted(IMAGE_TYPES)}, got '{image_type}'")
    data = raw.get("data")
    return ImageSource(data=None if data is None else str(data), type=image_type)


def build_profile_from_raw(raw: Dict[str, Any]) -> SettingsRecord:
    """
    Build a SettingsRecord from raw profile data.

    Missing optional keys are treated as "use default".
    """
    if not isinstance(raw, dict):
        raise ValueError("Profile must be a mapping")

    author = str(raw.get("author") or DEFAULT_AUTHOR).strip().lower()
    if author not in AUTHORS:
        raise ValueError(f"author must be one of {sorted(AUTHORS)}, got '{author}'")

    model = raw.get("model")
    return SettingsRecord(
        id=raw.get("id"),
        author=author,
        icon=build_image_source(raw.get("icon")),
        name=str(raw.get("name") or ""),
        description=raw.get("description", ""),
        instructions=raw.get("instructions", DEFAULT_INSTRUCTIONS),
        model=None if model in (None, "") else str(model),
        seed=_optional_int(raw, "seed"),
        temperature=_optional_float(raw, "temperature"),
        top_p=_optional_float(raw, "top_p"),
    )


def profile_to_raw(record: SettingsRecord) -> Dict[str, Any]:
    """Serialize a SettingsRecord into a JSON/YAML-friendly dict."""
    icon = None
    if record.icon is not None:
        icon = {"data": record.icon.data, "type": record.icon.type}
    return {
        "id": record.id,
        "author": record.author,
        "icon": icon,
        "name": record.name,
        "description": record.description,
        "instructions": record.instructions,
        "model": record.model,
        "seed": record.seed,
        "temperature": record.temperature,
        "top_p": record.top_p,
    }


def load_profile_from_file(path: Path | str) -> SettingsRecord:
    """
    Load a profile from a .json, .yaml, or .yml file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the content is not a valid profile
    """
    if isinstance(path, str):
        path = Path(path)

    path = path.expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {path}")
    raw = parse_config_text(path.read_text(encoding="utf-8"), path)
    return build_profile_from_raw(raw)

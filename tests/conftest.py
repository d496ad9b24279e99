"""
Shared pytest fixtures for chat profile editor tests.
"""

import base64
import json
from pathlib import Path
from typing import Any, Dict

import pytest

from chatprofile.config.models import EditorConfig
from chatprofile.profiles import EventRecorder, SettingsRecord, build_profile_from_raw


# -----------------------------------------------------------------------------
# Profile Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def sample_profile_dict() -> Dict[str, Any]:
    """Provide a raw profile with a mix of explicit and default fields."""
    return {
        "id": 1,
        "author": "user",
        "icon": None,
        "name": "Alice",
        "description": "Research helper",
        "instructions": "Answer briefly.",
        "model": None,
        "seed": 42,
        "temperature": None,
        "top_p": 0.9,
    }


@pytest.fixture
def sample_profile(sample_profile_dict: Dict[str, Any]) -> SettingsRecord:
    return build_profile_from_raw(sample_profile_dict)


@pytest.fixture
def sample_profile_file(tmp_path: Path, sample_profile_dict: Dict[str, Any]) -> Path:
    """Write the sample profile to a JSON file."""
    path = tmp_path / "alice.json"
    path.write_text(json.dumps(sample_profile_dict, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def editor_config() -> EditorConfig:
    return EditorConfig(theme="dark", models=["gpt-4o", "gpt-4o-mini"])


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


# -----------------------------------------------------------------------------
# Icon Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def svg_markup() -> str:
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16">'
        '<circle cx="8" cy="8" r="7" fill="teal"/></svg>'
    )


@pytest.fixture
def png_bytes() -> bytes:
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def png_base64(png_bytes: bytes) -> str:
    return base64.b64encode(png_bytes).decode("ascii")

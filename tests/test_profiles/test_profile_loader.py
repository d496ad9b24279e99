from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from chatprofile.config.models import EditorConfig
from chatprofile.profiles import (
    ImageSource,
    build_field_specs,
    build_profile_from_raw,
    load_profile_from_file,
    profile_to_raw,
)


def test_build_profile_from_raw(sample_profile_dict: Dict[str, Any]) -> None:
    record = build_profile_from_raw(sample_profile_dict)

    assert record.id == 1
    assert record.name == "Alice"
    assert record.seed == 42
    assert record.temperature is None
    assert record.top_p == 0.9
    assert record.icon is None


def test_missing_keys_mean_default() -> None:
    record = build_profile_from_raw({"id": "p-1", "name": "Minimal"})

    assert record.author == "user"
    assert record.instructions == "You are a helpful assistant."
    assert record.model is None
    assert record.temperature is None


def test_empty_model_string_is_default() -> None:
    assert build_profile_from_raw({"name": "x", "model": ""}).model is None


def test_icon_mapping_is_parsed() -> None:
    record = build_profile_from_raw({"name": "x", "icon": {"data": "<svg/>", "type": "Vector"}})

    assert record.icon == ImageSource(data="<svg/>", type="vector")


@pytest.mark.parametrize(
    "raw, message",
    [
        ({"author": "robot"}, "author"),
        ({"icon": "file.png"}, "icon"),
        ({"icon": {"type": "bitmap"}}, "icon.type"),
        ({"seed": "7"}, "seed"),
        ({"seed": True}, "seed"),
        ({"temperature": "hot"}, "temperature"),
        ({"temperature": float("inf")}, "finite"),
        ({"top_p": float("nan")}, "finite"),
    ],
)
def test_invalid_profiles_raise(raw: Dict[str, Any], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        build_profile_from_raw(raw)


def test_integer_temperature_is_coerced() -> None:
    record = build_profile_from_raw({"name": "x", "temperature": 1})

    assert record.temperature == 1.0
    assert isinstance(record.temperature, float)


def test_profile_to_raw_round_trips(sample_profile_dict: Dict[str, Any]) -> None:
    assert profile_to_raw(build_profile_from_raw(sample_profile_dict)) == sample_profile_dict


def test_load_profile_from_json_file(sample_profile_file: Path) -> None:
    assert load_profile_from_file(sample_profile_file).name == "Alice"


def test_load_profile_from_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "bob.yaml"
    path.write_text("id: 2\nname: Bob\ntop_p: 0.5\n", encoding="utf-8")

    record = load_profile_from_file(path)

    assert record.id == 2
    assert record.top_p == 0.5


def test_load_profile_rejects_non_finite_yaml_numbers(tmp_path: Path) -> None:
    path = tmp_path / "hot.yaml"
    path.write_text("name: Hot\ntemperature: .inf\n", encoding="utf-8")

    with pytest.raises(ValueError, match="finite"):
        load_profile_from_file(path)


def test_load_profile_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_profile_from_file(tmp_path / "missing.json")


def test_load_profile_unsupported_extension(tmp_path: Path) -> None:
    path = tmp_path / "profile.txt"
    path.write_text(json.dumps({"name": "x"}), encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported"):
        load_profile_from_file(path)


def test_field_specs_follow_config(editor_config: EditorConfig) -> None:
    specs = build_field_specs(EditorConfig(default_model="local-llm", models=["gpt-4o"]))

    assert specs["model"].default == "local-llm"
    assert specs["model"].choices == ("local-llm", "gpt-4o")
    assert specs["model"].parser("gpt-4o") == "gpt-4o"
    assert build_field_specs(editor_config)["model"].choices[0] == "gpt-4-turbo-preview"

# -*- coding: utf-8 -*-
"""Tests for config persistence and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from yamltodo.config import (
    ConfigError,
    get_default_config,
    load_config,
    save_config,
    validate_config,
)


def test_default_config_has_all_keys() -> None:
    config = get_default_config()
    assert {"todo_file", "appearance", "search", "window", "hotkeys"}.issubset(config.keys())
    validate_config(config)


def test_default_config_is_a_copy() -> None:
    config = get_default_config()
    config["hotkeys"]["save"] = "Alt+S"
    assert get_default_config()["hotkeys"]["save"] == "Ctrl+S"


def test_save_config_creates_json_file(tmp_path: Path, default_config: dict) -> None:
    target = tmp_path / "settings.json"
    save_config(default_config, target)
    assert json.loads(target.read_text(encoding="utf-8"))["todo_file"] == "todo_list.yaml"


def test_todo_file_persisted(tmp_path: Path, default_config: dict) -> None:
    target = tmp_path / "settings.json"
    default_config["todo_file"] = "conversions/shaders.yaml"
    save_config(default_config, target)
    assert load_config(target)["todo_file"] == "conversions/shaders.yaml"


def test_partial_file_is_merged_with_defaults(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text(json.dumps({"appearance": {"dark_mode": False}}), encoding="utf-8")
    loaded = load_config(target)
    assert loaded["appearance"]["dark_mode"] is False
    assert loaded["window"]["width"] == 980
    assert loaded["hotkeys"]["reload"] == "F5"


def test_load_config_returns_defaults_when_file_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path / "missing.json")
    assert loaded == get_default_config()


def test_env_file_overrides_todo_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("# local\nTODO_FILE='my_list.yaml'\n", encoding="utf-8")
    loaded = load_config(tmp_path / "settings.json")
    assert loaded["todo_file"] == "my_list.yaml"


def test_invalid_status_filter_rejected(default_config: dict) -> None:
    default_config["search"]["status_filter"] = "Pending"
    with pytest.raises(ConfigError):
        validate_config(default_config)


def test_invalid_window_size_rejected(default_config: dict) -> None:
    default_config["window"]["width"] = 50
    with pytest.raises(ConfigError):
        validate_config(default_config)


def test_empty_todo_file_rejected(default_config: dict) -> None:
    default_config["todo_file"] = " "
    with pytest.raises(ConfigError):
        save_config(default_config, Path("unused.json"))


def test_load_config_validates(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text(json.dumps({"window": {"height": "tall"}}), encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(target)

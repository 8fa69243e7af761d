# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any

from yamltodo.constants import DEFAULT_HOTKEYS, DEFAULT_SETTINGS_FILE, DEFAULT_TODO_FILE, STATUS_FILTER_MODES
from yamltodo.utils.file_utils import read_json_file, write_json_file


DEFAULT_CONFIG: dict[str, Any] = {
    "todo_file": DEFAULT_TODO_FILE,
    "appearance": {"dark_mode": True},
    "search": {"use_regex": False, "status_filter": "All"},
    "window": {"width": 980, "height": 720},
    "hotkeys": deepcopy(DEFAULT_HOTKEYS),
}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    """Apply environment-based overrides to runtime config."""
    merged = deepcopy(config)
    todo_file = env_values.get("TODO_FILE", "").strip()
    if todo_file:
        merged["todo_file"] = todo_file
    return merged


def validate_config(config: dict[str, Any]) -> None:
    """Validate the settings the application relies on."""
    todo_file = config.get("todo_file")
    if not isinstance(todo_file, str) or not todo_file.strip():
        raise ConfigError("todo_file must be a non-empty string")

    status_filter = config.get("search", {}).get("status_filter")
    if status_filter not in STATUS_FILTER_MODES:
        raise ConfigError(f"search.status_filter must be one of: {', '.join(STATUS_FILTER_MODES)}")

    for dimension in ("width", "height"):
        value = config.get("window", {}).get(dimension)
        if not isinstance(value, int) or not (200 <= value <= 10000):
            raise ConfigError(f"window.{dimension} must be an int in range 200..10000")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _load_env_file(config_path.parent / ".env")
    if not config_path.exists():
        return _apply_env_overrides(get_default_config(), env_values)

    loaded = read_json_file(config_path)
    merged = _deep_merge(get_default_config(), loaded)
    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, config)
    return config_path

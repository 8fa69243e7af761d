# -*- coding: utf-8 -*-
"""File helpers with UTF-8 defaults."""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

import yaml


def ensure_dir(path: str | Path) -> Path:
    """Create a directory if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def read_json_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON file."""
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object in {file_path}")
    return data


def write_json_file(path: str | Path, data: dict[str, Any]) -> Path:
    """Write JSON to a file with indentation."""
    file_path = Path(path)
    ensure_dir(file_path.parent)
    with file_path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, ensure_ascii=True)
        handle.write("\n")
    return file_path


def read_text_file(path: str | Path) -> str:
    """Read a UTF-8 text file."""
    file_path = Path(path)
    return file_path.read_text(encoding="utf-8")


def _match_mode(tmp_name: str, file_path: Path) -> None:
    """Give the temp file the target's mode, or the umask default for a new file."""
    if file_path.exists():
        shutil.copymode(file_path, tmp_name)
        return
    umask = os.umask(0)
    os.umask(umask)
    os.chmod(tmp_name, 0o666 & ~umask)


def write_text_atomic(path: str | Path, content: str) -> Path:
    """Write a UTF-8 text file through a temp file and rename.

    The parent directory must already exist. On failure the temp file is
    removed and the previous content of ``path`` is left untouched.
    """
    file_path = Path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{file_path.name}.", suffix=".tmp", dir=file_path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        _match_mode(tmp_name, file_path)
        os.replace(tmp_name, file_path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    return file_path


def dump_yaml(data: Any) -> str:
    """Render data as block-style YAML, keeping key order."""
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)


def read_yaml_file(path: str | Path) -> Any:
    """Read and decode a YAML file, keeping every scalar as its literal text.

    Raises ``yaml.YAMLError`` on bad content and ``UnicodeDecodeError`` on
    bytes that are not UTF-8.
    """
    return yaml.load(read_text_file(path), Loader=yaml.BaseLoader)


def write_yaml_file(path: str | Path, data: Any) -> Path:
    """Atomically write data as YAML."""
    return write_text_atomic(path, dump_yaml(data))

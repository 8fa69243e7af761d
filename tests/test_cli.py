# -*- coding: utf-8 -*-
"""Tests for the typer CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from yamltodo.cli.todo_cli import app
from yamltodo.constants import DONE_INFO
from yamltodo.models.todo_list import ToDoList


runner = CliRunner()


def _run(path: Path, *args: str):
    return runner.invoke(app, ["--file", str(path), *args])


def test_list_prints_all_items(sample_yaml_file: Path) -> None:
    result = _run(sample_yaml_file, "list")
    assert result.exit_code == 0, result.output
    assert "3f2a9c  [Shader] → res://shaders/water.gdshader (Open)" in result.output
    assert "b81d07  [Prefab] → res://scenes/crate.tscn (Done)" in result.output
    assert "2 of 2 item(s)" in result.output


def test_list_filters_by_status_and_search(sample_yaml_file: Path) -> None:
    result = _run(sample_yaml_file, "list", "--status", "Done")
    assert "b81d07" in result.output
    assert "3f2a9c" not in result.output

    result = _run(sample_yaml_file, "list", "--search", "water")
    assert "3f2a9c" in result.output
    assert "b81d07" not in result.output


def test_list_status_is_case_insensitive(sample_yaml_file: Path) -> None:
    result = _run(sample_yaml_file, "list", "--status", "done")
    assert result.exit_code == 0, result.output
    assert "b81d07" in result.output
    assert "3f2a9c" not in result.output


def test_list_custom_status(sample_yaml_file: Path) -> None:
    _run(sample_yaml_file, "set-status", "3f2a9c", "Blocked")
    result = _run(sample_yaml_file, "list", "--status", "Block")
    assert "3f2a9c" in result.output
    assert "b81d07" not in result.output


def test_list_reports_bad_regex(sample_yaml_file: Path) -> None:
    result = _run(sample_yaml_file, "list", "--search", "(", "--regex")
    assert result.exit_code == 1
    assert "Regex error" in result.output


def test_show_prints_yaml(sample_yaml_file: Path) -> None:
    result = _run(sample_yaml_file, "show", "b81d07")
    assert result.exit_code == 0
    assert "owner: sam" in result.output


def test_show_unknown_guid(sample_yaml_file: Path) -> None:
    result = _run(sample_yaml_file, "show", "missing")
    assert result.exit_code == 1
    assert "missing" in result.output


def test_done_sets_status_and_default_info(sample_yaml_file: Path) -> None:
    result = _run(sample_yaml_file, "done", "3f2a9c")
    assert result.exit_code == 0, result.output
    item = ToDoList.load_from_file(sample_yaml_file).get("3f2a9c")
    assert item.status() == "Done"
    assert item.get("info") == DONE_INFO


def test_fail_and_reopen(sample_yaml_file: Path) -> None:
    _run(sample_yaml_file, "fail", "b81d07", "--info", "missing bones")
    item = ToDoList.load_from_file(sample_yaml_file).get("b81d07")
    assert item.status() == "Failed"
    assert item.get("info") == "missing bones"

    _run(sample_yaml_file, "reopen", "b81d07")
    assert ToDoList.load_from_file(sample_yaml_file).get("b81d07").status() == "Open"


def test_status_change_on_unknown_guid_fails_without_writing(sample_yaml_file: Path) -> None:
    before = sample_yaml_file.read_text(encoding="utf-8")
    result = _run(sample_yaml_file, "done", "nope")
    assert result.exit_code == 1
    assert sample_yaml_file.read_text(encoding="utf-8") == before


def test_add_creates_file(tmp_path: Path) -> None:
    target = tmp_path / "new.yaml"
    result = _run(
        target,
        "add", "c0ffee", "Material",
        "--unity-path", "Assets/M.mat",
        "--godot-path", "res://m.tres",
        "--instruction", "Use StandardMaterial3D",
        "--field", "owner=kim",
    )
    assert result.exit_code == 0, result.output
    item = ToDoList.load_from_file(target).get("c0ffee")
    assert item.get("owner") == "kim"
    assert item.status() == "Open"


def test_add_missing_required_key(tmp_path: Path) -> None:
    target = tmp_path / "new.yaml"
    result = _run(target, "add", "c0ffee", "Shader", "--unity-path", "a", "--godot-path", "b")
    assert result.exit_code == 1
    assert "instruction" in result.output
    assert not target.exists()


def test_add_refuses_duplicate_without_force(sample_yaml_file: Path) -> None:
    args = ("add", "b81d07", "Script", "--unity-path", "a.cs", "--godot-path", "a.gd")
    result = _run(sample_yaml_file, *args)
    assert result.exit_code == 1
    assert ToDoList.load_from_file(sample_yaml_file).get("b81d07").kind.value == "Prefab"

    result = _run(sample_yaml_file, *args, "--force")
    assert result.exit_code == 0
    assert ToDoList.load_from_file(sample_yaml_file).get("b81d07").kind.value == "Script"


def test_remove(sample_yaml_file: Path) -> None:
    result = _run(sample_yaml_file, "remove", "3f2a9c")
    assert result.exit_code == 0
    assert list(ToDoList.load_from_file(sample_yaml_file)) == ["b81d07"]


def test_summary(sample_yaml_file: Path) -> None:
    result = _run(sample_yaml_file, "summary")
    assert "Done: 1" in result.output
    assert "Open: 1" in result.output
    assert "Total: 2" in result.output


def test_load_error_exits_with_code_one(tmp_path: Path) -> None:
    result = _run(tmp_path / "missing.yaml", "list")
    assert result.exit_code == 1
    assert "Failed to load" in result.output


def test_non_utf8_file_exits_with_code_one(tmp_path: Path) -> None:
    target = tmp_path / "garbage.yaml"
    target.write_bytes(b"\xff\xfe\x00garbage")
    result = _run(target, "list")
    assert result.exit_code == 1
    assert "Invalid encoding" in result.output


def test_default_file_comes_from_settings(tmp_path: Path, sample_yaml_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "settings.json").write_text(json.dumps({"todo_file": sample_yaml_file.name}), encoding="utf-8")
    result = runner.invoke(app, ["summary"])
    assert result.exit_code == 0, result.output
    assert "Total: 2" in result.output

# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


SAMPLE_YAML = """\
todo_list:
  3f2a9c:
    type: Shader
    unity_path: Assets/Shaders/Water.shader
    godot_path: res://shaders/water.gdshader
    instruction: Port the foam pass to a visual shader
    status: Open
    reason: New conversion task
    info: ''
  b81d07:
    type: Prefab
    unity_path: Assets/Prefabs/Crate.prefab
    godot_path: res://scenes/crate.tscn
    status: Done
    reason: New conversion task
    info: Checked in editor
    owner: sam
"""


@pytest.fixture
def shader_item():
    from yamltodo.models.todo_item import ToDoItem

    return ToDoItem(
        "Shader",
        [
            ("unity_path", "Assets/Shaders/Water.shader"),
            ("godot_path", "res://shaders/water.gdshader"),
            ("instruction", "Port the foam pass to a visual shader"),
        ],
    )


@pytest.fixture
def prefab_item():
    from yamltodo.models.todo_item import ToDoItem

    return ToDoItem(
        "Prefab",
        {"unity_path": "Assets/Prefabs/Crate.prefab", "godot_path": "res://scenes/crate.tscn"},
    )


@pytest.fixture
def sample_list(shader_item, prefab_item):
    from yamltodo.models.todo_list import ToDoList

    todo_list = ToDoList()
    todo_list.insert("3f2a9c", shader_item)
    todo_list.insert("b81d07", prefab_item)
    return todo_list


@pytest.fixture
def sample_yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "todo_list.yaml"
    path.write_text(SAMPLE_YAML, encoding="utf-8")
    return path


@pytest.fixture
def default_config() -> dict:
    from yamltodo.config import get_default_config

    return get_default_config()


@pytest.fixture
def qt_app():
    QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app

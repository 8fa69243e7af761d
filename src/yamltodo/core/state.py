# -*- coding: utf-8 -*-
"""Application state container for the GUI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from yamltodo.constants import DEFAULT_TODO_FILE
from yamltodo.core.search import ALL, StatusFilter
from yamltodo.models.todo_item import ToDoItem
from yamltodo.models.todo_list import ToDoList


@dataclass
class AppState:
    """Mutable app state shared by GUI components."""

    todo_path: Path = field(default_factory=lambda: Path(DEFAULT_TODO_FILE))
    todo_list: ToDoList = field(default_factory=ToDoList)
    search: str = ""
    use_regex: bool = False
    status_filter: StatusFilter = ALL
    dark_mode: bool = True
    filtered: list[tuple[str, ToDoItem]] = field(default_factory=list)
    last_error: str | None = None
    settings: dict[str, Any] = field(default_factory=dict)

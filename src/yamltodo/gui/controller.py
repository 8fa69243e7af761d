# -*- coding: utf-8 -*-
"""Controller connecting the to-do model with the main window."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from yamltodo.core.search import StatusFilter, filter_items
from yamltodo.core.state import AppState
from yamltodo.errors import SearchError, TodoError
from yamltodo.models.todo_list import ToDoList

logger = logging.getLogger(__name__)


class TodoController(QObject):
    """
    Owns the loaded list and the current search.
    Errors are reported through ``error_occurred`` instead of being raised.
    """

    list_loaded = pyqtSignal(int)
    results_changed = pyqtSignal(list)
    error_occurred = pyqtSignal(str)
    status_message = pyqtSignal(str)

    def __init__(self, settings: dict[str, Any], state: AppState | None = None) -> None:
        super().__init__()
        self.state = state or AppState()
        self.state.settings = settings
        if state is None:
            self.state.todo_path = Path(settings.get("todo_file", self.state.todo_path))
            self.state.dark_mode = bool(settings.get("appearance", {}).get("dark_mode", True))
            search_settings = settings.get("search", {})
            self.state.use_regex = bool(search_settings.get("use_regex", False))
            self.state.status_filter = StatusFilter(search_settings.get("status_filter", "All"))

    @property
    def todo_list(self) -> ToDoList:
        return self.state.todo_list

    def set_path(self, path: str | Path) -> None:
        self.state.todo_path = Path(path)

    def load_path(self) -> bool:
        """Load the list from the current path. Returns whether it succeeded."""
        path = self.state.todo_path
        try:
            todo_list = ToDoList.load_from_file(path)
        except (TodoError, OSError) as exc:
            logger.error("Failed to load %s: %s", path, exc)
            self._report_error(f"Failed to load: {exc}")
            return False

        self.state.todo_list = todo_list
        self.state.filtered = []
        self.state.last_error = None
        self.list_loaded.emit(len(todo_list))
        self.status_message.emit(f"Loaded {len(todo_list)} item(s) from {path}")
        self.run_search()
        return True

    def save_path(self) -> bool:
        """Save the list to the current path. Returns whether it succeeded."""
        path = self.state.todo_path
        if not str(path).strip():
            return False
        try:
            self.state.todo_list.save_to_file(path)
        except OSError as exc:
            logger.error("Save failed for %s: %s", path, exc)
            self._report_error(f"Save failed: {exc}")
            return False
        self.status_message.emit(f"Saved {len(self.state.todo_list)} item(s) to {path}")
        return True

    def set_search(self, search: str, use_regex: bool) -> None:
        self.state.search = search
        self.state.use_regex = use_regex

    def set_status_filter(self, status_filter: StatusFilter) -> None:
        self.state.status_filter = status_filter

    def run_search(self) -> list:
        """Recompute the filtered results and emit them."""
        try:
            results = filter_items(
                self.state.todo_list,
                search=self.state.search,
                use_regex=self.state.use_regex,
                status_filter=self.state.status_filter,
            )
        except SearchError as exc:
            self.state.filtered = []
            self._report_error(f"Regex error: {exc}")
            self.results_changed.emit([])
            return []

        self.state.last_error = None
        self.state.filtered = results
        self.results_changed.emit(results)
        return results

    def mark_done(self, guid: str) -> None:
        self._change_status(guid, "mark_done")

    def mark_failed(self, guid: str) -> None:
        self._change_status(guid, "mark_failed")

    def reopen(self, guid: str) -> None:
        self._change_status(guid, "reopen")

    def _change_status(self, guid: str, action: str) -> None:
        try:
            item = self.state.todo_list.get(guid)
        except TodoError as exc:
            self._report_error(str(exc))
            return
        getattr(item, action)()
        logger.info("Item %s is now %s", guid, item.status())
        self.status_message.emit(f"{guid}: {item}")
        self.run_search()

    def _report_error(self, message: str) -> None:
        self.state.last_error = message
        self.error_occurred.emit(message)

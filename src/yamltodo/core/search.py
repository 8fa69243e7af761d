# -*- coding: utf-8 -*-
"""Text/regex search and status filtering over a to-do list."""

from __future__ import annotations

import re
from dataclasses import dataclass

from yamltodo.constants import STATUS_FILTER_MODES
from yamltodo.errors import SearchError
from yamltodo.models.todo_item import ToDoItem
from yamltodo.models.todo_list import ToDoList


@dataclass(frozen=True)
class StatusFilter:
    """Status predicate used by the list views."""

    mode: str = "All"
    custom: str = ""

    def __post_init__(self) -> None:
        if self.mode not in STATUS_FILTER_MODES:
            raise ValueError(f"Unknown status filter {self.mode!r}")

    def matches(self, status: str) -> bool:
        if self.mode == "All":
            return True
        if self.mode == "Custom":
            return self.custom in status
        return status.lower() == self.mode.lower()

    def label(self) -> str:
        if self.mode == "Custom":
            return f"Custom({self.custom})"
        return self.mode


ALL = StatusFilter()


def compile_query(search: str, use_regex: bool) -> re.Pattern[str] | None:
    """Compile ``search`` when regex mode is on."""
    if not use_regex:
        return None
    try:
        return re.compile(search)
    except re.error as exc:
        raise SearchError(str(exc)) from exc


def _haystack(item: ToDoItem, guid: str) -> str:
    return f"{item}\nGUID:{guid}\nYAML:{item.to_document()!r}"


def matches_query(item: ToDoItem, guid: str, search: str, pattern: re.Pattern[str] | None = None) -> bool:
    """Return whether an item matches the search text or pattern."""
    if not search:
        return True
    hay = _haystack(item, guid)
    if pattern is not None:
        return pattern.search(hay) is not None
    return search.lower() in hay.lower()


def filter_items(
    todo_list: ToDoList,
    search: str = "",
    use_regex: bool = False,
    status_filter: StatusFilter = ALL,
) -> list[tuple[str, ToDoItem]]:
    """Return ``(guid, item)`` pairs passing both the status filter and the query."""
    pattern = compile_query(search, use_regex) if search else None
    results: list[tuple[str, ToDoItem]] = []
    for guid, item in todo_list.items.items():
        if not status_filter.matches(item.status()):
            continue
        if matches_query(item, guid, search, pattern):
            results.append((guid, item))
    return results

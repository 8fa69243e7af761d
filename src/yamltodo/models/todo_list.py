# -*- coding: utf-8 -*-
"""GUID-keyed collection of to-do items with YAML persistence."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml

from yamltodo.constants import DONE_INFO, FAILED_INFO, STATUS_DONE, STATUS_FAILED, STATUS_OPEN, TODO_LIST_KEY
from yamltodo.errors import NotFoundError, ParseError, ValidationError
from yamltodo.models.todo_item import ToDoItem
from yamltodo.utils.file_utils import read_yaml_file, write_yaml_file

logger = logging.getLogger(__name__)


class ToDoList:
    """Mapping from GUID to an owned ``ToDoItem``."""

    def __init__(self, items: Mapping[str, ToDoItem] | None = None) -> None:
        self.items: dict[str, ToDoItem] = dict(items or {})

    def insert(self, guid: str, item: ToDoItem) -> None:
        """Insert or replace the item stored under ``guid``."""
        self.items[guid] = item

    def insert_if_absent(self, guid: str, item: ToDoItem) -> bool:
        """Insert only when ``guid`` is new. Returns whether it was inserted."""
        if guid in self.items:
            return False
        self.items[guid] = item
        return True

    def contains(self, guid: str) -> bool:
        return guid in self.items

    def get(self, guid: str) -> ToDoItem:
        try:
            return self.items[guid]
        except KeyError:
            raise NotFoundError(guid) from None

    def remove(self, guid: str) -> ToDoItem:
        item = self.get(guid)
        del self.items[guid]
        return item

    def update_status(self, guid: str, status: str, info: str) -> None:
        item = self.get(guid)
        item.set_status(status)
        item.set_info(info)

    def mark_done(self, guid: str, info: str = DONE_INFO) -> None:
        self.update_status(guid, STATUS_DONE, info)

    def mark_failed(self, guid: str, info: str = FAILED_INFO) -> None:
        self.update_status(guid, STATUS_FAILED, info)

    def reopen(self, guid: str, info: str = "") -> None:
        self.update_status(guid, STATUS_OPEN, info)

    def counts_by_status(self) -> dict[str, int]:
        """Count items per status value."""
        return dict(Counter(item.status() for item in self.items.values()))

    def to_document(self) -> dict[str, Any]:
        return {TODO_LIST_KEY: {guid: item.to_document() for guid, item in self.items.items()}}

    @classmethod
    def from_document(cls, node: Any, strict: bool = True) -> "ToDoList":
        """Build a list from a decoded YAML document.

        With ``strict`` set, the first invalid entry aborts loading. Otherwise
        invalid entries are logged and skipped.
        """
        if not isinstance(node, Mapping):
            raise ParseError(f"Expected a mapping at the document root, got {type(node).__name__}")
        if TODO_LIST_KEY not in node:
            raise ParseError(f"Missing root key {TODO_LIST_KEY!r}")
        entries = node[TODO_LIST_KEY]
        if entries is None or entries == "":
            entries = {}
        if not isinstance(entries, Mapping):
            raise ParseError(f"{TODO_LIST_KEY!r} must be a mapping, got {type(entries).__name__}")

        todo_list = cls()
        for raw_guid, entry in entries.items():
            guid = str(raw_guid)
            try:
                item = ToDoItem.from_document(entry)
            except ValidationError as exc:
                if strict:
                    raise exc.with_guid(guid) from exc
                logger.warning("Skipping invalid to-do item %s: %s", guid, exc)
                continue
            except ParseError as exc:
                if strict:
                    raise exc.with_context(guid=guid) from exc
                logger.warning("Skipping malformed to-do item %s: %s", guid, exc)
                continue
            todo_list.insert(guid, item)
        return todo_list

    def save_to_file(self, path: str | Path) -> Path:
        """Write the list as YAML. The previous file survives a failed write."""
        target = write_yaml_file(path, self.to_document())
        logger.info("Saved %d to-do item(s) to %s", len(self.items), target)
        return target

    @classmethod
    def load_from_file(cls, path: str | Path, strict: bool = True) -> "ToDoList":
        """Read a YAML to-do list. Raises ``OSError``, ``ParseError`` or ``ValidationError``."""
        file_path = Path(path)
        try:
            document = read_yaml_file(file_path)
        except yaml.YAMLError as exc:
            raise ParseError(f"Invalid YAML: {exc}", path=file_path) from exc
        except UnicodeDecodeError as exc:
            raise ParseError(f"Invalid encoding: {exc}", path=file_path) from exc
        try:
            todo_list = cls.from_document(document, strict=strict)
        except ParseError as exc:
            raise exc.with_context(path=file_path) from exc
        logger.info("Loaded %d to-do item(s) from %s", len(todo_list), file_path)
        return todo_list

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, guid: object) -> bool:
        return guid in self.items

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ToDoList):
            return NotImplemented
        return self.items == other.items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ToDoList({len(self.items)} items)"

# -*- coding: utf-8 -*-
"""To-do item data model."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from yamltodo.constants import DEFAULT_FIELDS, STATUS_DONE, STATUS_FAILED, STATUS_OPEN
from yamltodo.errors import ParseError, ValidationError


class ItemKind(str, Enum):
    """Asset kinds a conversion task can refer to."""

    SHADER = "Shader"
    MATERIAL = "Material"
    PREFAB = "Prefab"
    ANIMATION = "Animation"
    SCRIPT = "Script"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: Any) -> "ItemKind":
        """Return the kind for ``value`` or raise ``ValidationError``."""
        if isinstance(value, ItemKind):
            return value
        try:
            return cls(str(value))
        except ValueError:
            names = ", ".join(kind.value for kind in cls)
            raise ValidationError(f"Unknown item type {value!r}; expected one of: {names}", kind=str(value)) from None

    @property
    def required_keys(self) -> tuple[str, ...]:
        return REQUIRED_KEYS[self]

    def __str__(self) -> str:
        return self.value


_PATH_KEYS = ("unity_path", "godot_path")

REQUIRED_KEYS: dict[ItemKind, tuple[str, ...]] = {
    ItemKind.SHADER: (*_PATH_KEYS, "instruction"),
    ItemKind.MATERIAL: (*_PATH_KEYS, "instruction"),
    ItemKind.PREFAB: _PATH_KEYS,
    ItemKind.ANIMATION: _PATH_KEYS,
    ItemKind.SCRIPT: _PATH_KEYS,
    ItemKind.OTHER: _PATH_KEYS,
}


def _to_field_value(key: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (Mapping, list, tuple, set)):
        raise ParseError(f"Field {key!r} must be a scalar value, got {type(value).__name__}")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _missing_keys(kind: ItemKind, fields: Mapping[str, str]) -> tuple[str, ...]:
    return tuple(key for key in kind.required_keys if not fields.get(key))


class ToDoItem:
    """A single conversion task: a kind plus an open-ended string mapping.

    ``fields`` always holds ``type`` (mirroring ``kind``), ``status``,
    ``reason`` and ``info`` alongside the kind's required keys. Unknown keys
    are kept as they are. Required keys are checked on construction and
    parsing only; mutators do not re-validate.
    """

    __slots__ = ("_kind", "fields")

    def __init__(self, kind: ItemKind | str, fields: Mapping[str, Any] | Iterable[tuple[str, Any]] = ()) -> None:
        self._kind = ItemKind.parse(kind)
        pairs = fields.items() if isinstance(fields, Mapping) else fields
        merged: dict[str, str] = {"type": self._kind.value}
        for key, value in pairs:
            if key == "type":
                continue
            merged[str(key)] = _to_field_value(str(key), value)
        for key, default in DEFAULT_FIELDS.items():
            merged.setdefault(key, default)

        missing = _missing_keys(self._kind, merged)
        if missing:
            raise ValidationError(
                f"Missing required key(s) for {self._kind.value}: {', '.join(missing)}",
                kind=self._kind.value,
                missing=missing,
            )
        self.fields = merged

    @classmethod
    def from_document(cls, node: Any) -> "ToDoItem":
        """Build an item from a decoded YAML mapping."""
        if not isinstance(node, Mapping):
            raise ParseError(f"Expected a mapping for a to-do item, got {type(node).__name__}")
        if node.get("type") in (None, ""):
            raise ValidationError("Missing required key: type", missing=("type",))
        kind = ItemKind.parse(node["type"])
        return cls(kind, {str(key): value for key, value in node.items()})

    def to_document(self) -> dict[str, str]:
        """Return the field mapping as a plain dict."""
        return dict(self.fields)

    @property
    def kind(self) -> ItemKind:
        return self._kind

    def get(self, key: str) -> str | None:
        return self.fields.get(key)

    def status(self) -> str:
        return self.fields.get("status", STATUS_OPEN)

    def set_status(self, status: str) -> None:
        self.fields["status"] = status

    def mark_done(self) -> None:
        self.set_status(STATUS_DONE)

    def mark_failed(self) -> None:
        self.set_status(STATUS_FAILED)

    def reopen(self) -> None:
        self.set_status(STATUS_OPEN)

    def set_info(self, message: str) -> None:
        self.fields["info"] = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ToDoItem):
            return NotImplemented
        return self.fields == other.fields

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        godot_path = self.fields.get("godot_path") or "<no path>"
        return f"[{self._kind.value}] → {godot_path} ({self.status()})"

    def __repr__(self) -> str:
        return f"ToDoItem({self._kind.value!r}, {self.fields!r})"

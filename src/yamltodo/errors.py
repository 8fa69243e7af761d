# -*- coding: utf-8 -*-
"""Exception types raised by the to-do model."""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for to-do model errors."""


class ValidationError(TodoError, ValueError):
    """Raised when an item has an unknown kind or lacks required keys."""

    def __init__(
        self,
        message: str,
        *,
        kind: str | None = None,
        missing: tuple[str, ...] = (),
        guid: str | None = None,
    ) -> None:
        self.message = message
        self.kind = kind
        self.missing = tuple(missing)
        self.guid = guid
        super().__init__(self._render())

    def _render(self) -> str:
        if self.guid is None:
            return self.message
        return f"{self.message} (guid: {self.guid})"

    def with_guid(self, guid: str) -> "ValidationError":
        """Return a copy of this error tagged with the offending GUID."""
        return ValidationError(self.message, kind=self.kind, missing=self.missing, guid=guid)


class NotFoundError(TodoError, LookupError):
    """Raised when a GUID is not present in the list."""

    def __init__(self, guid: str) -> None:
        self.guid = guid
        super().__init__(f"No to-do item with guid {guid!r}")


class ParseError(TodoError, ValueError):
    """Raised when a document is not shaped like a to-do list."""

    def __init__(self, message: str, *, path: str | Path | None = None, guid: str | None = None) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        self.guid = guid
        super().__init__(self._render())

    def _render(self) -> str:
        text = self.message
        if self.guid is not None:
            text = f"{text} (guid: {self.guid})"
        if self.path is not None:
            text = f"{self.path}: {text}"
        return text

    def with_context(self, *, path: str | Path | None = None, guid: str | None = None) -> "ParseError":
        """Return a copy carrying the given path and/or GUID."""
        return ParseError(
            self.message,
            path=path if path is not None else self.path,
            guid=guid if guid is not None else self.guid,
        )


class SearchError(TodoError):
    """Raised when a search expression cannot be compiled."""

# -*- coding: utf-8 -*-
"""CLI commands for inspecting and editing a YAML to-do list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from yamltodo.config import ConfigError, load_config
from yamltodo.constants import KNOWN_STATUSES
from yamltodo.core.search import StatusFilter, filter_items
from yamltodo.errors import TodoError
from yamltodo.models.todo_item import ToDoItem
from yamltodo.models.todo_list import ToDoList
from yamltodo.utils.file_utils import dump_yaml

app = typer.Typer(help="Manage YAML conversion to-do lists")
logger = logging.getLogger(__name__)

_state: dict[str, Path | None] = {"file": None}


@app.callback()
def main(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="To-do YAML file (default: todo_file from settings.json)"),
    verbose: bool = typer.Option(False, help="Verbose output"),
) -> None:
    """Manage YAML conversion to-do lists."""
    if verbose:
        logging.basicConfig(level=logging.INFO)
    _state["file"] = file


def _todo_path() -> Path:
    if _state["file"] is not None:
        return _state["file"]
    try:
        return Path(load_config()["todo_file"])
    except (ConfigError, OSError, ValueError) as exc:
        _fail(f"Could not read settings: {exc}")


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _load(path: Path, create: bool = False) -> ToDoList:
    if create and not path.exists():
        return ToDoList()
    try:
        return ToDoList.load_from_file(path)
    except (TodoError, OSError) as exc:
        logger.error("Failed to load %s: %s", path, exc)
        _fail(f"Failed to load {path}: {exc}")


def _save(todo_list: ToDoList, path: Path) -> None:
    try:
        todo_list.save_to_file(path)
    except OSError as exc:
        logger.error("Failed to save %s: %s", path, exc)
        _fail(f"Failed to save {path}: {exc}")


def _update(guid: str, apply) -> ToDoItem:
    path = _todo_path()
    todo_list = _load(path)
    try:
        apply(todo_list)
        item = todo_list.get(guid)
    except TodoError as exc:
        _fail(str(exc))
    _save(todo_list, path)
    return item


@app.command("list")
def list_items(
    search: str = typer.Option("", help="Text (or regex with --regex) to search for"),
    regex: bool = typer.Option(False, help="Treat --search as a regular expression"),
    status: str = typer.Option("All", help="Status filter: All, Open, Done, Failed or any custom text"),
) -> None:
    """List items matching a search and status filter."""
    todo_list = _load(_todo_path())
    normalized = status.capitalize()
    if normalized == "All" or normalized in KNOWN_STATUSES:
        status_filter = StatusFilter(normalized)
    else:
        status_filter = StatusFilter("Custom", status)
    try:
        results = filter_items(todo_list, search=search, use_regex=regex, status_filter=status_filter)
    except TodoError as exc:
        _fail(f"Regex error: {exc}")

    if not results:
        typer.echo("No matching items.")
        return
    for guid, item in results:
        typer.echo(f"{guid}  {item}")
    typer.echo(f"\n{len(results)} of {len(todo_list)} item(s)")


@app.command()
def show(guid: str = typer.Argument(..., help="Item GUID")) -> None:
    """Print one item as YAML."""
    todo_list = _load(_todo_path())
    try:
        item = todo_list.get(guid)
    except TodoError as exc:
        _fail(str(exc))
    typer.echo(dump_yaml({guid: item.to_document()}).rstrip())


@app.command()
def add(
    guid: str = typer.Argument(..., help="Item GUID"),
    kind: str = typer.Argument(..., help="Shader, Material, Prefab, Animation, Script or Other"),
    unity_path: str = typer.Option("", help="Source asset path in the Unity project"),
    godot_path: str = typer.Option("", help="Target asset path in the Godot project"),
    instruction: str = typer.Option("", help="Conversion instruction (required for Shader/Material)"),
    field: list[str] = typer.Option([], help="Extra KEY=VALUE field, repeatable"),
    force: bool = typer.Option(False, help="Replace an existing item with the same GUID"),
) -> None:
    """Add a new conversion task."""
    fields: dict[str, str] = {}
    for key, value in (("unity_path", unity_path), ("godot_path", godot_path), ("instruction", instruction)):
        if value:
            fields[key] = value
    for raw in field:
        if "=" not in raw:
            _fail(f"Invalid --field {raw!r}, expected KEY=VALUE")
        key, value = raw.split("=", 1)
        fields[key.strip()] = value

    try:
        item = ToDoItem(kind, fields)
    except TodoError as exc:
        _fail(str(exc))

    path = _todo_path()
    todo_list = _load(path, create=True)
    if force:
        todo_list.insert(guid, item)
    elif not todo_list.insert_if_absent(guid, item):
        _fail(f"Item {guid!r} already exists (use --force to replace it)")
    _save(todo_list, path)
    typer.echo(f"Added {guid}  {item}")


@app.command()
def done(
    guid: str = typer.Argument(..., help="Item GUID"),
    info: Optional[str] = typer.Option(None, help="Info message (default: verification note)"),
) -> None:
    """Mark an item as Done."""
    if info is None:
        item = _update(guid, lambda todo_list: todo_list.mark_done(guid))
    else:
        item = _update(guid, lambda todo_list: todo_list.mark_done(guid, info))
    typer.echo(f"{guid}  {item}")


@app.command()
def fail(
    guid: str = typer.Argument(..., help="Item GUID"),
    info: str = typer.Option("", help="Why the conversion failed"),
) -> None:
    """Mark an item as Failed."""
    item = _update(guid, lambda todo_list: todo_list.mark_failed(guid, info))
    typer.echo(f"{guid}  {item}")


@app.command()
def reopen(guid: str = typer.Argument(..., help="Item GUID")) -> None:
    """Set an item back to Open."""
    item = _update(guid, lambda todo_list: todo_list.reopen(guid))
    typer.echo(f"{guid}  {item}")


@app.command("set-status")
def set_status(
    guid: str = typer.Argument(..., help="Item GUID"),
    status: str = typer.Argument(..., help="New status (free-form)"),
    info: str = typer.Option("", help="Info message"),
) -> None:
    """Set an arbitrary status and info message."""
    item = _update(guid, lambda todo_list: todo_list.update_status(guid, status, info))
    typer.echo(f"{guid}  {item}")


@app.command()
def remove(guid: str = typer.Argument(..., help="Item GUID")) -> None:
    """Delete an item from the list."""
    path = _todo_path()
    todo_list = _load(path)
    try:
        item = todo_list.remove(guid)
    except TodoError as exc:
        _fail(str(exc))
    _save(todo_list, path)
    typer.echo(f"Removed {guid}  {item}")


@app.command()
def summary() -> None:
    """Print item counts per status."""
    todo_list = _load(_todo_path())
    counts = todo_list.counts_by_status()
    for status, count in sorted(counts.items()):
        typer.echo(f"{status}: {count}")
    typer.echo(f"Total: {len(todo_list)}")


if __name__ == "__main__":
    app()

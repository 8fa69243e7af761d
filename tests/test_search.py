# -*- coding: utf-8 -*-
"""Tests for search and status filtering."""

from __future__ import annotations

import pytest

from yamltodo.core.search import ALL, StatusFilter, compile_query, filter_items, matches_query
from yamltodo.errors import SearchError
from yamltodo.models.todo_list import ToDoList


def _guids(results) -> list[str]:
    return [guid for guid, _ in results]


def test_status_filter_all_matches_everything() -> None:
    assert ALL.matches("Open")
    assert ALL.matches("anything")


def test_status_filter_is_case_insensitive() -> None:
    assert StatusFilter("Done").matches("done")
    assert StatusFilter("Failed").matches("FAILED")
    assert not StatusFilter("Open").matches("Done")


def test_custom_filter_matches_substring() -> None:
    status_filter = StatusFilter("Custom", "Block")
    assert status_filter.matches("Blocked")
    assert not status_filter.matches("blocked")
    assert status_filter.label() == "Custom(Block)"


def test_unknown_filter_mode_rejected() -> None:
    with pytest.raises(ValueError):
        StatusFilter("Pending")


def test_compile_query_plain_text_returns_none() -> None:
    assert compile_query("water", use_regex=False) is None


def test_compile_query_invalid_regex_raises() -> None:
    with pytest.raises(SearchError):
        compile_query("(unclosed", use_regex=True)


def test_empty_search_matches(shader_item) -> None:
    assert matches_query(shader_item, "3f2a9c", "")


def test_plain_search_is_case_insensitive(shader_item) -> None:
    assert matches_query(shader_item, "3f2a9c", "WATER")
    assert not matches_query(shader_item, "3f2a9c", "crate")


def test_search_covers_guid_and_extra_fields(shader_item) -> None:
    shader_item.fields["owner"] = "sam"
    assert matches_query(shader_item, "3f2a9c", "guid:3f2a")
    assert matches_query(shader_item, "3f2a9c", "sam")


def test_regex_search(shader_item) -> None:
    pattern = compile_query(r"\[Shader\] → res://", use_regex=True)
    assert matches_query(shader_item, "3f2a9c", "ignored", pattern)


def test_filter_items_by_text(sample_list: ToDoList) -> None:
    assert _guids(filter_items(sample_list, search="crate")) == ["b81d07"]


def test_filter_items_by_status(sample_list: ToDoList) -> None:
    sample_list.mark_done("b81d07")
    assert _guids(filter_items(sample_list, status_filter=StatusFilter("Done"))) == ["b81d07"]
    assert _guids(filter_items(sample_list, status_filter=StatusFilter("Open"))) == ["3f2a9c"]


def test_filter_items_keeps_list_order(sample_list: ToDoList) -> None:
    assert _guids(filter_items(sample_list)) == ["3f2a9c", "b81d07"]


def test_filter_items_with_regex(sample_list: ToDoList) -> None:
    results = filter_items(sample_list, search=r"^\[Prefab\]", use_regex=True)
    assert _guids(results) == ["b81d07"]


def test_filter_items_invalid_regex(sample_list: ToDoList) -> None:
    with pytest.raises(SearchError):
        filter_items(sample_list, search="[", use_regex=True)

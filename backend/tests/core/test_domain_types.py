"""Domain Types: verifies identifier parsing and enum values.

Tests:
    - parse_todo_id accepts UUID strings and returns None for anything else
    - Category holds exactly the four legal categories
"""

from uuid import uuid4

import pytest

from todo_api.core.domain_types import (
    Category, FilterField, SortDirection, TodoId, parse_todo_id,
)


def test_parse_todo_id_accepts_uuid_string():
    uid = uuid4()
    assert parse_todo_id(str(uid)) == TodoId(uid)


def test_parse_todo_id_accepts_hex_form():
    uid = uuid4()
    assert parse_todo_id(uid.hex) == uid


@pytest.mark.parametrize(
    "raw", ["not-an-id", "", "588935f57546a2daea44de7c", "12345"],
)
def test_parse_todo_id_rejects_malformed(raw):
    assert parse_todo_id(raw) is None


def test_category_has_four_members():
    assert {c.value for c in Category} == {
        "video games", "homework", "groceries", "software design",
    }


def test_filter_fields():
    assert [f.value for f in FilterField] == ["status", "category"]


def test_sort_direction_values():
    assert SortDirection("ascending") is SortDirection.ASCENDING
    assert SortDirection("descending") is SortDirection.DESCENDING

"""Todo Filter Builder: turns raw query parameters into a validated TodoQuery.

Invariants:
    - parse_todo_query is PURE: no IO, no store access, no mutation of its input
    - Any malformed parameter aborts the whole parse (no partial predicate)
    - Predicate clauses only reference FilterField members; empty predicate matches all
    - limit is None when absent (shell fills it with the store count), else 1..MAX_LIMIT
    - Unrecognized sortorder strings silently mean ascending

Design Decisions:
    - Frozen dataclass TodoQuery: request-scoped value object, never shared across requests
    - Category validated by enum membership, not regex
    - Default limit resolved by the shell: the count query is IO and stays out of core
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace

from todo_api.core.domain_types import Category, FilterField, SortDirection
from todo_api.core.errors import FilterValidationError


STATUS_KEY = "status"
CATEGORY_KEY = "category"
SORT_BY_KEY = "sortby"
SORT_ORDER_KEY = "sortorder"
LIMIT_KEY = "limit"

DEFAULT_SORT_FIELD = "owner"
DESCENDING_TOKEN = "desc"
MAX_LIMIT = 2**31 - 1

_BOOLEAN_LITERALS = {"true": True, "false": False}


@dataclass(frozen=True)
class TodoQuery:
    """Predicate + sort + row cap for one collection fetch."""
    predicate: tuple[tuple[FilterField, bool | Category], ...] = ()
    sort_field: str = DEFAULT_SORT_FIELD
    sort_direction: SortDirection = SortDirection.ASCENDING
    limit: int | None = None

    def with_limit(self, limit: int) -> "TodoQuery":
        return replace(self, limit=limit)


def parse_todo_query(params: Mapping[str, str]) -> TodoQuery:
    """Validate every recognized parameter and combine them into a TodoQuery."""
    predicate = []
    if STATUS_KEY in params:
        predicate.append((FilterField.STATUS, parse_status(params[STATUS_KEY])))
    if CATEGORY_KEY in params:
        predicate.append((FilterField.CATEGORY, parse_category(params[CATEGORY_KEY])))

    sort_field, sort_direction = parse_sort(
        params.get(SORT_BY_KEY), params.get(SORT_ORDER_KEY),
    )
    limit = parse_limit(params[LIMIT_KEY]) if LIMIT_KEY in params else None

    return TodoQuery(
        predicate=tuple(predicate),
        sort_field=sort_field,
        sort_direction=sort_direction,
        limit=limit,
    )


def parse_status(raw: str) -> bool:
    try:
        return _BOOLEAN_LITERALS[raw]
    except KeyError:
        raise FilterValidationError(
            f"Todo status must be a boolean (true or false), you gave {raw}",
            STATUS_KEY, raw,
        ) from None


def parse_category(raw: str) -> Category:
    try:
        return Category(raw)
    except ValueError:
        legal = ", ".join(c.value for c in Category)
        raise FilterValidationError(
            f"Todo must have a legal todo category ({legal}), you gave {raw}",
            CATEGORY_KEY, raw,
        ) from None


def parse_sort(
    sort_by: str | None, sort_order: str | None,
) -> tuple[str, SortDirection]:
    """Any field name is accepted; only an exact 'desc' selects descending."""
    field = sort_by if sort_by is not None else DEFAULT_SORT_FIELD
    if sort_order == DESCENDING_TOKEN:
        return field, SortDirection.DESCENDING
    return field, SortDirection.ASCENDING


def parse_limit(raw: str) -> int:
    """ASCII digits only; no sign, whitespace or underscores."""
    limit = int(raw) if raw.isascii() and raw.isdigit() else None
    if limit is None or not 0 < limit <= MAX_LIMIT:
        raise FilterValidationError(
            f"Todo limit must be an integer between 1 and {MAX_LIMIT}, you gave {raw}",
            LIMIT_KEY, raw,
        )
    return limit

"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - TodoId wraps UUID: never use bare UUID in domain logic
    - Category is the closed set of legal todo categories (membership check, not regex)
    - parse_todo_id is the single place a raw path segment becomes a TodoId

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

TodoId = NewType("TodoId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Category(str, Enum):
    """Todo categories: maps to DB `category` column."""
    VIDEO_GAMES = "video games"
    HOMEWORK = "homework"
    GROCERIES = "groceries"
    SOFTWARE_DESIGN = "software design"


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class FilterField(str, Enum):
    """Fields a predicate clause may reference."""
    STATUS = "status"
    CATEGORY = "category"


def parse_todo_id(raw: str) -> TodoId | None:
    """Convert a path segment to a TodoId. None when malformed."""
    try:
        return TodoId(UUID(raw))
    except (ValueError, TypeError, AttributeError):
        return None

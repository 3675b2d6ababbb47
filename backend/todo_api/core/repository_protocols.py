"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but the core parsing that feeds them is never async itself
"""

from typing import Protocol

from todo_api.core.domain_types import Category, TodoId
from todo_api.core.todo_filters import TodoQuery


class TodoLike(Protocol):
    """Structural contract for todo records returned by a store."""
    id: TodoId
    owner: str
    status: bool
    body: str
    category: Category | str


class TodoStore(Protocol):
    """Contract for todo reads: implemented by shell."""
    async def count(self) -> int: ...
    async def find_by_id(self, todo_id: TodoId) -> TodoLike | None: ...
    async def find_many(self, query: TodoQuery) -> list[TodoLike]: ...

"""Todo Query Service: builds query descriptions and executes them against a TodoStore.

Invariants:
    - Parameter validation runs before ANY store call; a rejected request costs zero queries
    - A malformed id never reaches the store (BadIdentifierError first)
    - The default limit is one count() snapshot per request; writes landing between
      count() and find_many() may make it stale (accepted race)
    - No retries: store failures propagate as DatabaseError

Design Decisions:
    - Store injected as a Protocol: routes pass SqlTodoStore, tests may pass fakes
"""

import logging
from collections.abc import Mapping

from todo_api.core.domain_types import parse_todo_id
from todo_api.core.errors import BadIdentifierError, ResourceNotFoundError
from todo_api.core.repository_protocols import TodoLike, TodoStore
from todo_api.core.todo_filters import TodoQuery, parse_todo_query

logger = logging.getLogger(__name__)


class TodoQueryService:
    """Single-record and collection reads over the todo store."""

    def __init__(self, store: TodoStore):
        self.store = store

    async def build_query(self, params: Mapping[str, str]) -> TodoQuery:
        """Parse parameters, then fill a missing limit with the current todo count."""
        query = parse_todo_query(params)
        if query.limit is None:
            query = query.with_limit(await self.store.count())
        return query

    async def get_by_id(self, raw_id: str) -> TodoLike:
        todo_id = parse_todo_id(raw_id)
        if todo_id is None:
            logger.info("Rejected malformed todo id", extra={"todo_id": raw_id})
            raise BadIdentifierError(raw_id)

        todo = await self.store.find_by_id(todo_id)
        if todo is None:
            raise ResourceNotFoundError("Todo", str(todo_id))
        return todo

    async def get_many(self, query: TodoQuery) -> list[TodoLike]:
        todos = await self.store.find_many(query)
        logger.debug(
            "Fetched todos",
            extra={"result_count": len(todos), "limit": query.limit},
        )
        return todos

    async def list_todos(self, params: Mapping[str, str]) -> list[TodoLike]:
        """build_query + get_many: the full collection read for one request."""
        return await self.get_many(await self.build_query(params))

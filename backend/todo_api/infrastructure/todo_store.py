"""SQL Todo Store: SQLAlchemy implementation of the TodoStore protocol.

Invariants:
    - find_many issues ONE statement: WHERE + ORDER BY + LIMIT evaluated together
    - id is always the last ORDER BY key: identical queries return identical order
    - A sort field naming no todo column orders by id alone (unknown fields compare equal)
    - Sort field "_id" (the response name of the identifier) orders by the id column
    - Read-only: never adds, flushes or commits

Design Decisions:
    - Column lookup through Todo.__table__.columns: sort field names are never
      interpolated into SQL
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.domain_types import FilterField, SortDirection, TodoId
from todo_api.core.todo_filters import TodoQuery
from todo_api.models.todo import Todo

logger = logging.getLogger(__name__)

_FILTER_COLUMNS = {
    FilterField.STATUS: Todo.status,
    FilterField.CATEGORY: Todo.category,
}

# Response field names that differ from their column names
_SORT_ALIASES = {
    "_id": "id",
}


class SqlTodoStore:
    """Reads todos through an AsyncSession owned by the caller."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Todo))
        return result.scalar_one()

    async def find_by_id(self, todo_id: TodoId) -> Todo | None:
        result = await self.db.execute(select(Todo).where(Todo.id == todo_id))
        return result.scalar_one_or_none()

    async def find_many(self, query: TodoQuery) -> list[Todo]:
        stmt = select(Todo)
        for field, value in query.predicate:
            if field is FilterField.CATEGORY:
                value = value.value
            stmt = stmt.where(_FILTER_COLUMNS[field] == value)

        sort_column = Todo.__table__.columns.get(
            _SORT_ALIASES.get(query.sort_field, query.sort_field),
        )
        if sort_column is None:
            logger.debug(f"Unknown sort field {query.sort_field!r}, ordering by id")
        elif query.sort_direction is SortDirection.DESCENDING:
            stmt = stmt.order_by(sort_column.desc())
        else:
            stmt = stmt.order_by(sort_column.asc())
        stmt = stmt.order_by(Todo.id.asc())

        if query.limit is not None:
            stmt = stmt.limit(query.limit)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

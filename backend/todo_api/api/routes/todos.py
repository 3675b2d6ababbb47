"""Todo Routes: read endpoints for single todos and filtered todo lists.

Invariants:
    - GET /api/todos/{id} → 200 todo | 400 BAD_IDENTIFIER | 404 RESOURCE_NOT_FOUND
    - GET /api/todos → 200 list (possibly empty) | 400 VALIDATION_ERROR
    - Query parameters reach core as raw strings; the first value wins when repeated

Design Decisions:
    - Raw request.query_params instead of typed Query(...) parameters: core owns
      validation so every bad parameter yields the same error envelope and message
    - Errors raised as TodoApiError subclasses; the global handler renders them
"""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.infrastructure.database import get_db
from todo_api.infrastructure.todo_store import SqlTodoStore
from todo_api.schemas.todo import TodoResponse
from todo_api.services.todo_queries import TodoQueryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/todos", tags=["todos"])


def get_todo_service(db: AsyncSession = Depends(get_db)) -> TodoQueryService:
    return TodoQueryService(SqlTodoStore(db))


def first_values(request: Request) -> dict[str, str]:
    """Collapse repeated query parameters to their first value."""
    params = request.query_params
    return {key: params.getlist(key)[0] for key in params.keys()}


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(
    todo_id: str, service: TodoQueryService = Depends(get_todo_service),
):
    """Get one todo by id."""
    return await service.get_by_id(todo_id)


@router.get("", response_model=list[TodoResponse])
async def list_todos(
    request: Request, service: TodoQueryService = Depends(get_todo_service),
):
    """List todos filtered by status/category, sorted by sortby/sortorder, capped by limit."""
    return await service.list_todos(first_values(request))

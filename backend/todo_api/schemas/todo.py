"""Todo Schemas: Pydantic models for the todo response body.

Invariants:
    - TodoResponse mirrors the todo record shape; `id` serialized as `_id` for
      clients written against the document-store API

Design Decisions:
    - from_attributes: validated straight from ORM rows, no manual dict building
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from todo_api.core.domain_types import Category


class TodoResponse(BaseModel):
    """Public-facing todo data."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID = Field(serialization_alias="_id")
    owner: str
    status: bool
    body: str
    category: Category

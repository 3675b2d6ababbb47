"""Todo ORM: the record this service reads.

Invariants:
    - id is UUID primary key (store-assigned); the only legal identifier format
    - category holds a Category value; enforced by the check constraint
    - This service never writes todos; rows arrive through seeding or other services

Design Decisions:
    - category as String + CHECK over a native ENUM type: portable to SQLite in tests
    - index on owner: it is the default sort field
"""

import uuid

from sqlalchemy import Boolean, CheckConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from todo_api.core.domain_types import Category
from todo_api.db.base import Base

CATEGORY_VALUES = tuple(c.value for c in Category)


class Todo(Base):
    """One todo owned by one person."""
    __tablename__ = "todos"
    __table_args__ = (
        CheckConstraint(
            "category IN ({})".format(
                ", ".join(f"'{v}'" for v in CATEGORY_VALUES),
            ),
            name="ck_todos_category",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    owner: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(String(30), nullable=False)

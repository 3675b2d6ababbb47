"""Create todos table.

Revision ID: 001_todos
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_todos"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "todos",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("owner", sa.String(100), nullable=False),
        sa.Column("status", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("body", sa.Text, nullable=False, server_default=""),
        sa.Column("category", sa.String(30), nullable=False),
        sa.CheckConstraint(
            "category IN ('video games', 'homework', 'groceries', 'software design')",
            name="ck_todos_category",
        ),
    )
    op.create_index("ix_todos_owner", "todos", ["owner"])


def downgrade() -> None:
    op.drop_index("ix_todos_owner", table_name="todos")
    op.drop_table("todos")

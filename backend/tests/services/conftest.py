"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so readiness probes hit the test engine
    - seed_todos inserts six todos with distinct owners (sortable, deterministic)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from todo_api.db.base import Base
from todo_api.infrastructure.database import get_db, DatabaseSessionManager
from todo_api.models.todo import Todo
import todo_api.infrastructure.database as db_module
from todo_api.main import app


SEED_TODOS = [
    {"owner": "Blanche", "status": False, "category": "homework",
     "body": "In sunt ex non tempor cillum commodo amet incididunt."},
    {"owner": "Fry", "status": True, "category": "homework",
     "body": "Ipsum esse est ullamco magna tempor anim laborum non officia."},
    {"owner": "Barry", "status": True, "category": "video games",
     "body": "Ullamco irure laborum magna dolor non mollit pariatur."},
    {"owner": "Workman", "status": False, "category": "groceries",
     "body": "Deserunt in tempor est id consectetur cupidatat."},
    {"owner": "Dawn", "status": True, "category": "software design",
     "body": "Magna exercitation pariatur in labore."},
    {"owner": "Roberta", "status": False, "category": "homework",
     "body": "Nostrud ullamco labore exercitation magna."},
]


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the in-memory engine (skips pool kwargs)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_session_factory, test_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_todos(test_db):
    """Insert SEED_TODOS; returns the ORM rows keyed by owner."""
    todos = [Todo(**data) for data in SEED_TODOS]
    test_db.add_all(todos)
    await test_db.commit()
    return {todo.owner: todo for todo in todos}

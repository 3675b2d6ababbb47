"""Database Session Manager & readiness probe: verifies error mapping and health checks.

Invariants:
    - SQLAlchemy errors inside a session surface as DatabaseError (503)
    - Readiness is 200 with a reachable DB, 503 without a manager
"""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError

import todo_api.infrastructure.database as db_module
from todo_api.core.errors import DatabaseError


async def test_operational_error_maps_to_database_error(test_manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with test_manager.session():
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))
    assert exc_info.value.operation == "execute"
    assert exc_info.value.http_status == 503


async def test_generic_sqlalchemy_error_maps_to_database_error(test_manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with test_manager.session():
            raise SQLAlchemyError("boom")
    assert exc_info.value.operation == "unknown"


async def test_bad_sql_maps_to_database_error(test_manager):
    with pytest.raises(DatabaseError):
        async with test_manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))


async def test_health_check_true_for_live_engine(test_manager):
    assert await test_manager.health_check() is True


async def test_get_db_requires_initialization(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError):
        await anext(db_module.get_db())


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"

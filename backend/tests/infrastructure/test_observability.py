"""Observability & Settings: verifies the JSON log format and env-driven config."""

import json
import logging

from todo_api.config import Settings
from todo_api.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "todo_api.test", logging.WARNING, __file__, 1, "bad %s", ("limit",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "todo_api.test"
    assert log["message"] == "bad limit"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras():
    log = json.loads(JSONFormatter().format(
        _record(error_code="VALIDATION_ERROR", parameter="limit", unrelated="x"),
    ))
    assert log["error_code"] == "VALIDATION_ERROR"
    assert log["parameter"] == "limit"
    assert "unrelated" not in log


def test_settings_rewrites_postgres_scheme():
    settings = Settings(database_url="postgresql://u:p@host:5432/todos")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/todos"


def test_settings_keeps_other_schemes():
    settings = Settings(database_url="sqlite+aiosqlite:///todos.db")
    assert settings.database_url == "sqlite+aiosqlite:///todos.db"

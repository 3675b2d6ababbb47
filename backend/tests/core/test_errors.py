"""Error Hierarchy: verifies codes, statuses and the REST envelope."""

from todo_api.core.errors import (
    BadIdentifierError, DatabaseError, ErrorCategory, ErrorContext, FilterValidationError,
    ResourceNotFoundError, TodoApiError,
)


def test_all_errors_share_base():
    for exc in (
        BadIdentifierError("x"),
        FilterValidationError("bad", "status"),
        ResourceNotFoundError("Todo", "abc"),
        DatabaseError("down", "execute"),
    ):
        assert isinstance(exc, TodoApiError)


def test_filter_validation_error_envelope():
    exc = FilterValidationError("Todo limit must be ...", "limit", "-1")
    body = exc.to_response()["error"]
    assert exc.http_status == 400
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert body["context"]["parameter"] == "limit"
    assert body["context"]["raw_value"] == "-1"


def test_bad_identifier_is_distinct_from_not_found():
    bad = BadIdentifierError("not-an-id")
    missing = ResourceNotFoundError("Todo", "f0e1")
    assert (bad.http_status, bad.code) == (400, "BAD_IDENTIFIER")
    assert (missing.http_status, missing.code) == (404, "RESOURCE_NOT_FOUND")
    assert missing.message == "Todo 'f0e1' not found"


def test_database_error_is_critical_503():
    exc = DatabaseError("Connection refused", "execute")
    assert exc.http_status == 503
    assert exc.severity.value == "critical"
    assert exc.message == "Database execute failed: Connection refused"


def test_error_categories_are_the_ones_raised():
    assert {c.value for c in ErrorCategory} == {
        "validation", "resource_not_found", "database",
    }


def test_error_context_fields():
    assert set(ErrorContext.__dataclass_fields__) == {
        "timestamp", "parameter", "raw_value", "resource_id",
    }

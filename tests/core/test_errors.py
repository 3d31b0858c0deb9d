"""Error hierarchy: codes, statuses and the response envelope.

Invariants:
    - validation 400, not found 404, failed update/insert 400, internal 500, database 503
"""

import pytest

from pm_api.core.errors import (
    DatabaseError, ErrorCategory, InsertFailedError, InternalError, PmError,
    ResourceNotFoundError, UpdateFailedError, ValidationFailedError,
)


@pytest.mark.parametrize("error, code, status", [
    (ValidationFailedError("bad id", "id"), "VALIDATION_ERROR", 400),
    (ResourceNotFoundError("Account", "x"), "RESOURCE_NOT_FOUND", 404),
    (UpdateFailedError("Account", "x"), "UPDATE_FAILED", 400),
    (InsertFailedError("Account", "dup"), "INSERT_FAILED", 400),
    (InternalError("oops"), "INTERNAL_ERROR", 500),
    (DatabaseError("down", "execute"), "DATABASE_ERROR", 503),
])
def test_error_kinds_map_to_status(error, code, status):
    assert isinstance(error, PmError)
    assert error.code == code
    assert error.http_status == status


def test_to_response_envelope():
    body = ResourceNotFoundError("Project", "123").to_response()["error"]
    assert body["message"] == "Project '123' not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"]["resource_id"] == "123"
    assert "timestamp" in body


def test_validation_error_records_field():
    err = ValidationFailedError("'end' must not precede 'start'", "end")
    assert err.to_response()["error"]["context"]["field"] == "end"

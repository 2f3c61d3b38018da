"""Error Hierarchy: verifies kinds, causes, HTTP status and the REST envelope.

Tests:
    - Each error class carries the expected StoreErrorKind and status
    - Original cause is preserved
    - to_response() shape and recoverable flag
"""

from zetodo.core.errors import (
    DatabaseError, ErrorContext, LockPoisonedError, MigrationError,
    ResourceNotFoundError, SerializationError, StoreErrorKind,
    StoreNotInitializedError, ZeTodoError,
)


def test_database_error_is_engine_kind_with_cause():
    cause = RuntimeError("disk I/O error")
    err = DatabaseError("Integrity constraint violated", "commit", cause=cause)
    assert err.kind is StoreErrorKind.ENGINE
    assert err.cause is cause
    assert err.http_status == 503
    assert str(err) == "Database commit failed: Integrity constraint violated"
    assert err.context.operation == "commit"


def test_not_initialized_and_lock_poisoned_are_not_recoverable():
    assert StoreNotInitializedError().kind is StoreErrorKind.NOT_INITIALIZED
    assert LockPoisonedError().kind is StoreErrorKind.LOCK_UNAVAILABLE
    assert not StoreNotInitializedError().recoverable
    assert not LockPoisonedError().recoverable
    assert DatabaseError("x", "query").recoverable


def test_serialization_error():
    err = SerializationError("columnId missing")
    assert err.kind is StoreErrorKind.SERIALIZATION
    assert err.http_status == 400
    assert "columnId missing" in str(err)


def test_not_found_is_reserved_kind():
    err = ResourceNotFoundError("Card", "k1")
    assert err.kind is StoreErrorKind.NOT_FOUND
    assert err.http_status == 404
    assert "k1" in err.message


def test_migration_error_keeps_version():
    err = MigrationError(2, cause=ValueError("duplicate column"))
    assert err.version == 2
    assert err.kind is StoreErrorKind.ENGINE
    assert "v2" in str(err)


def test_all_errors_share_base():
    for err in (
        DatabaseError("x", "query"), SerializationError("x"),
        StoreNotInitializedError(), LockPoisonedError(), MigrationError(1),
    ):
        assert isinstance(err, ZeTodoError)


def test_to_response_envelope():
    err = DatabaseError(
        "boom", "execute", context=ErrorContext(project_id="p1", entity_id="k1"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "DATABASE_ERROR"
    assert body["kind"] == "engine"
    assert body["recoverable"] is True
    assert body["context"] == {
        "project_id": "p1", "entity_id": "k1", "operation": "execute",
    }
    assert "timestamp" in body

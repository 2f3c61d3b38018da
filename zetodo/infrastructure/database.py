"""Connection Gateway: one long-lived store handle, one operation at a time.

Invariants:
    - Exactly one ORM Session (the handle) per manager, reused for the process lifetime
    - The handle is only touched while holding the manager's lock; operations never interleave
    - No operation runs before initialize() has applied every migration
    - Every failed operation is rolled back; SQLAlchemy exceptions are mapped to DatabaseError
    - A successful operation is committed (pending adds flushed) before the lock is released
    - Reads always hit the store: the identity map is emptied after every operation
    - Once poisoned (interrupted mid-operation or failed rollback) every call raises LockPoisonedError

Design Decisions:
    - Manager injected into stores by constructor; the module-level db_manager is only
      for the HTTP layer's dependency providers
    - threading.Lock, no timeout: a stalled operation blocks the next one indefinitely
      (single local user)
    - PRAGMA foreign_keys = ON on every DBAPI connect: SQLite ignores cascades otherwise
    - SQLite DDL runs inside real transactions (driver autocommit off, BEGIN emitted on
      begin), so a failed migration step leaves no partial schema behind
    - In-memory URLs use StaticPool so migrations and the handle share one database
"""

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Generator, TypeVar

from pydantic import ValidationError
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from zetodo.core.errors import (
    DatabaseError, LockPoisonedError, SerializationError,
    StoreNotInitializedError, ZeTodoError,
)
from zetodo.db.migrations import apply_migrations

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    # pysqlite's own transaction handling skips DDL; BEGIN is emitted below instead
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def _begin_sqlite_transaction(conn) -> None:
    conn.exec_driver_sql("BEGIN")


def _is_memory_url(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:")


def build_engine(database_url: str, echo: bool = False) -> Engine:
    kwargs: dict = {"echo": echo}
    if _is_memory_url(database_url):
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    engine = create_engine(database_url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _configure_sqlite_connection)
        event.listen(engine, "begin", _begin_sqlite_transaction)
    return engine


class DatabaseSessionManager:
    """Owns the store handle and serializes access to it."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.engine = build_engine(database_url, echo=echo)
        self._session_factory = sessionmaker(
            self.engine, expire_on_commit=False,
        )
        self._lock = threading.Lock()
        self._handle: Session | None = None
        self._poisoned_by: BaseException | None = None
        self.schema_version = 0

    @property
    def initialized(self) -> bool:
        return self._handle is not None

    @property
    def poisoned(self) -> bool:
        return self._poisoned_by is not None

    def initialize(self) -> int:
        """Apply migrations, then open the handle. Migration failure is fatal."""
        with self._lock:
            with self.engine.connect() as conn:
                self.schema_version = apply_migrations(conn)
            if self._handle is None:
                self._handle = self._session_factory()
        logger.info(
            f"Database initialized at schema v{self.schema_version}",
            extra={"schema_version": self.schema_version},
        )
        return self.schema_version

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Provide the handle under the lock, with commit/rollback and error mapping."""
        with self._lock:
            # checked under the lock: close() may run between calls
            if self._handle is None:
                raise StoreNotInitializedError()
            if self._poisoned_by is not None:
                raise LockPoisonedError(self._poisoned_by)
            handle = self._handle
            try:
                yield handle
                # flushes pending adds even when nothing autobegan
                handle.commit()
            except BaseException as e:
                self._rollback_or_poison(handle, e)
                if not isinstance(e, Exception):
                    self._poisoned_by = e
                    logger.critical(f"Store operation interrupted: {e!r}")
                    raise
                mapped = self._map_error(e)
                if mapped is e:
                    raise
                raise mapped from e
            finally:
                # every operation starts from an empty identity map
                handle.expunge_all()

    def with_connection(self, fn: Callable[[Session], T]) -> T:
        """Run fn with exclusive access to the handle; return or propagate."""
        with self.session() as handle:
            return fn(handle)

    def health_check(self) -> bool:
        """True when the handle can run a trivial query."""
        try:
            self.with_connection(lambda db: db.execute(text("SELECT 1")).scalar_one())
            return True
        except ZeTodoError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    def close(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.close()
                self._handle = None
        self.engine.dispose()

    def _rollback_or_poison(self, handle: Session, original: BaseException) -> None:
        try:
            handle.rollback()
        except Exception as rollback_error:
            self._poisoned_by = rollback_error
            logger.critical(
                f"Rollback failed after {original!r}: {rollback_error}",
            )
            raise LockPoisonedError(rollback_error) from original

    @staticmethod
    def _map_error(e: Exception) -> Exception:
        if isinstance(e, ZeTodoError):
            return e
        if isinstance(e, ValidationError):
            logger.error(f"Serialization error: {e}")
            return SerializationError(str(e), cause=e)
        if isinstance(e, IntegrityError):
            logger.error(f"DB integrity error: {e}")
            return DatabaseError("Integrity constraint violated", "commit", cause=e)
        if isinstance(e, OperationalError):
            logger.error(f"DB operational error: {e}")
            return DatabaseError("Connection or operational error", "execute", cause=e)
        if isinstance(e, DBAPIError):
            logger.error(f"DB driver error: {e}")
            return DatabaseError("Database driver error", "query", cause=e)
        if isinstance(e, SQLAlchemyError):
            logger.error(f"SQLAlchemy error: {e}")
            return DatabaseError("Database operation failed", "unknown", cause=e)
        return e


# Process-wide instance for the HTTP layer (set in the app lifespan)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, echo: bool = False) -> DatabaseSessionManager:
    """Create the process-wide manager and run migrations."""
    global db_manager
    manager = DatabaseSessionManager(database_url, echo=echo)
    manager.initialize()
    db_manager = manager
    return manager


def get_db_manager() -> DatabaseSessionManager:
    if db_manager is None:
        raise StoreNotInitializedError()
    return db_manager

"""Database connection pool management with SQLAlchemy 2.0.

Provides transactional session scopes over a pooled engine. Every
multi-step catalog operation (existence check then write) runs inside
one of these scopes, so it either commits as a whole or leaves the
store untouched.
"""

from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import Any, TypeVar

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from filmapi.settings import settings
from filmapi.utils.logger import setup_logger

logger = setup_logger("database.connection")

ResultT = TypeVar("ResultT")


def build_engine(url: str | None = None, echo: bool | None = None) -> Engine:
    """Create a SQLAlchemy engine for the configured store.

    PostgreSQL (default) gets a QueuePool sized from settings. SQLite gets
    foreign key enforcement switched on for every connection, and an
    in-memory URL shares a single connection so that all sessions see
    the same database.

    Args:
        url: SQLAlchemy URL. Defaults to settings.database.sync_url.
        echo: Log SQL statements. Defaults to settings.debug.

    Returns:
        Configured Engine.
    """
    db = settings.database
    url = url or db.sync_url
    echo = settings.debug if echo is None else echo

    if url.startswith("sqlite"):
        return _build_sqlite_engine(url, echo)

    return create_engine(
        url,
        poolclass=QueuePool,
        pool_size=db.pool_size,
        max_overflow=db.pool_overflow,
        pool_timeout=db.pool_timeout,
        pool_pre_ping=True,
        echo=echo,
    )


def _build_sqlite_engine(url: str, echo: bool) -> Engine:
    """Create a SQLite engine with foreign keys enforced.

    Args:
        url: SQLite URL.
        echo: Log SQL statements.

    Returns:
        Configured Engine.
    """
    in_memory = url in ("sqlite://", "sqlite:///:memory:")
    kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if in_memory:
        kwargs["poolclass"] = StaticPool

    engine = create_engine(url, echo=echo, **kwargs)

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


class DatabaseConnection:
    """Manages the connection pool and session factory.

    Attributes:
        _engine: SQLAlchemy engine.
        _session_factory: Session factory bound to the engine.

    Example:
        ```python
        db = DatabaseConnection()
        with db.session() as session:
            CharacterService(session).update_movies(2, [1])
        ```
    """

    def __init__(self, url: str | None = None) -> None:
        """Initialize engine and session factory.

        Args:
            url: SQLAlchemy URL. Defaults to settings.database.sync_url.
        """
        self._engine = build_engine(url)
        self._session_factory = sessionmaker(
            bind=self._engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Provide a transactional session scope.

        Automatically commits on success, rolls back on exception,
        and closes the session when done.

        Yields:
            SQLAlchemy Session instance.

        Raises:
            Exception: Re-raises any exception after rollback.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def run_in_transaction(self, fn: Callable[[Session], ResultT]) -> ResultT:
        """Run a unit of work atomically.

        Args:
            fn: Callable receiving the session.

        Returns:
            Whatever fn returns, after commit.
        """
        with self.session() as session:
            return fn(session)

    def check_connection(self) -> bool:
        """Test database connectivity with a simple query.

        Returns:
            True if connection successful, False otherwise.
        """
        try:
            with self.session() as session:
                session.execute(text("SELECT 1"))
            return True
        except Exception:  # noqa: BLE001
            logger.exception("Database connectivity check failed")
            return False

    def dispose(self) -> None:
        """Dispose the connection pool and release resources.

        Should be called during application shutdown.
        """
        self._engine.dispose()

    @property
    def engine(self) -> Engine:
        """Get the underlying engine.

        Returns:
            SQLAlchemy Engine instance.
        """
        return self._engine


# =============================================================================
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# =============================================================================

_db: DatabaseConnection | None = None


def get_database() -> DatabaseConnection:
    """Get the shared DatabaseConnection instance.

    Creates the instance on first call (lazy initialization).

    Returns:
        DatabaseConnection singleton instance.
    """
    global _db  # noqa: PLW0603
    if _db is None:
        _db = DatabaseConnection()
    return _db


def get_session() -> Generator[Session, None, None]:
    """Yield a session with automatic transaction management.

    Yields:
        SQLAlchemy Session bound to the shared connection.
    """
    db = get_database()
    with db.session() as session:
        yield session


def close_database() -> None:
    """Close database connection pool.

    Call during application shutdown to release resources.
    """
    global _db  # noqa: PLW0603
    if _db is not None:
        _db.dispose()
        _db = None
        logger.info("Database connections closed")

"""Shared pytest fixtures.

Every test runs against its own in-memory SQLite database built through
the production engine factory (foreign keys enforced, single shared
connection).
"""

import os

# Settings are read once at import time; point them at SQLite before
# anything from filmapi is imported.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "INFO")

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import Engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from filmapi.database.connection import build_engine  # noqa: E402
from filmapi.database.models import Base  # noqa: E402
from filmapi.database.seed import seed_catalog  # noqa: E402


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Fresh in-memory database with the catalog schema."""
    engine = build_engine("sqlite://", echo=False)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session, None, None]:
    """Session on the in-memory database, closed after the test."""
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = factory()
    yield session
    session.close()


@pytest.fixture
def seeded_session(session: Session) -> Session:
    """Session on a database holding the seed catalog.

    Characters 1..3, movies 1..3 (franchise 1: movies 1 and 3,
    franchise 2: movie 2) and edges (1,1), (2,1), (2,2), (3,3).
    """
    seed_catalog(session)
    session.commit()
    return session

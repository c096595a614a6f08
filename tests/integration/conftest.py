"""Shared fixtures for HTTP integration tests.

Uses the module-level ``app`` from ``filmapi.api.main``. ``get_db`` is
overridden so each request opens its own transactional scope on a
seeded in-memory database.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import Session

from filmapi.api.database import get_db
from filmapi.database.connection import DatabaseConnection
from filmapi.database.models import Base
from filmapi.database.seed import seed_catalog


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply ``@pytest.mark.integration`` to every test collected here."""
    integration_marker = pytest.mark.integration
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(integration_marker)


@pytest.fixture
def db_connection() -> Generator[DatabaseConnection, None, None]:
    """Seeded in-memory database."""
    connection = DatabaseConnection("sqlite://")
    Base.metadata.create_all(connection.engine)
    connection.run_in_transaction(seed_catalog)
    yield connection
    connection.dispose()


@pytest.fixture
async def client(db_connection: DatabaseConnection) -> AsyncGenerator[AsyncClient, None]:
    """Provide an ``httpx.AsyncClient`` wired to the real app."""
    from filmapi.api.main import app

    def override_get_db() -> Generator[Session, None, None]:
        with db_connection.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.pop(get_db, None)

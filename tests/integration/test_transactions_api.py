"""Integration tests for the per-request transaction scope."""

from collections.abc import Generator

import pytest
from httpx import AsyncClient
from sqlalchemy.orm import Session

from filmapi.api.database import get_db
from filmapi.database.connection import DatabaseConnection
from filmapi.services import CharacterService


def _refuse_commit() -> None:
    raise RuntimeError("commit refused")


@pytest.fixture
def failing_commit(
    client: AsyncClient,
    db_connection: DatabaseConnection,
) -> Generator[None, None, None]:
    """Route requests through sessions whose commit fails."""
    from filmapi.api.main import app

    previous = app.dependency_overrides[get_db]

    def override_get_db() -> Generator[Session, None, None]:
        with db_connection.session() as session:
            session.commit = _refuse_commit
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides[get_db] = previous


class TestCommitFailure:
    """A failed commit is reported to the client and leaves the store untouched."""

    @staticmethod
    async def test_replace_movies_returns_server_error(
        client: AsyncClient,
        failing_commit: None,
    ) -> None:
        response = await client.put("/api/v1/characters/2/movies", json=[1])

        assert response.status_code >= 500

    @staticmethod
    async def test_replace_movies_rolled_back(
        client: AsyncClient,
        db_connection: DatabaseConnection,
        failing_commit: None,
    ) -> None:
        await client.put("/api/v1/characters/2/movies", json=[3])

        with db_connection.session() as session:
            assert CharacterService(session).get_by_id(2).movie_ids == [1, 2]

    @staticmethod
    async def test_create_returns_server_error(
        client: AsyncClient,
        failing_commit: None,
    ) -> None:
        response = await client.post(
            "/api/v1/franchises",
            json={"name": "DC Extended Universe", "description": "Shared DC films"},
        )

        assert response.status_code >= 500


class TestCommitBeforeResponse:
    """A successful write is visible as soon as its response arrives."""

    @staticmethod
    async def test_write_visible_to_next_request(client: AsyncClient) -> None:
        response = await client.put("/api/v1/characters/2/movies", json=[3])
        assert response.status_code == 204

        response = await client.get("/api/v1/characters/2")
        assert response.json()["movies"] == [3]

"""Unit tests for API Pydantic schemas."""

from datetime import datetime

import pytest
from pydantic import ValidationError
from sqlalchemy.orm import Session

from filmapi.api.schemas import (
    CharacterCreate,
    CharacterRead,
    CharacterUpdate,
    FranchiseRead,
    HealthResponse,
    MovieCreate,
    MovieRead,
    MovieUpdate,
)
from filmapi.services import CharacterService, FranchiseService, MovieService

MOVIE_PAYLOAD = {
    "title": "Thor",
    "genre": "Action",
    "release_year": 2011,
    "director": "Kenneth Branagh",
    "picture_url": "thor.jpg",
    "trailer_url": "thor.mp4",
}


class TestHealthResponse:
    """Tests for HealthResponse schema."""

    @staticmethod
    def test_default_timestamp() -> None:
        response = HealthResponse(status="healthy", version="1.0.0")
        assert isinstance(response.timestamp, datetime)
        assert response.database.connected is False


class TestCharacterSchemas:
    """Tests for character payloads."""

    @staticmethod
    def test_alias_optional() -> None:
        payload = CharacterCreate(full_name="Bruce Banner", gender="Male", picture_url="b.jpg")
        assert payload.alias is None

    @staticmethod
    def test_full_name_too_long() -> None:
        with pytest.raises(ValidationError) as exc_info:
            CharacterCreate(full_name="x" * 51, gender="Male", picture_url="b.jpg")
        assert "full_name" in str(exc_info.value)

    @staticmethod
    def test_update_requires_id() -> None:
        with pytest.raises(ValidationError):
            CharacterUpdate(full_name="Bruce Banner", gender="Male", picture_url="b.jpg")

    @staticmethod
    def test_read_lists_movie_ids(seeded_session: Session) -> None:
        character = CharacterService(seeded_session).get_by_id(2)

        read = CharacterRead.model_validate(character)

        assert read.movies == [1, 2]
        assert read.alias == "Wonder Woman"


class TestMovieSchemas:
    """Tests for movie payloads."""

    @staticmethod
    def test_create_requires_franchise() -> None:
        with pytest.raises(ValidationError) as exc_info:
            MovieCreate(**MOVIE_PAYLOAD)
        assert "franchise_id" in str(exc_info.value)

    @staticmethod
    @pytest.mark.parametrize("year", [1849, 2201])
    def test_release_year_bounds(year: int) -> None:
        with pytest.raises(ValidationError):
            MovieCreate(**{**MOVIE_PAYLOAD, "release_year": year, "franchise_id": 1})

    @staticmethod
    def test_update_ignores_franchise() -> None:
        payload = MovieUpdate(id=1, **MOVIE_PAYLOAD, franchise_id=2)
        assert "franchise_id" not in payload.model_dump()

    @staticmethod
    def test_read_lists_character_ids(seeded_session: Session) -> None:
        movie = MovieService(seeded_session).get_by_id(1)

        read = MovieRead.model_validate(movie)

        assert read.characters == [1, 2]
        assert read.franchise_id == 1


class TestFranchiseSchemas:
    """Tests for franchise payloads."""

    @staticmethod
    def test_read_lists_movie_ids(seeded_session: Session) -> None:
        franchise = FranchiseService(seeded_session).get_by_id(1)

        assert FranchiseRead.model_validate(franchise).movies == [1, 3]

    @staticmethod
    def test_read_from_plain_ids() -> None:
        read = FranchiseRead(id=9, name="New", description="", movies=[4, 5])
        assert read.movies == [4, 5]

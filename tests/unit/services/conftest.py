"""Fixtures for service tests."""

from collections.abc import Callable

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from filmapi.database.models import CharacterMovie
from filmapi.services import MovieService


@pytest.fixture
def edges(seeded_session: Session) -> Callable[[], set[tuple[int, int]]]:
    """Read the committed-or-flushed character_movie rows as (character, movie)."""

    def _read() -> set[tuple[int, int]]:
        rows = seeded_session.execute(select(CharacterMovie.character_id, CharacterMovie.movie_id))
        return {(character_id, movie_id) for character_id, movie_id in rows}

    return _read


@pytest.fixture
def extra_movies(seeded_session: Session) -> list[int]:
    """Add movies 4..7 to franchise 1 and return their ids."""
    service = MovieService(seeded_session)
    ids = []
    for year in range(2022, 2026):
        movie = service.add(
            {
                "title": f"Sequel {year}",
                "genre": "Action",
                "release_year": year,
                "director": "Jon Watts",
                "picture_url": f"sequel_{year}.jpg",
                "trailer_url": f"https://example.com/{year}",
                "franchise_id": 1,
            }
        )
        ids.append(movie.id)
    seeded_session.commit()
    return ids

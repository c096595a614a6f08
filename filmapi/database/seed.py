"""Seed data for a fresh catalog.

Three characters, two franchises, three movies and four
character-movie edges. Identifiers are explicit so the dataset
is stable across stores.
"""

from sqlalchemy import insert, text
from sqlalchemy.orm import Session

from filmapi.database.models import Character, CharacterMovie, Franchise, Movie

FRANCHISES = [
    {
        "id": 1,
        "name": "Marvel Cinematic Universe",
        "description": "A series of interconnected superhero films",
    },
    {
        "id": 2,
        "name": "Wonder Woman",
        "description": "A superhero film series based on DC Comics",
    },
]

MOVIES = [
    {
        "id": 1,
        "title": "Avengers: Endgame",
        "genre": "Action, Adventure",
        "release_year": 2019,
        "director": "Anthony and Joe Russo",
        "picture_url": "avengers_endgame.jpg",
        "trailer_url": "https://www.youtube.com/watch?v=TcMBFSGVi1c",
        "franchise_id": 1,
    },
    {
        "id": 2,
        "title": "Wonder Woman 1984",
        "genre": "Action, Adventure",
        "release_year": 2020,
        "director": "Patty Jenkins",
        "picture_url": "wonder_woman_1984.jpg",
        "trailer_url": "https://www.youtube.com/watch?v=sfM7_JLk-84",
        "franchise_id": 2,
    },
    {
        "id": 3,
        "title": "Spider-Man: No Way Home",
        "genre": "Action, Adventure, Sci-Fi",
        "release_year": 2021,
        "director": "Jon Watts",
        "picture_url": "spiderman_no_way_home.jpg",
        "trailer_url": "https://www.youtube.com/watch?v=g4Hbz2jLxvQ",
        "franchise_id": 1,
    },
]

CHARACTERS = [
    {
        "id": 1,
        "full_name": "John Smith",
        "alias": "Captain Hero",
        "gender": "Male",
        "picture_url": "john_smith.jpg",
    },
    {
        "id": 2,
        "full_name": "Jane Doe",
        "alias": "Wonder Woman",
        "gender": "Female",
        "picture_url": "jane_doe.jpg",
    },
    {
        "id": 3,
        "full_name": "David Johnson",
        "alias": "Spider-Man",
        "gender": "Male",
        "picture_url": "david_johnson.jpg",
    },
]

CHARACTER_MOVIES = [
    {"character_id": 1, "movie_id": 1},
    {"character_id": 2, "movie_id": 1},
    {"character_id": 2, "movie_id": 2},
    {"character_id": 3, "movie_id": 3},
]


def seed_catalog(session: Session) -> dict[str, int]:
    """Insert the seed dataset.

    Args:
        session: Open session; the caller commits.

    Returns:
        Number of rows inserted per table.
    """
    session.execute(insert(Franchise), FRANCHISES)
    session.execute(insert(Movie), MOVIES)
    session.execute(insert(Character), CHARACTERS)
    session.execute(insert(CharacterMovie), CHARACTER_MOVIES)
    session.flush()
    _sync_sequences(session)
    return {
        "franchises": len(FRANCHISES),
        "movies": len(MOVIES),
        "characters": len(CHARACTERS),
        "character_movie": len(CHARACTER_MOVIES),
    }


def _sync_sequences(session: Session) -> None:
    """Move PostgreSQL id sequences past the explicit seed ids.

    Args:
        session: Open session.
    """
    if session.get_bind().dialect.name != "postgresql":
        return
    for table in ("franchises", "movies", "characters"):
        session.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"(SELECT MAX(id) FROM {table}))"
            )
        )

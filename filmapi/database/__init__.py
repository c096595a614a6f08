"""Database package for the Film API.

Provides database connection management, ORM models, and repositories.

Usage:
    from filmapi.database import get_database, CharacterRepository

    db = get_database()
    with db.session() as session:
        repo = CharacterRepository(session)
        characters = repo.get_all_with_relations()
"""

from filmapi.database.connection import (
    DatabaseConnection,
    build_engine,
    close_database,
    get_database,
    get_session,
)
from filmapi.database.models import (
    Base,
    Character,
    CharacterMovie,
    Franchise,
    Movie,
)
from filmapi.database.repositories import (
    BaseRepository,
    CharacterRepository,
    FranchiseRepository,
    MovieRepository,
)

__all__ = [
    # Connection
    "DatabaseConnection",
    "build_engine",
    "get_database",
    "get_session",
    "close_database",
    # Models
    "Base",
    "Character",
    "Movie",
    "Franchise",
    "CharacterMovie",
    # Repositories
    "BaseRepository",
    "CharacterRepository",
    "MovieRepository",
    "FranchiseRepository",
]

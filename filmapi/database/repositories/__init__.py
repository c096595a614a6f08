"""Database repositories for the Film API.

Provides repository pattern implementations for all
catalog entities with CRUD and association queries.

Usage:
    from filmapi.database.repositories import CharacterRepository
    from filmapi.database import get_database

    db = get_database()
    with db.session() as session:
        repo = CharacterRepository(session)
        character = repo.get_with_relations(1)
"""

from filmapi.database.repositories.base import BaseRepository
from filmapi.database.repositories.character import CharacterRepository
from filmapi.database.repositories.franchise import FranchiseRepository
from filmapi.database.repositories.movie import MovieRepository

__all__ = [
    "BaseRepository",
    "CharacterRepository",
    "MovieRepository",
    "FranchiseRepository",
]

"""Character repository.

Provides CRUD operations and association queries for characters.
"""

from sqlalchemy.orm import Session

from filmapi.database.models import Character, Movie
from filmapi.database.repositories.base import BaseRepository


class CharacterRepository(BaseRepository[Character]):
    """Repository for Character entity operations."""

    model = Character
    eager_relations = ("movies",)

    def __init__(self, session: Session) -> None:
        """Initialize character repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def get_by_franchise(self, franchise_id: int) -> list[Character]:
        """Get characters appearing in at least one movie of a franchise.

        Args:
            franchise_id: Franchise primary key.

        Returns:
            Distinct characters ordered by id.
        """
        return self.find_all_where(Character.movies.any(Movie.franchise_id == franchise_id))

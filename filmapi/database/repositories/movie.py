"""Movie repository.

Provides CRUD operations and franchise lookups for movies.
"""

from sqlalchemy.orm import Session

from filmapi.database.models import Movie
from filmapi.database.repositories.base import BaseRepository


class MovieRepository(BaseRepository[Movie]):
    """Repository for Movie entity operations."""

    model = Movie
    eager_relations = ("characters",)

    def __init__(self, session: Session) -> None:
        """Initialize movie repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def get_by_franchise(self, franchise_id: int) -> list[Movie]:
        """Get movies belonging to a franchise.

        Args:
            franchise_id: Franchise primary key.

        Returns:
            Movies ordered by id.
        """
        return self.find_all_where(Movie.franchise_id == franchise_id)

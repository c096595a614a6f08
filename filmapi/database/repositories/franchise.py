"""Franchise repository.

Provides CRUD operations for franchises.
"""

from sqlalchemy.orm import Session

from filmapi.database.models import Franchise
from filmapi.database.repositories.base import BaseRepository


class FranchiseRepository(BaseRepository[Franchise]):
    """Repository for Franchise entity operations."""

    model = Franchise
    eager_relations = ("movies",)

    def __init__(self, session: Session) -> None:
        """Initialize franchise repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

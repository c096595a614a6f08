"""Franchise service.

Franchise membership is stored on Movie.franchise_id. The characters of
a franchise are derived: every character with at least one movie in it.
"""

from collections.abc import Iterable

from filmapi.database.models import Character, Franchise, Movie
from filmapi.database.repositories import (
    CharacterRepository,
    FranchiseRepository,
    MovieRepository,
)
from filmapi.services.associations import FRANCHISE_MOVIES
from filmapi.services.crud import CrudService, EntityPolicy
from filmapi.services.kinds import EntityKind


class FranchiseService(CrudService[Franchise]):
    """CRUD plus movie membership for franchises."""

    kind = EntityKind.FRANCHISE
    repository_class = FranchiseRepository
    policy = EntityPolicy(
        scalar_fields=("name", "description"),
        clear_on_delete=(FRANCHISE_MOVIES,),
    )

    def get_movies(self, franchise_id: int) -> list[Movie]:
        """Get the movies of a franchise.

        Args:
            franchise_id: Franchise primary key.

        Returns:
            Movies ordered by id.

        Raises:
            EntityNotFoundError: If the franchise does not exist.
        """
        self._oracle.require(self.kind, franchise_id)
        return MovieRepository(self._session).get_by_franchise(franchise_id)

    def get_characters(self, franchise_id: int) -> list[Character]:
        """Get every character appearing in at least one movie of a franchise.

        Args:
            franchise_id: Franchise primary key.

        Returns:
            Distinct characters ordered by id.

        Raises:
            EntityNotFoundError: If the franchise does not exist.
        """
        self._oracle.require(self.kind, franchise_id)
        return CharacterRepository(self._session).get_by_franchise(franchise_id)

    def update_movies(self, franchise_id: int, movie_ids: Iterable[int]) -> Franchise:
        """Make ``movie_ids`` the complete movie list of a franchise.

        Movies dropped from the list keep existing without a franchise.
        Movies taken from another franchise move to this one.

        Args:
            franchise_id: Franchise primary key.
            movie_ids: Movie primary keys.

        Returns:
            The franchise with its new movies.

        Raises:
            EntityNotFoundError: Franchise or a movie does not exist.
        """
        return self._synchronizer.sync_relationship(FRANCHISE_MOVIES, franchise_id, movie_ids)

"""Movie service.

A movie is added into an existing franchise. Its character edges are
managed through update_characters; deleting a movie takes its
character_movie rows with it.
"""

from collections.abc import Iterable

from filmapi.database.models import Character, Movie
from filmapi.database.repositories import MovieRepository
from filmapi.services.associations import MOVIE_CHARACTERS
from filmapi.services.crud import CrudService, EntityPolicy
from filmapi.services.kinds import EntityKind


class MovieService(CrudService[Movie]):
    """CRUD plus character association management for movies."""

    kind = EntityKind.MOVIE
    repository_class = MovieRepository
    policy = EntityPolicy(
        scalar_fields=("title", "genre", "release_year", "director", "picture_url", "trailer_url"),
        required_references={"franchise_id": EntityKind.FRANCHISE},
    )

    def get_characters(self, movie_id: int) -> list[Character]:
        """Get the characters appearing in a movie.

        Args:
            movie_id: Movie primary key.

        Returns:
            Characters ordered by id.

        Raises:
            EntityNotFoundError: If the movie does not exist.
        """
        return list(self.get_by_id(movie_id).characters)

    def update_characters(self, movie_id: int, character_ids: Iterable[int]) -> Movie:
        """Replace the characters appearing in a movie.

        Args:
            movie_id: Movie primary key.
            character_ids: Character primary keys.

        Returns:
            The movie with its new characters.

        Raises:
            EntityNotFoundError: Movie or a character does not exist.
        """
        return self._synchronizer.sync_relationship(MOVIE_CHARACTERS, movie_id, character_ids)

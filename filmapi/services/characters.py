"""Character service."""

from collections.abc import Iterable

from filmapi.database.models import Character
from filmapi.database.repositories import CharacterRepository
from filmapi.services.associations import CHARACTER_MOVIES
from filmapi.services.crud import CrudService, EntityPolicy
from filmapi.services.kinds import EntityKind


class CharacterService(CrudService[Character]):
    """CRUD plus movie association management for characters."""

    kind = EntityKind.CHARACTER
    repository_class = CharacterRepository
    policy = EntityPolicy(
        scalar_fields=("full_name", "alias", "gender", "picture_url"),
        clear_on_delete=(CHARACTER_MOVIES,),
    )

    def update_movies(self, character_id: int, movie_ids: Iterable[int]) -> Character:
        """Replace the movies a character appears in.

        At most five ids may be given. Duplicates collapse and an empty
        list removes every movie.

        Args:
            character_id: Character primary key.
            movie_ids: Movie primary keys.

        Returns:
            The character with its new movies.

        Raises:
            EntityNotFoundError: Character or a movie does not exist.
            EntityValidationError: More than five ids were given.
        """
        return self._synchronizer.sync_relationship(CHARACTER_MOVIES, character_id, movie_ids)

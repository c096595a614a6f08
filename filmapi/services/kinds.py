"""Entity kinds known to the catalog and the repositories serving them."""

from enum import StrEnum

from filmapi.database.repositories import (
    BaseRepository,
    CharacterRepository,
    FranchiseRepository,
    MovieRepository,
)


class EntityKind(StrEnum):
    """Catalog entity kinds."""

    CHARACTER = "Character"
    MOVIE = "Movie"
    FRANCHISE = "Franchise"


_REPOSITORIES: dict[EntityKind, type[BaseRepository]] = {
    EntityKind.CHARACTER: CharacterRepository,
    EntityKind.MOVIE: MovieRepository,
    EntityKind.FRANCHISE: FranchiseRepository,
}


def repository_for(kind: EntityKind) -> type[BaseRepository]:
    """Return the repository class serving ``kind``."""
    return _REPOSITORIES[kind]

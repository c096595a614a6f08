"""Catalog services for the Film API.

Entity services own the transaction-free business rules; callers pass
a session from a transactional scope and commit through it.

Usage:
    from filmapi.database import get_database
    from filmapi.services import CharacterService

    with get_database().session() as session:
        CharacterService(session).update_movies(2, [1, 3])
"""

from filmapi.services.associations import (
    CHARACTER_MOVIES,
    FRANCHISE_MOVIES,
    MAX_MOVIES_PER_CHARACTER,
    MOVIE_CHARACTERS,
    AssociationSynchronizer,
    Relationship,
    get_relationship,
)
from filmapi.services.characters import CharacterService
from filmapi.services.crud import CrudService, EntityPolicy
from filmapi.services.exceptions import (
    CatalogError,
    EntityNotFoundError,
    EntityValidationError,
)
from filmapi.services.existence import ExistenceOracle
from filmapi.services.franchises import FranchiseService
from filmapi.services.kinds import EntityKind
from filmapi.services.movies import MovieService

__all__ = [
    # Kinds and errors
    "EntityKind",
    "CatalogError",
    "EntityNotFoundError",
    "EntityValidationError",
    # Core
    "ExistenceOracle",
    "AssociationSynchronizer",
    "Relationship",
    "get_relationship",
    "CHARACTER_MOVIES",
    "MOVIE_CHARACTERS",
    "FRANCHISE_MOVIES",
    "MAX_MOVIES_PER_CHARACTER",
    # Entity services
    "CrudService",
    "EntityPolicy",
    "CharacterService",
    "MovieService",
    "FranchiseService",
]

"""Character endpoints for REST API.

Provides CRUD endpoints for characters and replacement of the
movies a character appears in.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from filmapi.api.database import DbSession
from filmapi.api.schemas import CharacterCreate, CharacterRead, CharacterUpdate
from filmapi.services import CharacterService

router = APIRouter(prefix="/characters", tags=["Characters"])


# =============================================================================
# DEPENDENCIES
# =============================================================================


def get_character_service(db: DbSession) -> CharacterService:
    """Build the character service on the request session.

    Args:
        db: Database session.

    Returns:
        CharacterService bound to the request transaction.
    """
    return CharacterService(db)


CharacterServiceDep = Annotated[
    CharacterService, Depends(get_character_service, scope="function")
]


# =============================================================================
# ENDPOINTS
# =============================================================================


@router.get(
    "",
    response_model=list[CharacterRead],
    summary="List characters",
    description="Get every character with the ids of its movies.",
)
def list_characters(service: CharacterServiceDep) -> list[CharacterRead]:
    """Get all characters.

    Args:
        service: Character service.

    Returns:
        Characters ordered by id.
    """
    return [CharacterRead.model_validate(c) for c in service.get_all()]


@router.get(
    "/{character_id}",
    response_model=CharacterRead,
    summary="Get character",
)
def get_character(character_id: int, service: CharacterServiceDep) -> CharacterRead:
    """Get character by ID.

    Args:
        character_id: Character primary key.
        service: Character service.

    Returns:
        Character with movie ids.
    """
    return CharacterRead.model_validate(service.get_by_id(character_id))


@router.post(
    "",
    response_model=CharacterRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create character",
)
def create_character(
    payload: CharacterCreate,
    request: Request,
    response: Response,
    service: CharacterServiceDep,
) -> CharacterRead:
    """Create a character.

    Args:
        payload: Character fields.
        request: Incoming request, used to build the Location header.
        response: Outgoing response.
        service: Character service.

    Returns:
        The created character.
    """
    character = service.add(payload.model_dump())
    response.headers["Location"] = str(request.url_for("get_character", character_id=character.id))
    return CharacterRead.model_validate(character)


@router.put(
    "/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update character",
)
def update_character(
    character_id: int,
    payload: CharacterUpdate,
    service: CharacterServiceDep,
) -> None:
    """Overwrite the scalar fields of a character.

    Args:
        character_id: Character primary key.
        payload: Character fields, including the id.
        service: Character service.

    Raises:
        HTTPException: 400 if the body id differs from the path id.
    """
    if payload.id != character_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Body id does not match path id",
        )
    service.update(character_id, payload.model_dump(exclude={"id"}))


@router.put(
    "/{character_id}/movies",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace character movies",
    description="Replace the movies of a character (at most 5 ids).",
)
def update_character_movies(
    character_id: int,
    movie_ids: Annotated[list[int], Body()],
    service: CharacterServiceDep,
) -> None:
    """Replace the movies a character appears in.

    Args:
        character_id: Character primary key.
        movie_ids: Movie primary keys.
        service: Character service.
    """
    service.update_movies(character_id, movie_ids)


@router.delete(
    "/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete character",
)
def delete_character(character_id: int, service: CharacterServiceDep) -> None:
    """Delete a character and its movie edges.

    Args:
        character_id: Character primary key.
        service: Character service.
    """
    service.delete(character_id)

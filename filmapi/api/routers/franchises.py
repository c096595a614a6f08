"""Franchise endpoints for REST API.

Provides CRUD endpoints for franchises, their movie list and the
characters derived from that list.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from filmapi.api.database import DbSession
from filmapi.api.schemas import (
    CharacterRead,
    FranchiseCreate,
    FranchiseRead,
    FranchiseUpdate,
    MovieRead,
)
from filmapi.services import FranchiseService

router = APIRouter(prefix="/franchises", tags=["Franchises"])


# =============================================================================
# DEPENDENCIES
# =============================================================================


def get_franchise_service(db: DbSession) -> FranchiseService:
    """Build the franchise service on the request session."""
    return FranchiseService(db)


FranchiseServiceDep = Annotated[
    FranchiseService, Depends(get_franchise_service, scope="function")
]


# =============================================================================
# ENDPOINTS
# =============================================================================


@router.get("", response_model=list[FranchiseRead], summary="List franchises")
def list_franchises(service: FranchiseServiceDep) -> list[FranchiseRead]:
    """Get all franchises with their movie ids."""
    return [FranchiseRead.model_validate(f) for f in service.get_all()]


@router.get("/{franchise_id}", response_model=FranchiseRead, summary="Get franchise")
def get_franchise(franchise_id: int, service: FranchiseServiceDep) -> FranchiseRead:
    """Get franchise by ID."""
    return FranchiseRead.model_validate(service.get_by_id(franchise_id))


@router.get(
    "/{franchise_id}/movies",
    response_model=list[MovieRead],
    summary="List franchise movies",
)
def get_franchise_movies(franchise_id: int, service: FranchiseServiceDep) -> list[MovieRead]:
    """Get the movies of a franchise."""
    return [MovieRead.model_validate(m) for m in service.get_movies(franchise_id)]


@router.get(
    "/{franchise_id}/characters",
    response_model=list[CharacterRead],
    summary="List franchise characters",
    description="Characters appearing in at least one movie of the franchise.",
)
def get_franchise_characters(
    franchise_id: int,
    service: FranchiseServiceDep,
) -> list[CharacterRead]:
    """Get the characters of a franchise."""
    return [CharacterRead.model_validate(c) for c in service.get_characters(franchise_id)]


@router.post(
    "",
    response_model=FranchiseRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create franchise",
)
def create_franchise(
    payload: FranchiseCreate,
    request: Request,
    response: Response,
    service: FranchiseServiceDep,
) -> FranchiseRead:
    """Create a franchise.

    Args:
        payload: Franchise fields.
        request: Incoming request, used to build the Location header.
        response: Outgoing response.
        service: Franchise service.

    Returns:
        The created franchise.
    """
    franchise = service.add(payload.model_dump())
    response.headers["Location"] = str(
        request.url_for("get_franchise", franchise_id=franchise.id)
    )
    return FranchiseRead.model_validate(franchise)


@router.put(
    "/{franchise_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update franchise",
)
def update_franchise(
    franchise_id: int,
    payload: FranchiseUpdate,
    service: FranchiseServiceDep,
) -> None:
    """Overwrite the scalar fields of a franchise.

    Raises:
        HTTPException: 400 if the body id differs from the path id.
    """
    if payload.id != franchise_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Body id does not match path id",
        )
    service.update(franchise_id, payload.model_dump(exclude={"id"}))


@router.put(
    "/{franchise_id}/movies",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace franchise movies",
    description="Movies left out lose their franchise; listed movies move here.",
)
def update_franchise_movies(
    franchise_id: int,
    movie_ids: Annotated[list[int], Body()],
    service: FranchiseServiceDep,
) -> None:
    """Replace the movies of a franchise."""
    service.update_movies(franchise_id, movie_ids)


@router.delete(
    "/{franchise_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete franchise",
)
def delete_franchise(franchise_id: int, service: FranchiseServiceDep) -> None:
    """Delete a franchise; its movies remain without a franchise."""
    service.delete(franchise_id)

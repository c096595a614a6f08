"""Movie endpoints for REST API."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from filmapi.api.database import DbSession
from filmapi.api.schemas import CharacterRead, MovieCreate, MovieRead, MovieUpdate
from filmapi.services import MovieService

router = APIRouter(prefix="/movies", tags=["Movies"])


def get_movie_service(db: DbSession) -> MovieService:
    """Build the movie service on the request session."""
    return MovieService(db)


MovieServiceDep = Annotated[
    MovieService, Depends(get_movie_service, scope="function")
]


@router.get("", response_model=list[MovieRead], summary="List movies")
def list_movies(service: MovieServiceDep) -> list[MovieRead]:
    """Get all movies with their character ids."""
    return [MovieRead.model_validate(m) for m in service.get_all()]


@router.get("/{movie_id}", response_model=MovieRead, summary="Get movie")
def get_movie(movie_id: int, service: MovieServiceDep) -> MovieRead:
    """Get movie by ID."""
    return MovieRead.model_validate(service.get_by_id(movie_id))


@router.get(
    "/{movie_id}/characters",
    response_model=list[CharacterRead],
    summary="List movie characters",
)
def get_movie_characters(movie_id: int, service: MovieServiceDep) -> list[CharacterRead]:
    """Get the characters appearing in a movie."""
    return [CharacterRead.model_validate(c) for c in service.get_characters(movie_id)]


@router.post(
    "",
    response_model=MovieRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create movie",
    description="Create a movie inside an existing franchise.",
)
def create_movie(
    payload: MovieCreate,
    request: Request,
    response: Response,
    service: MovieServiceDep,
) -> MovieRead:
    """Create a movie.

    Args:
        payload: Movie fields and franchise id.
        request: Incoming request, used to build the Location header.
        response: Outgoing response.
        service: Movie service.

    Returns:
        The created movie.
    """
    movie = service.add(payload.model_dump())
    response.headers["Location"] = str(request.url_for("get_movie", movie_id=movie.id))
    return MovieRead.model_validate(movie)


@router.put("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Update movie")
def update_movie(movie_id: int, payload: MovieUpdate, service: MovieServiceDep) -> None:
    """Overwrite the scalar fields of a movie.

    Raises:
        HTTPException: 400 if the body id differs from the path id.
    """
    if payload.id != movie_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Body id does not match path id",
        )
    service.update(movie_id, payload.model_dump(exclude={"id"}))


@router.put(
    "/{movie_id}/characters",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace movie characters",
)
def update_movie_characters(
    movie_id: int,
    character_ids: Annotated[list[int], Body()],
    service: MovieServiceDep,
) -> None:
    """Replace the characters appearing in a movie."""
    service.update_characters(movie_id, character_ids)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete movie")
def delete_movie(movie_id: int, service: MovieServiceDep) -> None:
    """Delete a movie; its character edges go with it."""
    service.delete(movie_id)

"""Pydantic schemas for API request/response validation.

Related entities are exposed as lists of ids, never as nested objects.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _to_ids(value: Any) -> Any:
    """Reduce a loaded ORM collection to its primary keys."""
    if value is None:
        return []
    return [getattr(item, "id", item) for item in value]


# =============================================================================
# HEALTH
# =============================================================================


class DatabaseComponentHealth(BaseModel):
    """Database connection health status."""

    connected: bool = False
    dialect: str | None = None


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(examples=["healthy"])
    version: str = Field(examples=["1.0.0"])
    database: DatabaseComponentHealth = Field(default_factory=DatabaseComponentHealth)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# =============================================================================
# CHARACTERS
# =============================================================================


class CharacterCreate(BaseModel):
    """Character creation payload."""

    full_name: str = Field(min_length=1, max_length=50, examples=["Jane Doe"])
    alias: str | None = Field(default=None, max_length=50, examples=["Wonder Woman"])
    gender: str = Field(max_length=50, examples=["Female"])
    picture_url: str = Field(max_length=255, examples=["jane_doe.jpg"])


class CharacterUpdate(CharacterCreate):
    """Character replacement payload; ``id`` must match the path."""

    id: int


class CharacterRead(BaseModel):
    """Character with the ids of its movies."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    alias: str | None = None
    gender: str
    picture_url: str
    movies: list[int] = Field(default_factory=list)

    @field_validator("movies", mode="before")
    @classmethod
    def movie_ids(cls, v: Any) -> Any:
        """Accept the ORM collection of movies."""
        return _to_ids(v)


# =============================================================================
# MOVIES
# =============================================================================


class MovieCreate(BaseModel):
    """Movie creation payload. A movie is always added into a franchise."""

    title: str = Field(min_length=1, max_length=50, examples=["Avengers: Endgame"])
    genre: str = Field(max_length=50, examples=["Action, Adventure"])
    release_year: int = Field(ge=1850, le=2200, examples=[2019])
    director: str = Field(max_length=50, examples=["Anthony and Joe Russo"])
    picture_url: str = Field(max_length=255)
    trailer_url: str = Field(max_length=255)
    franchise_id: int


class MovieUpdate(BaseModel):
    """Movie replacement payload; the franchise is not changed here."""

    id: int
    title: str = Field(min_length=1, max_length=50)
    genre: str = Field(max_length=50)
    release_year: int = Field(ge=1850, le=2200)
    director: str = Field(max_length=50)
    picture_url: str = Field(max_length=255)
    trailer_url: str = Field(max_length=255)


class MovieRead(BaseModel):
    """Movie with its franchise id and the ids of its characters."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    genre: str
    release_year: int
    director: str
    picture_url: str
    trailer_url: str
    franchise_id: int | None = None
    characters: list[int] = Field(default_factory=list)

    @field_validator("characters", mode="before")
    @classmethod
    def character_ids(cls, v: Any) -> Any:
        """Accept the ORM collection of characters."""
        return _to_ids(v)


# =============================================================================
# FRANCHISES
# =============================================================================


class FranchiseCreate(BaseModel):
    """Franchise creation payload."""

    name: str = Field(min_length=1, max_length=50, examples=["Marvel Cinematic Universe"])
    description: str = Field(max_length=100)


class FranchiseUpdate(FranchiseCreate):
    """Franchise replacement payload; ``id`` must match the path."""

    id: int


class FranchiseRead(BaseModel):
    """Franchise with the ids of its movies."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    movies: list[int] = Field(default_factory=list)

    @field_validator("movies", mode="before")
    @classmethod
    def movie_ids(cls, v: Any) -> Any:
        """Accept the ORM collection of movies."""
        return _to_ids(v)

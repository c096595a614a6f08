"""SQLAlchemy ORM models for the Film API database.

This module exports all database models and the Base class
for use throughout the application.

Usage:
    from filmapi.database.models import Base, Character, Movie, Franchise

Tables:
    - characters: Movie characters
    - movies: Movies (nullable franchise_id foreign key)
    - franchises: Movie franchises
    - character_movie: Character-Movie association
"""

from filmapi.database.models.base import Base, TimestampMixin
from filmapi.database.models.character import Character
from filmapi.database.models.character_movie import CharacterMovie
from filmapi.database.models.franchise import Franchise
from filmapi.database.models.movie import Movie

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Catalog models
    "Character",
    "Movie",
    "Franchise",
    # Associations
    "CharacterMovie",
]

"""CharacterMovie association table.

Many-to-many relationship between Character and Movie.
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from filmapi.database.models.base import Base


class CharacterMovie(Base):
    """Association table for Character-Movie relationship.

    One row per edge; the composite primary key collapses duplicates.

    Attributes:
        character_id: Foreign key to characters.
        movie_id: Foreign key to movies.
    """

    __tablename__ = "character_movie"

    character_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("characters.id", ondelete="CASCADE"),
        primary_key=True,
    )
    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("movies.id", ondelete="CASCADE"),
        primary_key=True,
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<CharacterMovie(character_id={self.character_id}, movie_id={self.movie_id})>"

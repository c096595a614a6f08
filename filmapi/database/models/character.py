"""Character model.

A character appearing in one or more movies.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmapi.database.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from filmapi.database.models.movie import Movie


class Character(Base, TimestampMixin):
    """Movie character.

    Attributes:
        id: Primary key, assigned by the store.
        full_name: Character full name.
        alias: Optional alias (e.g. a hero name).
        gender: Gender label.
        picture_url: Picture reference.
        movies: Movies the character appears in (character_movie edges).
    """

    __tablename__ = "characters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    full_name: Mapped[str] = mapped_column(String(50), nullable=False)
    alias: Mapped[str | None] = mapped_column(String(50))
    gender: Mapped[str] = mapped_column(String(50), nullable=False)
    picture_url: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    movies: Mapped[list["Movie"]] = relationship(
        "Movie",
        secondary="character_movie",
        back_populates="characters",
        order_by="Movie.id",
    )

    @property
    def movie_ids(self) -> list[int]:
        """Identifiers of associated movies."""
        return [movie.id for movie in self.movies]

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Character(id={self.id}, full_name='{self.full_name}')>"

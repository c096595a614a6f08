"""Franchise model.

Groups movies through Movie.franchise_id (one-to-many).
"""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmapi.database.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from filmapi.database.models.movie import Movie


class Franchise(Base, TimestampMixin):
    """Movie franchise.

    Attributes:
        id: Primary key, assigned by the store.
        name: Franchise name.
        description: Short description.
        movies: Movies whose franchise_id points here.
    """

    __tablename__ = "franchises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(String(100), nullable=False)

    # Relationships
    movies: Mapped[list["Movie"]] = relationship(
        "Movie",
        back_populates="franchise",
        order_by="Movie.id",
    )

    @property
    def movie_ids(self) -> list[int]:
        """Identifiers of movies in the franchise."""
        return [movie.id for movie in self.movies]

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Franchise(id={self.id}, name='{self.name}')>"

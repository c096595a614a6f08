"""Movie model.

Owns the foreign key to Franchise and the inverse side of the
Character-Movie edge set.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmapi.database.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from filmapi.database.models.character import Character
    from filmapi.database.models.franchise import Franchise


class Movie(Base, TimestampMixin):
    """Movie entity.

    Attributes:
        id: Primary key, assigned by the store.
        title: Movie title.
        genre: Genre label (free text, e.g. 'Action, Adventure').
        release_year: Year of release.
        director: Director name(s).
        picture_url: Poster reference.
        trailer_url: Trailer reference.
        franchise_id: Optional foreign key to franchises.
    """

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    genre: Mapped[str] = mapped_column(String(50), nullable=False)
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    director: Mapped[str] = mapped_column(String(50), nullable=False)
    picture_url: Mapped[str] = mapped_column(String(255), nullable=False)
    trailer_url: Mapped[str] = mapped_column(String(255), nullable=False)
    franchise_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("franchises.id", ondelete="SET NULL"),
        index=True,
    )

    # Relationships
    franchise: Mapped["Franchise | None"] = relationship(
        "Franchise",
        back_populates="movies",
    )
    characters: Mapped[list["Character"]] = relationship(
        "Character",
        secondary="character_movie",
        back_populates="movies",
        order_by="Character.id",
    )

    @property
    def character_ids(self) -> list[int]:
        """Identifiers of associated characters."""
        return [character.id for character in self.characters]

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Movie(id={self.id}, title='{self.title}')>"

"""Tests for the generic and entity repositories."""

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from filmapi.database.models import Character, CharacterMovie, Franchise, Movie
from filmapi.database.repositories import (
    CharacterRepository,
    FranchiseRepository,
    MovieRepository,
)


class TestBaseRepositoryReads:
    """Tests for lookup helpers."""

    @staticmethod
    def test_get_by_id_missing(seeded_session: Session) -> None:
        assert MovieRepository(seeded_session).get_by_id(999) is None

    @staticmethod
    def test_get_with_relations_loads_collection(seeded_session: Session) -> None:
        character = CharacterRepository(seeded_session).get_with_relations(2)

        assert character is not None
        assert "movies" in character.__dict__
        assert character.movie_ids == [1, 2]

    @staticmethod
    def test_get_all_with_relations_ordered(seeded_session: Session) -> None:
        franchises = FranchiseRepository(seeded_session).get_all_with_relations()

        assert [f.id for f in franchises] == [1, 2]

    @staticmethod
    def test_get_many_by_ids_skips_unknown(seeded_session: Session) -> None:
        movies = MovieRepository(seeded_session).get_many_by_ids([3, 99, 1])

        assert [m.id for m in movies] == [1, 3]

    @staticmethod
    def test_get_many_by_ids_empty(seeded_session: Session) -> None:
        assert MovieRepository(seeded_session).get_many_by_ids([]) == []

    @staticmethod
    def test_exists(seeded_session: Session) -> None:
        repository = FranchiseRepository(seeded_session)

        assert repository.exists(1) is True
        assert repository.exists(3) is False

    @staticmethod
    def test_existing_ids(seeded_session: Session) -> None:
        assert CharacterRepository(seeded_session).existing_ids([1, 5, 3]) == {1, 3}

    @staticmethod
    def test_count(seeded_session: Session) -> None:
        assert MovieRepository(seeded_session).count() == 3

    @staticmethod
    def test_find_all_where(seeded_session: Session) -> None:
        movies = MovieRepository(seeded_session).find_all_where(Movie.release_year >= 2020)

        assert [m.id for m in movies] == [2, 3]


class TestBaseRepositoryWrites:
    """Tests for write helpers."""

    @staticmethod
    def test_create_assigns_id(session: Session) -> None:
        franchise = FranchiseRepository(session).create(
            Franchise(name="Star Wars", description="Space opera")
        )

        assert franchise.id is not None

    @staticmethod
    def test_create_many(session: Session) -> None:
        repository = FranchiseRepository(session)

        repository.create_many(
            [
                Franchise(name="A", description="first"),
                Franchise(name="B", description="second"),
            ]
        )

        assert repository.count() == 2

    @staticmethod
    def test_update_fields(seeded_session: Session) -> None:
        repository = FranchiseRepository(seeded_session)
        franchise = repository.get_by_id(2)

        repository.update_fields(2, {"name": "DC Extended Universe"})

        assert franchise.name == "DC Extended Universe"

    @staticmethod
    def test_update_fields_empty_is_noop(seeded_session: Session) -> None:
        FranchiseRepository(seeded_session).update_fields(2, {})

        assert FranchiseRepository(seeded_session).get_by_id(2).name == "Wonder Woman"

    @staticmethod
    def test_delete_by_id(seeded_session: Session) -> None:
        repository = FranchiseRepository(seeded_session)

        assert repository.delete_by_id(2) is True
        assert repository.delete_by_id(2) is False


class TestEntityRepositories:
    """Tests for entity-specific queries."""

    @staticmethod
    def test_movies_by_franchise(seeded_session: Session) -> None:
        movies = MovieRepository(seeded_session).get_by_franchise(1)

        assert [m.id for m in movies] == [1, 3]

    @staticmethod
    @pytest.mark.parametrize(("franchise_id", "expected"), [(1, [1, 2, 3]), (2, [2]), (3, [])])
    def test_characters_by_franchise(
        seeded_session: Session,
        franchise_id: int,
        expected: list[int],
    ) -> None:
        characters = CharacterRepository(seeded_session).get_by_franchise(franchise_id)

        assert [c.id for c in characters] == expected


class TestSchemaConstraints:
    """Tests for store-level integrity."""

    @staticmethod
    def test_deleting_movie_row_cascades_edges(seeded_session: Session) -> None:
        """ON DELETE CASCADE on character_movie, with foreign keys enforced."""
        from sqlalchemy import delete

        seeded_session.execute(delete(Movie).where(Movie.id == 1))
        seeded_session.flush()

        rows = seeded_session.scalars(
            select(CharacterMovie.character_id).where(CharacterMovie.movie_id == 1)
        ).all()
        assert rows == []

    @staticmethod
    def test_dangling_edge_rejected(seeded_session: Session) -> None:
        from sqlalchemy.exc import IntegrityError

        seeded_session.add(CharacterMovie(character_id=1, movie_id=999))
        with pytest.raises(IntegrityError):
            seeded_session.flush()
        seeded_session.rollback()

    @staticmethod
    def test_character_repr(seeded_session: Session) -> None:
        character = seeded_session.get(Character, 1)

        assert repr(character) == "<Character(id=1, full_name='John Smith')>"

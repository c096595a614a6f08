"""Tests for the existence oracle."""

import pytest
from sqlalchemy.orm import Session

from filmapi.services.exceptions import EntityNotFoundError
from filmapi.services.existence import ExistenceOracle
from filmapi.services.kinds import EntityKind


class TestExists:
    """Tests for ExistenceOracle.exists."""

    @staticmethod
    @pytest.mark.parametrize(
        ("kind", "entity_id"),
        [
            (EntityKind.CHARACTER, 3),
            (EntityKind.MOVIE, 1),
            (EntityKind.FRANCHISE, 2),
        ],
    )
    def test_existing_row(seeded_session: Session, kind: EntityKind, entity_id: int) -> None:
        """Seeded rows are reported as present."""
        assert ExistenceOracle(seeded_session).exists(kind, entity_id) is True

    @staticmethod
    def test_missing_row_returns_false(seeded_session: Session) -> None:
        """Absence is a normal outcome, not an error."""
        assert ExistenceOracle(seeded_session).exists(EntityKind.MOVIE, 999) is False

    @staticmethod
    def test_sees_uncommitted_rows_of_same_session(seeded_session: Session) -> None:
        """Checks share the transactional view of the caller."""
        from filmapi.database.models import Franchise

        franchise = Franchise(name="Star Wars", description="Space opera")
        seeded_session.add(franchise)
        seeded_session.flush()

        assert ExistenceOracle(seeded_session).exists(EntityKind.FRANCHISE, franchise.id)


class TestFirstMissing:
    """Tests for ExistenceOracle.first_missing."""

    @staticmethod
    def test_all_present(seeded_session: Session) -> None:
        """No id is reported when all exist."""
        oracle = ExistenceOracle(seeded_session)
        assert oracle.first_missing(EntityKind.MOVIE, [3, 1, 2]) is None

    @staticmethod
    def test_empty_input(seeded_session: Session) -> None:
        """An empty list has nothing missing."""
        assert ExistenceOracle(seeded_session).first_missing(EntityKind.MOVIE, []) is None

    @staticmethod
    def test_reports_first_in_input_order(seeded_session: Session) -> None:
        """The first absent id in the given order wins, not the smallest."""
        oracle = ExistenceOracle(seeded_session)
        assert oracle.first_missing(EntityKind.MOVIE, [1, 50, 2, 7]) == 50


class TestRequire:
    """Tests for the raising helpers."""

    @staticmethod
    def test_require_passes(seeded_session: Session) -> None:
        """An existing row does not raise."""
        ExistenceOracle(seeded_session).require(EntityKind.CHARACTER, 1)

    @staticmethod
    def test_require_raises_not_found(seeded_session: Session) -> None:
        """A missing row raises with kind and id."""
        with pytest.raises(EntityNotFoundError) as exc_info:
            ExistenceOracle(seeded_session).require(EntityKind.FRANCHISE, 999)

        assert exc_info.value.kind is EntityKind.FRANCHISE
        assert exc_info.value.entity_id == 999
        assert str(exc_info.value) == "Franchise with id 999 was not found"

    @staticmethod
    def test_require_all_raises_for_first_missing(seeded_session: Session) -> None:
        """require_all reports the first missing id."""
        with pytest.raises(EntityNotFoundError) as exc_info:
            ExistenceOracle(seeded_session).require_all(EntityKind.CHARACTER, [2, 9, 8])

        assert exc_info.value.kind is EntityKind.CHARACTER
        assert exc_info.value.entity_id == 9

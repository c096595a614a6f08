"""Existence checks for catalog entities.

Every check runs on the caller's session, so it sees the same
transactional view as the writes that follow it in the same request.
"""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from filmapi.services.exceptions import EntityNotFoundError
from filmapi.services.kinds import EntityKind, repository_for


class ExistenceOracle:
    """Answers whether rows exist, without raising on absence.

    Attributes:
        _session: Database session shared with the calling service.
    """

    def __init__(self, session: Session) -> None:
        """Initialize oracle.

        Args:
            session: SQLAlchemy session instance.
        """
        self._session = session

    def exists(self, kind: EntityKind, entity_id: int) -> bool:
        """Report whether a row of ``kind`` with ``entity_id`` exists.

        Args:
            kind: Entity kind.
            entity_id: Primary key value.

        Returns:
            True if the row exists.
        """
        return repository_for(kind)(self._session).exists(entity_id)

    def first_missing(self, kind: EntityKind, entity_ids: Sequence[int]) -> int | None:
        """Find the first id, in input order, with no matching row.

        Args:
            kind: Entity kind.
            entity_ids: Identifiers to check.

        Returns:
            The first missing id, or None when all exist.
        """
        if not entity_ids:
            return None
        existing = repository_for(kind)(self._session).existing_ids(entity_ids)
        for entity_id in entity_ids:
            if entity_id not in existing:
                return entity_id
        return None

    def require(self, kind: EntityKind, entity_id: int) -> None:
        """Fail unless the row exists.

        Args:
            kind: Entity kind.
            entity_id: Primary key value.

        Raises:
            EntityNotFoundError: If the row does not exist.
        """
        if not self.exists(kind, entity_id):
            raise EntityNotFoundError(kind, entity_id)

    def require_all(self, kind: EntityKind, entity_ids: Sequence[int]) -> None:
        """Fail on the first id, in input order, with no matching row.

        Args:
            kind: Entity kind.
            entity_ids: Identifiers to check.

        Raises:
            EntityNotFoundError: For the first missing id.
        """
        missing = self.first_missing(kind, entity_ids)
        if missing is not None:
            raise EntityNotFoundError(kind, missing)

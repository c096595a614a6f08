"""Association synchronization between catalog entities.

Replaces an owner's full set of related entities with exactly the
requested set. All validation (owner existence, cardinality limit,
target existence) happens before anything is written, so a rejected
request leaves the store as it was.

Two storage shapes sit behind the same operation:

- join table (Character <-> Movie): the owner's ORM collection is
  reassigned and SQLAlchemy emits the DELETE/INSERT rows on
  ``character_movie`` at flush time;
- foreign key (Franchise -> Movie): each movie's ``franchise_id`` is set
  to the owner or cleared.

Usage:
    synchronizer = AssociationSynchronizer(session)
    synchronizer.sync(EntityKind.CHARACTER, 2, EntityKind.MOVIE, [1, 3])
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from filmapi.database.models import Base
from filmapi.monitoring.metrics import ASSOCIATION_SET_SIZE, ASSOCIATION_SYNC_TOTAL
from filmapi.services.exceptions import EntityNotFoundError, EntityValidationError
from filmapi.services.existence import ExistenceOracle
from filmapi.services.kinds import EntityKind, repository_for
from filmapi.utils.logger import setup_logger

logger = setup_logger("services.associations")

MAX_MOVIES_PER_CHARACTER = 5


# =============================================================================
# STORAGE ADAPTERS
# =============================================================================


class AssociationStore(ABC):
    """Persists a validated association set for one owner."""

    @abstractmethod
    def replace(self, session: Session, owner: Base, targets: Sequence[Base]) -> None:
        """Make ``targets`` the complete association set of ``owner``.

        Args:
            session: Session the owner and targets belong to.
            owner: Owner entity, with its collection loaded.
            targets: Distinct, existing related entities.
        """


class JoinTableStore(AssociationStore):
    """Edge set kept in an association table behind an ORM collection.

    Attributes:
        collection: Name of the owner's many-to-many relationship.
    """

    def __init__(self, collection: str) -> None:
        self.collection = collection

    def replace(self, session: Session, owner: Base, targets: Sequence[Base]) -> None:
        setattr(owner, self.collection, list(targets))
        session.flush()


class ForeignKeyStore(AssociationStore):
    """Association kept as a nullable foreign key on the related rows.

    Attributes:
        collection: Name of the owner's one-to-many relationship.
        fk_field: Foreign key column on the related model.
    """

    def __init__(self, collection: str, fk_field: str) -> None:
        self.collection = collection
        self.fk_field = fk_field

    def replace(self, session: Session, owner: Base, targets: Sequence[Base]) -> None:
        keep = {target.id for target in targets}
        for current in getattr(owner, self.collection):
            if current.id not in keep:
                setattr(current, self.fk_field, None)
        for target in targets:
            setattr(target, self.fk_field, owner.id)
        session.flush()
        # Collections and references loaded before the FK writes are stale now.
        session.expire_all()


# =============================================================================
# RELATIONSHIP REGISTRY
# =============================================================================


@dataclass(frozen=True)
class Relationship:
    """A named, synchronizable association.

    Attributes:
        name: Label used in logs and metrics.
        owner_kind: Kind whose association set is replaced.
        related_kind: Kind of the linked entities.
        store: Storage adapter.
        limit: Maximum size of the requested set, or None.
    """

    name: str
    owner_kind: EntityKind
    related_kind: EntityKind
    store: AssociationStore
    limit: int | None = None


CHARACTER_MOVIES = Relationship(
    name="character.movies",
    owner_kind=EntityKind.CHARACTER,
    related_kind=EntityKind.MOVIE,
    store=JoinTableStore("movies"),
    limit=MAX_MOVIES_PER_CHARACTER,
)

MOVIE_CHARACTERS = Relationship(
    name="movie.characters",
    owner_kind=EntityKind.MOVIE,
    related_kind=EntityKind.CHARACTER,
    store=JoinTableStore("characters"),
)

FRANCHISE_MOVIES = Relationship(
    name="franchise.movies",
    owner_kind=EntityKind.FRANCHISE,
    related_kind=EntityKind.MOVIE,
    store=ForeignKeyStore("movies", fk_field="franchise_id"),
)

RELATIONSHIPS: dict[tuple[EntityKind, EntityKind], Relationship] = {
    (rel.owner_kind, rel.related_kind): rel
    for rel in (CHARACTER_MOVIES, MOVIE_CHARACTERS, FRANCHISE_MOVIES)
}


def get_relationship(owner_kind: EntityKind, related_kind: EntityKind) -> Relationship:
    """Look up the relationship declared for an owner/related pair.

    Args:
        owner_kind: Owner entity kind.
        related_kind: Related entity kind.

    Returns:
        The registered Relationship.

    Raises:
        KeyError: If no relationship links the two kinds in that direction.
    """
    return RELATIONSHIPS[(owner_kind, related_kind)]


# =============================================================================
# SYNCHRONIZER
# =============================================================================


class AssociationSynchronizer:
    """Replaces association sets after validating every reference.

    Attributes:
        _session: Database session (the caller's transaction).
        _oracle: Existence oracle on the same session.
    """

    def __init__(self, session: Session, oracle: ExistenceOracle | None = None) -> None:
        """Initialize synchronizer.

        Args:
            session: SQLAlchemy session instance.
            oracle: Existence oracle; built on ``session`` when omitted.
        """
        self._session = session
        self._oracle = oracle or ExistenceOracle(session)

    def sync(
        self,
        owner_kind: EntityKind,
        owner_id: int,
        related_kind: EntityKind,
        target_ids: Iterable[int],
    ) -> Base:
        """Replace the owner's association set with ``target_ids``.

        Args:
            owner_kind: Owner entity kind.
            owner_id: Owner primary key.
            related_kind: Related entity kind.
            target_ids: Requested related ids; duplicates collapse.

        Returns:
            The owner entity with its new associations.

        Raises:
            EntityNotFoundError: Owner or a target does not exist.
            EntityValidationError: Cardinality limit exceeded.
        """
        relationship = get_relationship(owner_kind, related_kind)
        return self.sync_relationship(relationship, owner_id, target_ids)

    def sync_relationship(
        self,
        relationship: Relationship,
        owner_id: int,
        target_ids: Iterable[int],
    ) -> Base:
        """Replace the owner's association set for a known relationship.

        Args:
            relationship: Relationship to synchronize.
            owner_id: Owner primary key.
            target_ids: Requested related ids; duplicates collapse.

        Returns:
            The owner entity with its new associations.
        """
        requested = list(target_ids)
        try:
            self._validate(relationship, owner_id, requested)
        except EntityNotFoundError as exc:
            ASSOCIATION_SYNC_TOTAL.labels(relationship=relationship.name, outcome="not_found").inc()
            logger.warning("Rejected %s sync for %s: %s", relationship.name, owner_id, exc)
            raise
        except EntityValidationError as exc:
            ASSOCIATION_SYNC_TOTAL.labels(relationship=relationship.name, outcome="invalid").inc()
            logger.warning("Rejected %s sync for %s: %s", relationship.name, owner_id, exc)
            raise

        unique_ids = list(dict.fromkeys(requested))
        owner = repository_for(relationship.owner_kind)(self._session).get_with_relations(owner_id)
        targets = repository_for(relationship.related_kind)(self._session).get_many_by_ids(unique_ids)
        relationship.store.replace(self._session, owner, targets)

        ASSOCIATION_SYNC_TOTAL.labels(relationship=relationship.name, outcome="ok").inc()
        ASSOCIATION_SET_SIZE.labels(relationship=relationship.name).observe(len(unique_ids))
        logger.info(
            "Replaced %s for %s %s with %d entries",
            relationship.name,
            relationship.owner_kind,
            owner_id,
            len(unique_ids),
        )
        return owner

    def clear(self, relationship: Relationship, owner_id: int) -> Base:
        """Remove every association of the owner for ``relationship``.

        Args:
            relationship: Relationship to clear.
            owner_id: Owner primary key.

        Returns:
            The owner entity.
        """
        return self.sync_relationship(relationship, owner_id, [])

    def _validate(
        self,
        relationship: Relationship,
        owner_id: int,
        target_ids: list[int],
    ) -> None:
        """Check owner, cardinality and targets, in that order."""
        self._oracle.require(relationship.owner_kind, owner_id)

        if relationship.limit is not None and len(target_ids) > relationship.limit:
            raise EntityValidationError(
                f"A {relationship.owner_kind} can only have {relationship.limit} "
                f"{relationship.related_kind.lower()}s."
            )

        self._oracle.require_all(relationship.related_kind, target_ids)

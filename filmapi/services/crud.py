"""Generic CRUD service shared by the catalog entities.

Each entity service is a subclass that names its kind, repository and
an EntityPolicy. The policy lists the scalar columns Add/Update may
write, the references Add must resolve, and the relationships cleared
before a row is deleted.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from filmapi.database.models import Base
from filmapi.database.repositories import BaseRepository
from filmapi.services.associations import AssociationSynchronizer, Relationship
from filmapi.services.exceptions import EntityNotFoundError, EntityValidationError
from filmapi.services.existence import ExistenceOracle
from filmapi.services.kinds import EntityKind
from filmapi.utils.logger import setup_logger

logger = setup_logger("services.crud")

ModelT = TypeVar("ModelT", bound=Base)


@dataclass(frozen=True)
class EntityPolicy:
    """Entity-specific rules applied by CrudService.

    Attributes:
        scalar_fields: Columns writable through add and update.
        required_references: Foreign key column to the kind it must reference
            when the entity is added.
        clear_on_delete: Relationships owned by the entity, emptied before
            the row is removed.
    """

    scalar_fields: tuple[str, ...]
    required_references: Mapping[str, EntityKind] = field(default_factory=dict)
    clear_on_delete: tuple[Relationship, ...] = ()


class CrudService(Generic[ModelT]):
    """CRUD operations for one entity kind.

    Subclasses set ``kind``, ``repository_class`` and ``policy``. All work
    happens on the session passed in, so the caller's transaction scope
    decides when it is committed or rolled back.

    Attributes:
        kind: Entity kind served.
        repository_class: Repository bound to the entity model.
        policy: Writable fields, references and delete cascade.
    """

    kind: EntityKind
    repository_class: type[BaseRepository]
    policy: EntityPolicy

    def __init__(self, session: Session) -> None:
        """Initialize service.

        Args:
            session: SQLAlchemy session instance.
        """
        self._session = session
        self._repository = self.repository_class(session)
        self._oracle = ExistenceOracle(session)
        self._synchronizer = AssociationSynchronizer(session, self._oracle)

    def get_all(self) -> list[ModelT]:
        """Get every entity, ordered by id, with direct associations loaded."""
        return self._repository.get_all_with_relations()

    def get_by_id(self, entity_id: int) -> ModelT:
        """Get one entity with its direct associations loaded.

        Args:
            entity_id: Primary key value.

        Returns:
            The entity.

        Raises:
            EntityNotFoundError: If no row has this id.
        """
        entity = self._repository.get_with_relations(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.kind, entity_id)
        return entity

    def add(self, fields: Mapping[str, Any]) -> ModelT:
        """Insert a new entity.

        Only policy scalar fields and required references are taken from
        ``fields``; the identifier is assigned by the store.

        Args:
            fields: Column values.

        Returns:
            The persisted entity.

        Raises:
            EntityValidationError: A required reference is missing.
            EntityNotFoundError: A required reference points nowhere.
        """
        values = self._scalar_values(fields)
        for column, referenced_kind in self.policy.required_references.items():
            reference_id = fields.get(column)
            if reference_id is None:
                raise EntityValidationError(f"A {self.kind} requires {column}.")
            self._oracle.require(referenced_kind, reference_id)
            values[column] = reference_id

        entity = self._repository.create(self._repository.model(**values))
        logger.info("Created %s %s", self.kind, entity.id)
        return self.get_by_id(entity.id)

    def update(self, entity_id: int, fields: Mapping[str, Any]) -> ModelT:
        """Overwrite scalar fields of an existing entity.

        Keys outside the policy scalar fields (id, timestamps, foreign keys,
        association lists) are ignored.

        Args:
            entity_id: Primary key value.
            fields: Column values.

        Returns:
            The updated entity.

        Raises:
            EntityNotFoundError: If no row has this id.
        """
        self._oracle.require(self.kind, entity_id)
        self._repository.update_fields(entity_id, self._scalar_values(fields))
        logger.info("Updated %s %s", self.kind, entity_id)
        return self.get_by_id(entity_id)

    def delete(self, entity_id: int) -> None:
        """Delete an entity after clearing the associations it owns.

        Args:
            entity_id: Primary key value.

        Raises:
            EntityNotFoundError: If no row has this id.
        """
        self._oracle.require(self.kind, entity_id)
        for relationship in self.policy.clear_on_delete:
            self._synchronizer.clear(relationship, entity_id)
        self._repository.delete_by_id(entity_id)
        logger.info("Deleted %s %s", self.kind, entity_id)

    def _scalar_values(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Keep only the keys declared as scalar fields."""
        return {name: value for name, value in fields.items() if name in self.policy.scalar_fields}

"""Base repository with generic CRUD operations.

Provides a reusable base class for all repositories with
common database operations.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, exists, func, select, update
from sqlalchemy.orm import Session, selectinload

from filmapi.database.models.base import Base


# Generic type variable bound to Base model
ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic repository providing common CRUD operations.

    Subclasses set ``model`` and may list relationship attributes in
    ``eager_relations``; those are loaded alongside rows returned by the
    ``*_with_relations`` queries.

    Attributes:
        model: SQLAlchemy model class.
        eager_relations: Relationship attribute names loaded eagerly.
    """

    model: type[ModelT]
    eager_relations: tuple[str, ...] = ()

    def __init__(self, session: Session) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session instance.
        """
        self._session = session

    def get_by_id(self, entity_id: int) -> ModelT | None:
        """Retrieve entity by primary key.

        Args:
            entity_id: Primary key value.

        Returns:
            Entity instance or None if not found.
        """
        return self._session.get(self.model, entity_id)

    def get_with_relations(self, entity_id: int) -> ModelT | None:
        """Retrieve entity with its direct associations loaded.

        Args:
            entity_id: Primary key value.

        Returns:
            Entity instance or None if not found.
        """
        stmt = (
            select(self.model)
            .options(*self._eager_options())
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        return self._session.scalars(stmt).first()

    def get_all_with_relations(self) -> list[ModelT]:
        """Retrieve every entity, ordered by id, with associations loaded.

        Returns:
            List of entity instances.
        """
        stmt = (
            select(self.model)
            .options(*self._eager_options())
            .order_by(self.model.id)
            .execution_options(populate_existing=True)
        )
        return list(self._session.scalars(stmt).all())

    def get_many_by_ids(self, entity_ids: Iterable[int]) -> list[ModelT]:
        """Retrieve entities whose primary key is in ``entity_ids``.

        Args:
            entity_ids: Primary key values.

        Returns:
            Matching entities ordered by id. Unknown ids are skipped.
        """
        ids = list(entity_ids)
        if not ids:
            return []
        stmt = select(self.model).where(self.model.id.in_(ids)).order_by(self.model.id)
        return list(self._session.scalars(stmt).all())

    def find_all_where(self, *criteria: ColumnElement[bool]) -> list[ModelT]:
        """Retrieve every entity matching all criteria, ordered by id.

        Args:
            *criteria: SQLAlchemy boolean expressions.

        Returns:
            List of entity instances.
        """
        stmt = select(self.model).where(*criteria).order_by(self.model.id)
        return list(self._session.scalars(stmt).all())

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists by primary key.

        Args:
            entity_id: Primary key value.

        Returns:
            True if entity exists.
        """
        stmt = select(exists().where(self.model.id == entity_id))
        return bool(self._session.scalar(stmt))

    def existing_ids(self, entity_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``entity_ids`` present in the table.

        Args:
            entity_ids: Primary key values.

        Returns:
            Set of ids that exist.
        """
        ids = set(entity_ids)
        if not ids:
            return set()
        stmt = select(self.model.id).where(self.model.id.in_(ids))
        return set(self._session.scalars(stmt).all())

    def count(self) -> int:
        """Count total number of entities.

        Returns:
            Total count.
        """
        stmt = select(func.count()).select_from(self.model)
        result = self._session.execute(stmt).scalar()
        return result or 0

    def create(self, entity: ModelT) -> ModelT:
        """Create a new entity.

        Args:
            entity: Entity instance to persist.

        Returns:
            Persisted entity with generated ID.
        """
        self._session.add(entity)
        self._session.flush()
        return entity

    def create_many(self, entities: list[ModelT]) -> list[ModelT]:
        """Create multiple entities in batch.

        Args:
            entities: List of entity instances.

        Returns:
            List of persisted entities.
        """
        self._session.add_all(entities)
        self._session.flush()
        return entities

    def update_fields(self, entity_id: int, fields: Mapping[str, Any]) -> None:
        """Overwrite scalar columns of one row.

        Instances already loaded in the session are synchronized.

        Args:
            entity_id: Primary key value.
            fields: Column name to new value.
        """
        if not fields:
            return
        stmt = update(self.model).where(self.model.id == entity_id).values(**fields)
        self._session.execute(stmt)
        self._session.flush()

    def delete(self, entity: ModelT) -> None:
        """Delete an entity.

        Args:
            entity: Entity instance to delete.
        """
        self._session.delete(entity)
        self._session.flush()

    def delete_by_id(self, entity_id: int) -> bool:
        """Delete entity by primary key.

        Args:
            entity_id: Primary key value.

        Returns:
            True if entity was deleted, False if not found.
        """
        entity = self.get_by_id(entity_id)
        if entity:
            self.delete(entity)
            return True
        return False

    def _eager_options(self) -> list[Any]:
        """Build loader options for ``eager_relations``."""
        return [selectinload(getattr(self.model, name)) for name in self.eager_relations]

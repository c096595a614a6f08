"""Domain errors raised by the catalog services.

Both kinds are terminal for the current operation: the caller's
transaction scope rolls back and the error is translated into a
user-facing response by the API layer.
"""

from filmapi.services.kinds import EntityKind


class CatalogError(Exception):
    """Base exception for catalog operations."""

    pass


class EntityNotFoundError(CatalogError):
    """Raised when a referenced row does not exist.

    Attributes:
        kind: Entity kind that was looked up.
        entity_id: Identifier that was not found.
    """

    def __init__(self, kind: EntityKind, entity_id: int | None) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} with id {entity_id} was not found")


class EntityValidationError(CatalogError):
    """Raised when a domain rule is violated.

    Attributes:
        reason: Human-readable description of the violated rule.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

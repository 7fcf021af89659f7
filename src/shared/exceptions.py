"""Custom exceptions for the application."""
from typing import Any


class EntityNotFound(Exception):
    """Raised when an entity is not found in the database."""

    def __init__(self, entity_name: str, entity_id: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity that was not found
            entity_id: ID of the entity that was not found
        """
        super().__init__(f"{entity_name} with ID {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id


class NoMatchingEntities(Exception):
    """Raised when a non-blank search term matches no entity."""

    def __init__(self, entity_name: str, term: str):
        super().__init__(f"No {entity_name} found matching '{term}'")
        self.entity_name = entity_name
        self.term = term


class ConflictingEntityFound(Exception):
    """Raised when an entity with a conflicting field already exists."""

    def __init__(self, entity_name: str, field_name: str, field_value: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity
            field_name: Name of the conflicting field
            field_value: Value of the conflicting field
        """
        super().__init__(f"{entity_name} with {field_name} '{field_value}' already exists")
        self.entity_name = entity_name
        self.field_name = field_name
        self.field_value = field_value


class IdentifierMismatch(ValueError):
    """Raised when the ID in the URL differs from the ID in the request body."""

    def __init__(self, path_id: Any, body_id: Any):
        super().__init__(
            f"ID in the URL ({path_id}) doesn't match the ID in the client data ({body_id})"
        )
        self.path_id = path_id
        self.body_id = body_id


class EntityValidationFailed(ValueError):
    """Raised when one or more fields of an entity break a validation rule."""

    def __init__(self, entity_name: str, errors: dict[str, list[str]]):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity being validated
            errors: Messages keyed by the (API) field name they refer to
        """
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid {entity_name} data in field(s): {fields}")
        self.entity_name = entity_name
        self.errors = errors

"""Domain errors raised by the catalog services."""

from fastapi import status


class CatalogError(Exception):
    """Base class for errors that terminate a request with a client error."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(CatalogError):
    """A referenced entity id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} was not found.")


class DuplicateNameError(CatalogError):
    """Another entity already uses this name, ignoring case."""

    def __init__(self, entity: str, name: str, *, rename: bool = False) -> None:
        self.entity = entity
        self.name = name
        if rename:
            message = f"Another {entity.lower()} with name '{name}' already exists."
        else:
            message = f"{entity} with name '{name}' already exists."
        super().__init__(message)


class ReferentialViolationError(CatalogError):
    """A referenced publisher or author does not exist."""


class HasDependentsError(CatalogError):
    """Delete blocked because books still reference the entity."""

    def __init__(self, entity: str, name: str) -> None:
        self.entity = entity
        self.name = name
        super().__init__(
            f"Cannot delete {entity.lower()} '{name}' because they have associated books. "
            "Remove the books first."
        )

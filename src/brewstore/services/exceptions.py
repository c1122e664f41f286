"""Exceptions raised by the CRUD services."""

from __future__ import annotations


class CrudServiceError(RuntimeError):
    """Base class for service-level failures surfaced to callers."""


class NotFoundError(CrudServiceError):
    """Raised when an identifier is supplied but no matching document exists."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidEntityError(CrudServiceError):
    """Raised when required fields are missing from a DTO."""

    def __init__(self, entity: str, missing: tuple[str, ...]) -> None:
        super().__init__(f"{entity} is missing required field(s): {', '.join(missing)}")
        self.entity = entity
        self.missing = missing

"""Domain-level exceptions.

Repository and business rule violations are subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Persistence failures are a separate family (PersistenceError) and are never
raised by the repository itself.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class DuplicateKeyError(DomainException):
    """An entity with the same key is already stored."""

    def __init__(self, entity_name: str, key: int) -> None:
        super().__init__(f"{entity_name} ID {key} already exists.")
        self.key = key


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(self, entity_name: str, key: int) -> None:
        super().__init__(f"{entity_name} ID {key} not found.")
        self.key = key


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidValueError(ValidationError):
    """A field value violates its domain constraint."""

    def __init__(self, field: str, value: object, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class PersistenceError(Exception):
    """Loading or saving through a persistence adapter failed."""

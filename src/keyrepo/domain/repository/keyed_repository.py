"""Generic in-memory repository over keyed entities.

Invariants:
- at most one entity per key at any time
- a failed operation leaves the store exactly as it was

Errors are always raised to the immediate caller; nothing is logged,
swallowed or retried here.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Generic, Protocol, TypeVar

from keyrepo.domain.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    InvalidValueError,
)


class Keyed(Protocol):
    """Anything identified by an integer ``id``."""

    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=Keyed)

FieldValidator = Callable[[object], None]


class KeyedRepository(Generic[T]):

    def __init__(
        self,
        entity_name: str = "Entity",
        validators: Mapping[str, FieldValidator] | None = None,
    ) -> None:
        self._entity_name = entity_name
        self._validators: dict[str, FieldValidator] = dict(validators or {})
        self._items: dict[int, T] = {}
        self._lock = threading.Lock()

    @property
    def entity_name(self) -> str:
        return self._entity_name

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def add(self, entity: T) -> None:
        """Store *entity* under its key.

        Raises DuplicateKeyError if the key is already taken.
        """
        with self._lock:
            if entity.id in self._items:
                raise DuplicateKeyError(self._entity_name, entity.id)
            self._items[entity.id] = entity

    def get_by_id(self, key: int) -> T:
        with self._lock:
            try:
                return self._items[key]
            except KeyError:
                raise EntityNotFoundError(self._entity_name, key) from None

    def remove(self, key: int) -> None:
        with self._lock:
            if key not in self._items:
                raise EntityNotFoundError(self._entity_name, key)
            del self._items[key]

    def update_field(self, key: int, field: str, value: object) -> None:
        """Set one mutable field of a stored entity in place.

        Only the entity's own data fields are updatable; the key, methods
        and special attributes are not.

        The value is validated before the key is looked up, so an invalid
        value is reported even when the key is also missing.
        """
        validator = self._validators.get(field)
        if validator is not None:
            validator(value)

        with self._lock:
            entity = self._items.get(key)
            if entity is None:
                raise EntityNotFoundError(self._entity_name, key)
            if field == "id" or field not in vars(entity):
                raise InvalidValueError(
                    field, value,
                    f"{self._entity_name} has no updatable field '{field}'.",
                )
            setattr(entity, field, value)

    def list_all(self) -> list[T]:
        """Return a snapshot of every entity in insertion order."""
        with self._lock:
            return list(self._items.values())

    def reset(self, entities: Iterable[T]) -> None:
        """Replace the whole content with *entities*.

        Nothing changes if *entities* contains a duplicate key.
        """
        staged: dict[int, T] = {}
        for entity in entities:
            if entity.id in staged:
                raise DuplicateKeyError(self._entity_name, entity.id)
            staged[entity.id] = entity
        with self._lock:
            self._items = staged

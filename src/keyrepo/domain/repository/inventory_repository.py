"""Repository for stocked entities (anything carrying a ``quantity``)."""

from __future__ import annotations

from typing import Protocol, TypeVar

from keyrepo.domain.model.warehouse import ensure_non_negative_quantity
from keyrepo.domain.repository.keyed_repository import KeyedRepository


class Stocked(Protocol):

    @property
    def id(self) -> int: ...

    quantity: int


S = TypeVar("S", bound=Stocked)


class InventoryRepository(KeyedRepository[S]):

    def __init__(self, entity_name: str = "Item") -> None:
        super().__init__(
            entity_name,
            validators={"quantity": ensure_non_negative_quantity},
        )

    def update_quantity(self, key: int, quantity: int) -> None:
        """Raises InvalidValueError for a negative quantity, then
        EntityNotFoundError for an unknown key."""
        self.update_field(key, "quantity", quantity)

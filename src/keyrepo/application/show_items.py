"""Application service: Show Items use case (query)."""

from __future__ import annotations

from keyrepo.application.dto import ItemLineDTO
from keyrepo.domain.model.warehouse import describe, kind_of
from keyrepo.domain.repository.inventory_repository import InventoryRepository


class ShowItemsHandler:

    def __init__(self, item_repo: InventoryRepository) -> None:
        self._item_repo = item_repo

    def handle(self) -> list[ItemLineDTO]:
        return [
            ItemLineDTO(
                id=item.id,
                kind=kind_of(item).value,
                name=item.name,
                quantity=item.quantity,
                description=describe(item),
            )
            for item in self._item_repo.list_all()
        ]

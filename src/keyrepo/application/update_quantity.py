"""Application service: Update Quantity use case."""

from __future__ import annotations

import logging

from keyrepo.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class UpdateQuantityHandler:

    def __init__(self, item_repo: InventoryRepository) -> None:
        self._item_repo = item_repo

    def handle(self, item_id: int, quantity: int) -> None:
        self._item_repo.update_quantity(item_id, quantity)
        logger.info(
            "%s ID %s quantity set to %s",
            self._item_repo.entity_name, item_id, quantity,
        )

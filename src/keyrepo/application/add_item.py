"""Application service: Add Item use case."""

from __future__ import annotations

import logging

from keyrepo.domain.model.warehouse import WarehouseItem, describe, validate
from keyrepo.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(self, item_repo: InventoryRepository) -> None:
        self._item_repo = item_repo

    def handle(self, item: WarehouseItem) -> None:
        """Validate a new item and store it.

        Raises InvalidValueError for a malformed item and DuplicateKeyError
        if its ID is already taken.
        """
        validate(item)
        self._item_repo.add(item)
        logger.info("Added %s", describe(item))

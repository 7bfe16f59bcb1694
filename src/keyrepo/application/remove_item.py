"""Application service: Remove Item use case."""

from __future__ import annotations

import logging

from keyrepo.domain.repository.keyed_repository import KeyedRepository

logger = logging.getLogger(__name__)


class RemoveItemHandler:

    def __init__(self, repo: KeyedRepository) -> None:
        self._repo = repo

    def handle(self, key: int) -> None:
        self._repo.remove(key)
        logger.info("Removed %s ID %s", self._repo.entity_name, key)

"""Application service: Save Records use case."""

from __future__ import annotations

import logging

from keyrepo.domain.model.record import InventoryRecord
from keyrepo.domain.repository.keyed_repository import KeyedRepository
from keyrepo.domain.repository.record_store import RecordStore

logger = logging.getLogger(__name__)


class SaveRecordsHandler:

    def __init__(
        self,
        record_repo: KeyedRepository[InventoryRecord],
        store: RecordStore,
    ) -> None:
        self._record_repo = record_repo
        self._store = store

    def handle(self) -> int:
        """Write every record to the store. Raises PersistenceError on failure."""
        records = self._record_repo.list_all()
        self._store.save(records)
        logger.info("Saved %d inventory record(s)", len(records))
        return len(records)

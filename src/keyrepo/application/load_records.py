"""Application service: Load Records use case.

Reads the whole record sequence from the store before touching the
repository. If reading fails, or the stored data repeats a key, the
repository keeps its previous content and the error goes to the caller.
"""

from __future__ import annotations

import logging

from keyrepo.domain.model.record import InventoryRecord
from keyrepo.domain.repository.keyed_repository import KeyedRepository
from keyrepo.domain.repository.record_store import RecordStore

logger = logging.getLogger(__name__)


class LoadRecordsHandler:

    def __init__(
        self,
        record_repo: KeyedRepository[InventoryRecord],
        store: RecordStore,
    ) -> None:
        self._record_repo = record_repo
        self._store = store

    def handle(self) -> int:
        records = self._store.load()
        self._record_repo.reset(records)
        logger.info("Loaded %d inventory record(s)", len(records))
        return len(records)

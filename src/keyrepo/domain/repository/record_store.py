"""Where inventory records are saved to and loaded from.

Implementations raise PersistenceError on any failure
and must never hand back a partially read result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from keyrepo.domain.model.record import InventoryRecord


class RecordStore(ABC):

    @abstractmethod
    def load(self) -> list[InventoryRecord]:
        """Return every persisted record, in stored order."""

    @abstractmethod
    def save(self, records: list[InventoryRecord]) -> None:
        """Persist the full record sequence, replacing what was there."""

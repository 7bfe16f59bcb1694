"""Test doubles for the persistence port.

FakeRecordStore keeps saved records in a list and can be told to fail
every call with a PersistenceError.
"""

from __future__ import annotations

from keyrepo.domain.exceptions import PersistenceError
from keyrepo.domain.model.record import InventoryRecord
from keyrepo.domain.repository.record_store import RecordStore


class FakeRecordStore(RecordStore):

    def __init__(
        self,
        records: list[InventoryRecord] | None = None,
        fail_with: str | None = None,
    ) -> None:
        self.saved: list[InventoryRecord] = list(records or [])
        self._fail_with = fail_with

    def load(self) -> list[InventoryRecord]:
        if self._fail_with:
            raise PersistenceError(self._fail_with)
        return list(self.saved)

    def save(self, records: list[InventoryRecord]) -> None:
        if self._fail_with:
            raise PersistenceError(self._fail_with)
        self.saved = list(records)

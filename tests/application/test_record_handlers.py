"""Integration tests for saving and loading inventory records.

Uses an in-memory fake store — no file I/O.
"""

from datetime import datetime

import pytest

from keyrepo.application.load_records import LoadRecordsHandler
from keyrepo.application.save_records import SaveRecordsHandler
from keyrepo.domain.exceptions import DuplicateKeyError, PersistenceError
from keyrepo.domain.model.record import InventoryRecord
from keyrepo.domain.repository.inventory_repository import InventoryRepository
from tests.fakes import FakeRecordStore

NOW = datetime(2026, 10, 19, 9, 30)


def _record(rid: int, name: str = "Body Lotion", qty: int = 20) -> InventoryRecord:
    return InventoryRecord(id=rid, name=name, quantity=qty, date_added=NOW)


def _repo(*records: InventoryRecord) -> InventoryRepository:
    repo = InventoryRepository("Record")
    for r in records:
        repo.add(r)
    return repo


class TestSaveRecords:

    def test_saves_all_records(self):
        store = FakeRecordStore()
        count = SaveRecordsHandler(_repo(_record(1), _record(2)), store).handle()
        assert count == 2
        assert [r.id for r in store.saved] == [1, 2]

    def test_failure_propagates(self):
        store = FakeRecordStore(fail_with="disk full")
        with pytest.raises(PersistenceError, match="disk full"):
            SaveRecordsHandler(_repo(_record(1)), store).handle()


class TestLoadRecords:

    def test_loads_into_repository(self):
        store = FakeRecordStore([_record(1, "Perfume - Bloom"), _record(2, "Perfume - Night")])
        repo = _repo()
        count = LoadRecordsHandler(repo, store).handle()
        assert count == 2
        assert repo.get_by_id(2).name == "Perfume - Night"

    def test_replaces_previous_content(self):
        store = FakeRecordStore([_record(3)])
        repo = _repo(_record(1))
        LoadRecordsHandler(repo, store).handle()
        assert [r.id for r in repo.list_all()] == [3]

    def test_store_failure_leaves_repository_unchanged(self):
        repo = _repo(_record(1), _record(2))
        with pytest.raises(PersistenceError, match="corrupt"):
            LoadRecordsHandler(repo, FakeRecordStore(fail_with="corrupt")).handle()
        assert [r.id for r in repo.list_all()] == [1, 2]

    def test_duplicate_keys_in_store_leave_repository_unchanged(self):
        store = FakeRecordStore([_record(5), _record(6), _record(5)])
        repo = _repo(_record(1))
        with pytest.raises(DuplicateKeyError, match="Record ID 5"):
            LoadRecordsHandler(repo, store).handle()
        assert [r.id for r in repo.list_all()] == [1]

    def test_empty_store_empties_repository(self):
        repo = _repo(_record(1))
        LoadRecordsHandler(repo, FakeRecordStore([])).handle()
        assert repo.list_all() == []

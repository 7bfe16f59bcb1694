"""Factories for the repositories and the record store.

Each CLI command builds fresh, empty repositories from here; the JSON
store is the only piece that needs configuration.
"""

from __future__ import annotations

from keyrepo.domain.model.healthcare import Patient, Prescription
from keyrepo.domain.model.record import InventoryRecord
from keyrepo.domain.model.warehouse import ElectronicItem, GroceryItem
from keyrepo.domain.repository.inventory_repository import InventoryRepository
from keyrepo.domain.repository.keyed_repository import KeyedRepository
from keyrepo.infrastructure.config import AppConfig
from keyrepo.infrastructure.persistence.json_record_store import JsonRecordStore


def electronics_repository() -> InventoryRepository[ElectronicItem]:
    return InventoryRepository("Item")


def groceries_repository() -> InventoryRepository[GroceryItem]:
    return InventoryRepository("Item")


def record_repository() -> InventoryRepository[InventoryRecord]:
    return InventoryRepository("Record")


def patient_repository() -> KeyedRepository[Patient]:
    return KeyedRepository("Patient")


def prescription_repository() -> KeyedRepository[Prescription]:
    return KeyedRepository("Prescription")


def record_store(config: AppConfig) -> JsonRecordStore:
    return JsonRecordStore(config.inventory_file)

"""JSON-file-backed implementation of RecordStore."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from keyrepo.domain.exceptions import PersistenceError
from keyrepo.domain.model.record import InventoryRecord
from keyrepo.domain.repository.record_store import RecordStore

logger = logging.getLogger(__name__)


class JsonRecordStore(RecordStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- RecordStore interface ------------------------------------------------

    def load(self) -> list[InventoryRecord]:
        if not self._file_path.exists():
            raise PersistenceError(f"Load error: {self._file_path} does not exist")
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Load error: {exc}") from exc

        if not isinstance(raw, list):
            raise PersistenceError("Load error: expected a JSON array of records")
        try:
            records = [self._to_domain(item) for item in raw]
        except (KeyError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Load error: malformed record ({exc})") from exc

        logger.debug("Read %d record(s) from %s", len(records), self._file_path)
        return records

    def save(self, records: list[InventoryRecord]) -> None:
        payload = json.dumps([self._to_raw(r) for r in records], indent=2) + "\n"
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Save error: {exc}") from exc
        logger.debug("Wrote %d record(s) to %s", len(records), self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: InventoryRecord) -> dict:
        return {
            "id": record.id,
            "name": record.name,
            "quantity": record.quantity,
            "date_added": record.date_added.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryRecord:
        for key in ("id", "quantity"):
            # bool is an int subclass; JSON true/false must not pass as a number
            if not isinstance(raw[key], int) or isinstance(raw[key], bool):
                raise TypeError(f"'{key}' must be an integer")
        if raw["quantity"] < 0:
            raise ValueError("'quantity' cannot be negative")
        if not isinstance(raw["name"], str):
            raise TypeError("'name' must be a string")
        return InventoryRecord(
            id=raw["id"],
            name=raw["name"],
            quantity=raw["quantity"],
            date_added=datetime.fromisoformat(raw["date_added"]),
        )

"""InventoryRecord — an entry in the persisted inventory log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from keyrepo.domain.model.entity import Entity


@dataclass(eq=False)
class InventoryRecord(Entity):
    name: str
    quantity: int
    date_added: datetime

    def __str__(self) -> str:
        return (
            f"{self.name} (ID:{self.id}) Qty:{self.quantity}, "
            f"Added:{self.date_added:%Y-%m-%d}"
        )

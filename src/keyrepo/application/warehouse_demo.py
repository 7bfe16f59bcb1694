"""Application service: the scripted warehouse walkthrough.

Seeds both item repositories, lists them, then runs a few operations that
are expected to fail. Each failure becomes an ``Error: ...`` line and the
walkthrough carries on with the next step.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, timedelta

from keyrepo.application.add_item import AddItemHandler
from keyrepo.application.seed import SeedHandler
from keyrepo.application.show_items import ShowItemsHandler
from keyrepo.application.update_quantity import UpdateQuantityHandler
from keyrepo.domain.exceptions import DomainException
from keyrepo.domain.model.warehouse import (
    ElectronicItem,
    GroceryItem,
    WarehouseItem,
)
from keyrepo.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


def _attempt(step: Callable[[], None], output: list[str]) -> None:
    try:
        step()
    except DomainException as exc:
        logger.debug("Demo step failed: %s", exc)
        output.append(f"Error: {exc}")


def run_warehouse_demo(
    electronics: InventoryRepository[ElectronicItem],
    groceries: InventoryRepository[GroceryItem],
    electronic_seed: list[WarehouseItem],
    grocery_seed: list[WarehouseItem],
    today: date,
) -> list[str]:
    """Run the walkthrough and return the lines it produced."""
    output: list[str] = []

    SeedHandler(electronics).handle(electronic_seed)
    SeedHandler(groceries).handle(grocery_seed)

    output.append("Groceries:")
    output.extend(line.description for line in ShowItemsHandler(groceries).handle())
    output.append("")
    output.append("Electronics:")
    output.extend(line.description for line in ShowItemsHandler(electronics).handle())
    output.append("")

    duplicate = GroceryItem(
        id=101, name="Extra Rice", quantity=5,
        expiry_date=today + timedelta(days=90),
    )
    _attempt(lambda: AddItemHandler(groceries).handle(duplicate), output)
    _attempt(lambda: UpdateQuantityHandler(electronics).handle(999, 5), output)
    _attempt(lambda: UpdateQuantityHandler(groceries).handle(101, -1), output)

    return output

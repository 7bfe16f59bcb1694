"""Tests for the scripted warehouse walkthrough."""

from datetime import date

from keyrepo.application.warehouse_demo import run_warehouse_demo
from keyrepo.domain.repository.inventory_repository import InventoryRepository
from keyrepo.infrastructure import seed_data

TODAY = date(2026, 10, 19)


def _run():
    electronics = InventoryRepository("Item")
    groceries = InventoryRepository("Item")
    output = run_warehouse_demo(
        electronics=electronics,
        groceries=groceries,
        electronic_seed=seed_data.electronics(),
        grocery_seed=seed_data.groceries(TODAY),
        today=TODAY,
    )
    return output, electronics, groceries


class TestWarehouseDemo:

    def test_lists_both_repositories(self):
        output, _, _ = _run()
        assert output[:4] == [
            "Groceries:",
            "[Grocery] Rice 5kg (ID:101) Qty:25, Exp:2027-10-19",
            "[Grocery] Olive Oil 1L (ID:102) Qty:10, Exp:2027-04-19",
            "",
        ]
        assert "[Electronic] USB-C Charger (ID:2) Qty:30, Brand:Anker, Warranty:12 months" in output

    def test_failures_reported_and_run_continues(self):
        output, _, _ = _run()
        assert output[-3:] == [
            "Error: Item ID 101 already exists.",
            "Error: Item ID 999 not found.",
            "Error: Quantity cannot be negative.",
        ]

    def test_failed_steps_leave_repositories_intact(self):
        _, electronics, groceries = _run()
        assert groceries.get_by_id(101).name == "Rice 5kg"
        assert groceries.get_by_id(101).quantity == 25
        assert len(electronics) == 2

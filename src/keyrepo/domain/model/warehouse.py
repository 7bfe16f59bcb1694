"""Warehouse item kinds.

The set of kinds is closed: an item is either an ElectronicItem or a
GroceryItem. Behaviour shared by the kinds (``describe`` and ``validate``)
lives in plain functions that dispatch on the kind rather than in
overridden methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from keyrepo.domain.exceptions import InvalidValueError
from keyrepo.domain.model.entity import Entity


class ItemKind(Enum):
    ELECTRONIC = "electronic"
    GROCERY = "grocery"


@dataclass(eq=False)
class ElectronicItem(Entity):
    name: str
    quantity: int
    brand: str
    warranty_months: int


@dataclass(eq=False)
class GroceryItem(Entity):
    name: str
    quantity: int
    expiry_date: date


WarehouseItem = ElectronicItem | GroceryItem


def kind_of(item: WarehouseItem) -> ItemKind:
    if isinstance(item, ElectronicItem):
        return ItemKind.ELECTRONIC
    if isinstance(item, GroceryItem):
        return ItemKind.GROCERY
    raise TypeError(f"Not a warehouse item: {type(item).__name__}")


def describe(item: WarehouseItem) -> str:
    """One-line, human-readable description of an item."""
    kind = kind_of(item)
    if kind is ItemKind.ELECTRONIC:
        return (
            f"[Electronic] {item.name} (ID:{item.id}) Qty:{item.quantity}, "
            f"Brand:{item.brand}, Warranty:{item.warranty_months} months"
        )
    return (
        f"[Grocery] {item.name} (ID:{item.id}) Qty:{item.quantity}, "
        f"Exp:{item.expiry_date:%Y-%m-%d}"
    )


def ensure_non_negative_quantity(value: int) -> None:
    if value < 0:
        raise InvalidValueError("quantity", value, "Quantity cannot be negative.")


def validate(item: WarehouseItem) -> None:
    """Check the item's fields.

    Raises InvalidValueError on the first violated constraint.
    """
    if not item.name or not item.name.strip():
        raise InvalidValueError("name", item.name, "Item name is required.")
    ensure_non_negative_quantity(item.quantity)
    if kind_of(item) is ItemKind.ELECTRONIC and item.warranty_months < 0:
        raise InvalidValueError(
            "warranty_months",
            item.warranty_months,
            "Warranty months cannot be negative.",
        )

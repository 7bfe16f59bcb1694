"""Display rows returned by the query handlers.

The CLI prints these instead of reading warehouse items or prescriptions
directly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemLineDTO:
    """Output: a warehouse item as displayed to the user."""

    id: int
    kind: str  # "electronic" or "grocery"
    name: str
    quantity: int
    description: str


@dataclass(frozen=True)
class PrescriptionLineDTO:
    id: int
    medication_name: str
    description: str

"""Fixed sample data for the demo programs.

Dates are computed from a caller-supplied ``today`` so the output is
reproducible in tests.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from keyrepo.domain.model.healthcare import Patient, Prescription
from keyrepo.domain.model.record import InventoryRecord
from keyrepo.domain.model.warehouse import ElectronicItem, GroceryItem


def _add_months(day: date, months: int) -> date:
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def electronics() -> list[ElectronicItem]:
    return [
        ElectronicItem(id=1, name="Wireless Mouse", quantity=15, brand="Logitech", warranty_months=24),
        ElectronicItem(id=2, name="USB-C Charger", quantity=30, brand="Anker", warranty_months=12),
    ]


def groceries(today: date) -> list[GroceryItem]:
    return [
        GroceryItem(id=101, name="Rice 5kg", quantity=25, expiry_date=_add_months(today, 12)),
        GroceryItem(id=102, name="Olive Oil 1L", quantity=10, expiry_date=_add_months(today, 6)),
    ]


def inventory_records(now: datetime) -> list[InventoryRecord]:
    return [
        InventoryRecord(id=1, name="Perfume - Bloom", quantity=10, date_added=now),
        InventoryRecord(id=2, name="Perfume - Night", quantity=5, date_added=now - timedelta(days=2)),
        InventoryRecord(id=3, name="Body Lotion", quantity=20, date_added=now - timedelta(days=10)),
    ]


def patients() -> list[Patient]:
    return [
        Patient(id=1, name="Alice Mensah", age=29, gender="Female"),
        Patient(id=2, name="Kofi Asante", age=45, gender="Male"),
        Patient(id=3, name="Esi Boateng", age=33, gender="Female"),
    ]


def prescriptions(today: date) -> list[Prescription]:
    return [
        Prescription(id=1, patient_id=1, medication_name="Amoxicillin 500mg", date_issued=today - timedelta(days=10)),
        Prescription(id=2, patient_id=1, medication_name="Paracetamol 500mg", date_issued=today - timedelta(days=2)),
        Prescription(id=3, patient_id=2, medication_name="Atorvastatin 10mg", date_issued=today - timedelta(days=30)),
        Prescription(id=4, patient_id=3, medication_name="Metformin 500mg", date_issued=today - timedelta(days=7)),
        Prescription(id=5, patient_id=2, medication_name="Amlodipine 5mg", date_issued=today - timedelta(days=1)),
    ]

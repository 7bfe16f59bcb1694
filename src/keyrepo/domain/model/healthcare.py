"""Patients and the prescriptions issued to them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from keyrepo.domain.model.entity import Entity


@dataclass(eq=False)
class Patient(Entity):
    name: str
    age: int
    gender: str


@dataclass(eq=False)
class Prescription(Entity):
    patient_id: int
    medication_name: str
    date_issued: date


def describe_patient(patient: Patient) -> str:
    return f"{patient.name} (ID:{patient.id}, Age:{patient.age}, Gender:{patient.gender})"


def describe_prescription(prescription: Prescription) -> str:
    return (
        f"{prescription.medication_name} (ID:{prescription.id}) - "
        f"{prescription.date_issued:%Y-%m-%d}"
    )

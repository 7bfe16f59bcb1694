"""Integration tests for the patient and prescription queries."""

from datetime import date

from keyrepo.application.show_patients import ShowPatientsHandler
from keyrepo.application.show_prescriptions import ShowPrescriptionsHandler
from keyrepo.domain.model.healthcare import Patient, Prescription
from keyrepo.domain.repository.keyed_repository import KeyedRepository


def _setup():
    patients: KeyedRepository[Patient] = KeyedRepository("Patient")
    patients.add(Patient(id=1, name="Alice Mensah", age=29, gender="Female"))
    patients.add(Patient(id=2, name="Kofi Asante", age=45, gender="Male"))
    patients.add(Patient(id=3, name="Esi Boateng", age=33, gender="Female"))

    prescriptions: KeyedRepository[Prescription] = KeyedRepository("Prescription")
    prescriptions.add(Prescription(id=3, patient_id=2, medication_name="Atorvastatin 10mg", date_issued=date(2026, 9, 19)))
    prescriptions.add(Prescription(id=4, patient_id=1, medication_name="Metformin 500mg", date_issued=date(2026, 10, 12)))
    prescriptions.add(Prescription(id=5, patient_id=2, medication_name="Amlodipine 5mg", date_issued=date(2026, 10, 18)))
    return patients, prescriptions


class TestShowPatients:

    def test_lists_in_order(self):
        patients, _ = _setup()
        assert ShowPatientsHandler(patients).handle() == [
            "Alice Mensah (ID:1, Age:29, Gender:Female)",
            "Kofi Asante (ID:2, Age:45, Gender:Male)",
            "Esi Boateng (ID:3, Age:33, Gender:Female)",
        ]


class TestShowPrescriptions:

    def test_prescriptions_for_patient(self):
        lines = ShowPrescriptionsHandler(_setup()[1]).handle(2)
        assert [line.description for line in lines] == [
            "Atorvastatin 10mg (ID:3) - 2026-09-19",
            "Amlodipine 5mg (ID:5) - 2026-10-18",
        ]

    def test_patient_without_prescriptions(self):
        assert ShowPrescriptionsHandler(_setup()[1]).handle(3) == []

    def test_unknown_patient_has_no_prescriptions(self):
        assert ShowPrescriptionsHandler(_setup()[1]).handle(99) == []

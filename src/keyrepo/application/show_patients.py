"""Application service: Show Patients use case (query)."""

from __future__ import annotations

from keyrepo.domain.model.healthcare import Patient, describe_patient
from keyrepo.domain.repository.keyed_repository import KeyedRepository


class ShowPatientsHandler:

    def __init__(self, patient_repo: KeyedRepository[Patient]) -> None:
        self._patient_repo = patient_repo

    def handle(self) -> list[str]:
        return [describe_patient(p) for p in self._patient_repo.list_all()]

"""Application service: Show Prescriptions use case (query).

Lists what has been prescribed to a single patient. A patient id with no
prescriptions on file, known or not, yields an empty list.
"""

from __future__ import annotations

from keyrepo.application.dto import PrescriptionLineDTO
from keyrepo.domain.model.healthcare import Prescription, describe_prescription
from keyrepo.domain.repository.keyed_repository import KeyedRepository
from keyrepo.domain.service.prescription_index import build_prescription_map


class ShowPrescriptionsHandler:

    def __init__(self, prescription_repo: KeyedRepository[Prescription]) -> None:
        self._prescription_repo = prescription_repo

    def handle(self, patient_id: int) -> list[PrescriptionLineDTO]:
        by_patient = build_prescription_map(self._prescription_repo.list_all())
        return [
            PrescriptionLineDTO(
                id=p.id,
                medication_name=p.medication_name,
                description=describe_prescription(p),
            )
            for p in by_patient.get(patient_id, [])
        ]

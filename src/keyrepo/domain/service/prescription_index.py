"""Groups prescriptions by the patient they were issued to."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from keyrepo.domain.model.healthcare import Prescription


def build_prescription_map(
    prescriptions: Iterable[Prescription],
) -> dict[int, list[Prescription]]:
    """Map patient id -> that patient's prescriptions, in input order."""
    grouped: dict[int, list[Prescription]] = defaultdict(list)
    for prescription in prescriptions:
        grouped[prescription.patient_id].append(prescription)
    return dict(grouped)

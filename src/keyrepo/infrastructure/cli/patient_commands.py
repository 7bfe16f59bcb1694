"""CLI commands for patients and their prescriptions."""

from __future__ import annotations

from datetime import date

import click

from keyrepo.application.seed import SeedHandler
from keyrepo.application.show_patients import ShowPatientsHandler
from keyrepo.application.show_prescriptions import ShowPrescriptionsHandler
from keyrepo.infrastructure import seed_data
from keyrepo.infrastructure.bootstrap import patient_repository, prescription_repository


def _seeded_patients():
    patient_repo = patient_repository()
    SeedHandler(patient_repo).handle(seed_data.patients())
    return patient_repo


def _seeded_prescriptions():
    prescription_repo = prescription_repository()
    SeedHandler(prescription_repo).handle(seed_data.prescriptions(date.today()))
    return prescription_repo


@click.command("list")
def patients_list() -> None:
    """List all patients."""
    patient_repo = _seeded_patients()

    click.echo("Patients:")
    for line in ShowPatientsHandler(patient_repo).handle():
        click.echo(f" - {line}")


@click.command("prescriptions")
@click.option("--id", "patient_id", required=True, type=int, help="Patient ID.")
def patients_prescriptions(patient_id: int) -> None:
    """Show the prescriptions issued to one patient."""
    lines = ShowPrescriptionsHandler(_seeded_prescriptions()).handle(patient_id)

    if not lines:
        click.echo("No prescriptions for this patient.")
        return

    click.echo(f"Prescriptions for Patient {patient_id}:")
    for line in lines:
        click.echo(f" - {line.description}")

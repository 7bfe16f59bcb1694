from pathlib import Path

import click

from keyrepo.infrastructure.cli.patient_commands import patients_list, patients_prescriptions
from keyrepo.infrastructure.cli.record_commands import records_save, records_show
from keyrepo.infrastructure.cli.warehouse_commands import (
    warehouse_demo,
    warehouse_remove,
    warehouse_show,
)
from keyrepo.infrastructure.config import (
    DATA_DIR_ENVVAR,
    DEFAULT_DATA_DIR,
    AppConfig,
    configure_logging,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar=DATA_DIR_ENVVAR,
    show_default=True,
    help="Directory holding the JSON inventory file.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """keyrepo — keyed repository demos"""
    config = AppConfig(data_dir=data_dir, verbose=verbose)
    configure_logging(config)
    ctx.obj = config


@cli.group()
def warehouse() -> None:
    """Electronics and grocery stock."""


@cli.group()
def records() -> None:
    """Persisted inventory log."""


@cli.group()
def patients() -> None:
    """Patients and prescriptions."""


# Register subcommands
warehouse.add_command(warehouse_show)
warehouse.add_command(warehouse_demo)
warehouse.add_command(warehouse_remove)
records.add_command(records_save)
records.add_command(records_show)
patients.add_command(patients_list)
patients.add_command(patients_prescriptions)

"""CLI commands for the persisted inventory log."""

from __future__ import annotations

from datetime import datetime

import click

from keyrepo.application.load_records import LoadRecordsHandler
from keyrepo.application.save_records import SaveRecordsHandler
from keyrepo.application.seed import SeedHandler
from keyrepo.domain.exceptions import DomainException, PersistenceError
from keyrepo.infrastructure import seed_data
from keyrepo.infrastructure.bootstrap import record_repository, record_store
from keyrepo.infrastructure.config import AppConfig


@click.command("save")
@click.pass_obj
def records_save(config: AppConfig) -> None:
    """Write the sample inventory records to the JSON file."""
    repo = record_repository()
    store = record_store(config)

    try:
        SeedHandler(repo).handle(seed_data.inventory_records(datetime.now()))
        count = SaveRecordsHandler(repo, store).handle()
    except (DomainException, PersistenceError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Saved {count} record(s) to {store.file_path}")


@click.command("show")
@click.pass_obj
def records_show(config: AppConfig) -> None:
    """Load the inventory records from the JSON file and list them."""
    repo = record_repository()

    try:
        LoadRecordsHandler(repo, record_store(config)).handle()
    except (DomainException, PersistenceError) as exc:
        raise click.ClickException(str(exc))

    records = repo.list_all()
    if not records:
        click.echo("No items found.")
        return
    for record in records:
        click.echo(str(record))

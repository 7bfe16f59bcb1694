"""CLI commands for warehouse items."""

from __future__ import annotations

from datetime import date

import click

from keyrepo.application.remove_item import RemoveItemHandler
from keyrepo.application.seed import SeedHandler
from keyrepo.application.show_items import ShowItemsHandler
from keyrepo.application.warehouse_demo import run_warehouse_demo
from keyrepo.domain.exceptions import DomainException
from keyrepo.infrastructure import seed_data
from keyrepo.infrastructure.bootstrap import electronics_repository, groceries_repository


@click.command("show")
@click.option(
    "--kind",
    type=click.Choice(["electronic", "grocery"]),
    default=None,
    help="Only show items of this kind.",
)
def warehouse_show(kind: str | None) -> None:
    """List the seeded warehouse stock."""
    today = date.today()
    repos = []
    if kind in (None, "grocery"):
        repos.append(("Groceries", groceries_repository(), seed_data.groceries(today)))
    if kind in (None, "electronic"):
        repos.append(("Electronics", electronics_repository(), seed_data.electronics()))

    for title, repo, seed in repos:
        try:
            SeedHandler(repo).handle(seed)
        except DomainException as exc:
            raise click.ClickException(str(exc))

        click.echo(f"{title}:")
        lines = ShowItemsHandler(repo).handle()
        if not lines:
            click.echo("No items found.")
        for line in lines:
            click.echo(line.description)


@click.command("demo")
def warehouse_demo() -> None:
    """Run the warehouse walkthrough, including the failing operations."""
    today = date.today()
    output = run_warehouse_demo(
        electronics=electronics_repository(),
        groceries=groceries_repository(),
        electronic_seed=seed_data.electronics(),
        grocery_seed=seed_data.groceries(today),
        today=today,
    )
    for line in output:
        click.echo(line)


@click.command("remove")
@click.option(
    "--kind",
    type=click.Choice(["electronic", "grocery"]),
    required=True,
    help="Repository to remove the item from.",
)
@click.option("--id", "item_id", required=True, type=int, help="Item ID to remove.")
def warehouse_remove(kind: str, item_id: int) -> None:
    """Remove an item from the seeded stock and list what is left."""
    if kind == "grocery":
        repo = groceries_repository()
        seed = seed_data.groceries(date.today())
    else:
        repo = electronics_repository()
        seed = seed_data.electronics()

    try:
        SeedHandler(repo).handle(seed)
        RemoveItemHandler(repo).handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item ID {item_id} removed.")
    lines = ShowItemsHandler(repo).handle()
    if not lines:
        click.echo("No items found.")
    for line in lines:
        click.echo(line.description)

"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from pos.application.show_catalog import ShowCatalogHandler
from pos.infrastructure.bootstrap import product_repository


@click.command("catalog")
def catalog_list() -> None:
    """List all products in the catalog."""
    lines = ShowCatalogHandler(product_repo=product_repository()).handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(
        f"{'Name':<16} {'Kind':<20} {'Stock':>6} {'Price':>10} {'Weight':>8}  Expires"
    )
    click.echo("-" * 80)
    for line in lines:
        click.echo(
            f"{line.name:<16} {line.kind:<20} {line.quantity:>6} {line.price:>10} "
            f"{line.weight:>8}  {line.expires_at}"
        )

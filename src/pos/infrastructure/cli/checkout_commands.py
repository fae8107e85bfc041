"""CLI commands that run a checkout against the demo catalog."""

from __future__ import annotations

import click

from pos.application.build_cart import BuildCartHandler
from pos.application.dto import CartItemSpec
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import (
    checkout_handler,
    customer,
    product_repository,
)
from pos.infrastructure.cli.console_reporter import ConsoleReporter

DEMO_ITEMS = [
    CartItemSpec("Cheese", 1),
    CartItemSpec("Biscuits", 1),
    CartItemSpec("Scratch Card", 1),
]


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Cheese:2,TV:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


def _run_checkout(
    specs: list[CartItemSpec], customer_name: str | None, balance: str | None
) -> None:
    repo = product_repository()

    try:
        buyer = customer(name=customer_name, balance=balance)
        cart = BuildCartHandler(product_repo=repo).handle(specs)
        checkout_handler(ConsoleReporter()).handle(buyer, cart)
    except DomainException as exc:
        raise click.ClickException(f"Checkout failed: {exc}")


@click.command("checkout")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.option("--customer", "customer_name", default=None, help="Customer name.")
@click.option("--balance", default=None, help="Customer balance (e.g. 1000).")
def checkout(items: str, customer_name: str | None, balance: str | None) -> None:
    """Check out the given items for a customer."""
    _run_checkout(_parse_items(items), customer_name, balance)


@click.command("demo")
def demo() -> None:
    """Buy one Cheese, one Biscuits and one Scratch Card."""
    _run_checkout(DEMO_ITEMS, customer_name=None, balance=None)

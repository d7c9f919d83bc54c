"""CLI commands for the product catalog."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from ledger.domain.exceptions import DomainException
from ledger.infrastructure.bootstrap import inventory_ledger, settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
@click.option("--as", "caller", required=True, help="Identity of the caller.")
def product_add(name: str, quantity: int, caller: str) -> None:
    """Add a product, or restock it if the name already exists."""
    ledger = inventory_ledger(settings())

    try:
        dto = ledger.add_or_restock(
            caller=caller, name=name, quantity=quantity, now=datetime.now(timezone.utc)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' now has {dto.quantity} in stock")


@click.command("list")
@click.option("--all", "show_all", is_flag=True, help="Include out-of-stock products.")
def product_list(show_all: bool) -> None:
    """List products that are in stock."""
    ledger = inventory_ledger(settings())

    if not show_all:
        names = ledger.list_available()
        if not names:
            click.echo("No products available.")
            return
        for name in names:
            click.echo(name)
        return

    products = ledger.list_products()
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Quantity':>10} {'Purchases':>10}")
    click.echo("-" * 49)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.quantity:>10} {p.total_purchases:>10}")


@click.command("show")
@click.option("--name", required=True, help="Product name.")
def product_show(name: str) -> None:
    """Show stock and purchase counts for one product."""
    ledger = inventory_ledger(settings())

    try:
        dto = ledger.show_product(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"In stock:        {dto.quantity}")
    click.echo(f"Open purchases:  {dto.open_purchases}")
    click.echo(f"Total purchases: {dto.total_purchases}")

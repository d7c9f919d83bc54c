"""CLI commands for buying and returning products."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from ledger.domain.exceptions import DomainException
from ledger.infrastructure.bootstrap import inventory_ledger, settings


@click.command("buy")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to buy.")
@click.option("--as", "caller", required=True, help="Identity of the buyer.")
def purchase_buy(product_id: int, quantity: int, caller: str) -> None:
    """Buy units of a product by its ID."""
    ledger = inventory_ledger(settings())

    try:
        dto = ledger.buy(
            caller=caller,
            product_id=product_id,
            quantity=quantity,
            now=datetime.now(timezone.utc),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Bought {quantity} of '{dto.name}' ({dto.quantity} left)")


@click.command("return")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units to return.")
@click.option("--as", "caller", required=True, help="Identity of the buyer.")
def purchase_return(name: str, quantity: int, caller: str) -> None:
    """Return units of a product bought earlier."""
    ledger = inventory_ledger(settings())

    try:
        dto = ledger.return_product(
            caller=caller, name=name, quantity=quantity, now=datetime.now(timezone.utc)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Returned {quantity} of '{dto.name}' ({dto.quantity} in stock)")


@click.command("buyers")
@click.option("--name", required=True, help="Product name.")
def purchase_buyers(name: str) -> None:
    """List everyone who bought a product, in purchase order."""
    ledger = inventory_ledger(settings())

    try:
        buyers = ledger.list_buyers(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not buyers:
        click.echo(f"No purchases of '{name}' yet.")
        return
    for buyer in buyers:
        click.echo(buyer)

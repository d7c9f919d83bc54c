import click

from ledger.infrastructure.bootstrap import settings
from ledger.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
)
from ledger.infrastructure.cli.purchase_commands import (
    purchase_buy,
    purchase_buyers,
    purchase_return,
)
from ledger.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Inventory Ledger"""
    config = settings()
    configure_logging(level=config.log_level, json=config.log_json)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def purchase() -> None:
    """Buy and return products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
purchase.add_command(purchase_buy)
purchase.add_command(purchase_buyers)
purchase.add_command(purchase_return)

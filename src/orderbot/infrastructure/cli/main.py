import click

from orderbot.infrastructure.cli.inventory_commands import inventory_set, inventory_show
from orderbot.infrastructure.cli.order_commands import order_confirm, order_show
from orderbot.infrastructure.cli.product_commands import product_add, product_list
from orderbot.infrastructure.config import Settings
from orderbot.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """orderbot — confirm orders from admin chat commands"""
    settings = Settings.from_env()
    setup_logging(settings.log_level, json=settings.log_json)


@cli.group()
def order() -> None:
    """Confirm and inspect orders."""


@cli.group()
def product() -> None:
    """Manage the product catalogue."""


@cli.group()
def inventory() -> None:
    """Manage stock levels."""


# Register subcommands
order.add_command(order_confirm)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)

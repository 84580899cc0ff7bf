"""CLI commands for stock management."""

from __future__ import annotations

import asyncio

import click

from orderbot.application.set_inventory import SetInventoryHandler
from orderbot.application.show_inventory import ShowInventoryHandler
from orderbot.domain.exceptions import DomainException
from orderbot.infrastructure.bootstrap import build


@click.command("set")
@click.option("--product", "product_id", required=True, help="Product catalogue id.")
@click.option("--size", required=True, help="Size label (e.g. M).")
@click.option("--quantity", required=True, type=int, help="Quantity on hand.")
def inventory_set(product_id: str, size: str, quantity: int) -> None:
    """Set the stock of one size of a product."""
    handler = SetInventoryHandler(inventory_store=build().inventory_store)

    try:
        product = asyncio.run(handler.handle(product_id, size, quantity))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Stock for '{product.product_id}' size {size.strip().upper()} set to "
        f"{quantity} ({product.available_amount} in stock)"
    )


@click.command("show")
def inventory_show() -> None:
    """Show current stock levels."""
    lines = asyncio.run(ShowInventoryHandler(build().inventory_store).handle())

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'ID':<8} {'Product':<20} {'Sizes':<30} {'Available':>10}")
    click.echo("-" * 71)
    for line in lines:
        sizes = ", ".join(f"{size}:{qty}" for size, qty in line.sizes.items())
        click.echo(
            f"{line.product_id:<8} {line.product_name:<20} {sizes:<30} {line.available:>10}"
        )

"""CLI commands for the product catalogue."""

from __future__ import annotations

import asyncio

import click

from orderbot.application.add_product import AddProductHandler
from orderbot.application.show_inventory import ShowInventoryHandler
from orderbot.domain.exceptions import DomainException
from orderbot.infrastructure.bootstrap import build


def _parse_sizes(raw: tuple[str, ...]) -> dict[str, int]:
    """Parse ('M=3', 'L=5') into {size: qty}."""
    sizes: dict[str, int] = {}
    for pair in raw:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid size format '{pair}'. Expected 'Size=Quantity'."
            )
        size, qty_str = pair.split("=", 1)
        try:
            sizes[size.strip()] = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for size '{size}'.")
    return sizes


@click.command("add")
@click.option("--id", "product_id", required=True, help="Catalogue id used in product codes.")
@click.option("--name", required=True, help="Product name.")
@click.option("--buying-price", required=True, help="Buying price (e.g. 250.00).")
@click.option("--selling-price", required=True, help="Selling price (e.g. 450.00).")
@click.option("--size", "sizes", multiple=True, help="Stock per size as 'Size=Qty'.")
def product_add(
    product_id: str,
    name: str,
    buying_price: str,
    selling_price: str,
    sizes: tuple[str, ...],
) -> None:
    """Add a new product to the catalogue."""
    handler = AddProductHandler(inventory_store=build().inventory_store)

    try:
        product = asyncio.run(
            handler.handle(
                product_id=product_id,
                name=name,
                buying_price=buying_price,
                selling_price=selling_price,
                sizes=_parse_sizes(sizes),
            )
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product {product.product_id} '{product.name}' added "
        f"({product.available_amount} in stock)"
    )


@click.command("list")
def product_list() -> None:
    """List all products in the catalogue."""
    lines = asyncio.run(ShowInventoryHandler(build().inventory_store).handle())

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<8} {'Name':<20} {'Buying':>10} {'Selling':>10}")
    click.echo("-" * 51)
    for line in lines:
        click.echo(
            f"{line.product_id:<8} {line.product_name:<20} "
            f"{line.buying_price:>10} {line.selling_price:>10}"
        )

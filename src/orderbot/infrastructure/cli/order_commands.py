"""CLI commands for the Order aggregate."""

from __future__ import annotations

import asyncio

import click

from orderbot.application.parse_command import is_confirmation_command
from orderbot.application.show_order import ShowOrderHandler
from orderbot.domain.exceptions import DomainException
from orderbot.infrastructure.bootstrap import build


@click.command("confirm")
@click.option(
    "--file",
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
    show_default=True,
    help="File holding the confirmation message ('-' for stdin).",
)
@click.option("--user", "user_id", required=True, help="Messaging-channel user id.")
@click.option(
    "--require-trigger",
    is_flag=True,
    default=False,
    help="Refuse messages without the /confirmation trigger.",
)
def order_confirm(source, user_id: str, require_trigger: bool) -> None:
    """Confirm an order from a confirmation message.

    Decrements stock for every product code and records the order, or
    changes nothing if any code cannot be served.
    """
    text = source.read()
    if require_trigger and not is_confirmation_command(text):
        raise click.ClickException("Message is not a /confirmation command")

    handler = build().confirm_order_handler()
    result = asyncio.run(handler.handle(text, user_id))

    if not result.ok:
        raise click.ClickException(f"[{result.error.value}] {result.reason}")

    click.echo(f"Order #{result.order_id} confirmed — inventory updated.")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_ledger=build().order_ledger)

    try:
        dto = asyncio.run(handler.handle(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id}  (status={dto.status}, source={dto.source})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Address:  {dto.customer_address}")
    click.echo(f"Phone:    {dto.customer_phone}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"User:     {dto.user_id}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Size':>5} {'Qty':>5} {'Price':>10} {'Cost':>10}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.size:>5} {item.quantity:>5} "
            f"{item.unit_selling_price:>10} {item.unit_buying_price:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Delivery charge':<27} {dto.delivery_charge:>27}")
    click.echo(f"  {'Paid in advance':<27} {dto.advance_paid:>27}")
    click.echo(f"  {'COD':<27} {dto.cod_amount:>27}")
    click.echo(f"  {'Profit':<27} {dto.profit:>27}")

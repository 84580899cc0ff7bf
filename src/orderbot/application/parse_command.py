"""Application service: parse a confirmation command.

The command is a block of ``key: value`` lines, for example::

    /confirmation
    Name: Rahim Uddin
    Address: House 12, Road 4, Dhaka
    Phone: 01700000000
    Product code: TS01-M, TS01-L, PJ07-XL
    Delivery charge: 60
    Paid in advance: 200
    COD: 1450

Parsing never fails. Unknown keys and lines without a colon are
skipped; missing or unreadable amounts become 0. Whether the order
makes sense is decided later, inside the confirmation transaction.
"""

from __future__ import annotations

from dataclasses import replace

from orderbot.application.dto import OrderRequest
from orderbot.domain.model.value_objects import parse_amount

CONFIRMATION_TRIGGER = "/confirmation"


def is_confirmation_command(text: str | None) -> bool:
    return bool(text) and CONFIRMATION_TRIGGER in text.lower()


def _product_codes(value: str) -> tuple[str, ...]:
    return tuple(code.strip() for code in value.split(","))


_FIELDS = {
    "name": ("customer_name", str),
    "address": ("customer_address", str),
    "phone": ("customer_phone", str),
    "product code": ("product_codes", _product_codes),
    "delivery charge": ("delivery_charge", parse_amount),
    "paid in advance": ("advance_paid", parse_amount),
    "cod": ("cash_on_delivery", parse_amount),
}


def parse_order_command(text: str | None) -> OrderRequest:
    """Build an OrderRequest from the lines of *text*."""
    request = OrderRequest()
    if not text:
        return request

    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue
        field = _FIELDS.get(key.strip().lower())
        if field is None:
            continue
        name, convert = field
        request = replace(request, **{name: convert(value.strip())})

    return request

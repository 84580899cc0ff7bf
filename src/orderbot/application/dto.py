"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from orderbot.domain.exceptions import ErrorKind


@dataclass(frozen=True)
class OrderRequest:
    """Input: what a confirmation command asked for.

    Every field has a defined default so a request can always be built,
    whatever text it came from.
    """

    customer_name: str | None = None
    customer_address: str | None = None
    customer_phone: str | None = None
    product_codes: tuple[str, ...] = ()
    delivery_charge: Decimal = Decimal("0")
    advance_paid: Decimal = Decimal("0")
    cash_on_delivery: Decimal = Decimal("0")


@dataclass(frozen=True)
class ConfirmationResult:
    """Output: outcome of one confirmation attempt.

    Exactly one of ``order_id`` and ``error`` is set.
    """

    order_id: str | None = None
    error: ErrorKind | None = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(order_id: str) -> ConfirmationResult:
        return ConfirmationResult(order_id=order_id)

    @staticmethod
    def failure(kind: ErrorKind, reason: str) -> ConfirmationResult:
        return ConfirmationResult(error=kind, reason=reason)


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    size: str
    quantity: int
    unit_selling_price: str
    unit_buying_price: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_name: str
    customer_address: str
    customer_phone: str
    status: str
    source: str
    items: list[OrderItemDTO]
    delivery_charge: str
    advance_paid: str
    cod_amount: str
    profit: str
    user_id: str
    created_at: str

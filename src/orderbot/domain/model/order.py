"""Order aggregate — the record created by a successful confirmation.

Orders are written once and never modified by this system. Each line
item captures the prices of the product at confirmation time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from orderbot.domain.exceptions import EmptyOrder
from orderbot.domain.model.product import Product
from orderbot.domain.model.value_objects import Money


class OrderStatus(Enum):
    CONFIRMED = "confirmed"


ADMIN_CONFIRMATION_SOURCE = "Facebook-Admin"


@dataclass(frozen=True)
class OrderItem:
    """One unit of one size of a product, with its price snapshot."""

    product_id: str  # document identity of the product
    product_name: str
    size: str
    unit_selling_price: Money
    unit_buying_price: Money
    quantity: int = 1

    @property
    def line_total_selling_price(self) -> Money:
        return self.unit_selling_price

    @property
    def sizes_and_quantities(self) -> dict[str, int]:
        return {self.size: self.quantity}

    @staticmethod
    def for_unit(product: Product, size: str) -> OrderItem:
        return OrderItem(
            product_id=product.id or product.product_id,
            product_name=product.name,
            size=size,
            unit_selling_price=product.selling_price,
            unit_buying_price=product.buying_price,
        )


@dataclass
class Order:
    """Aggregate root for confirmed orders.

    Use ``Order.confirmed()`` for new orders. ``id``, ``created_at`` and
    ``order_date`` stay empty until the ledger stores the order.
    """

    items: list[OrderItem]
    customer_name: str | None
    customer_address: str | None
    customer_phone: str | None
    delivery_charge: Money
    advance_paid: Money
    cod_amount: Money
    profit: Decimal
    user_id: str
    status: OrderStatus = OrderStatus.CONFIRMED
    source: str = ADMIN_CONFIRMATION_SOURCE
    id: str | None = None
    created_at: datetime | None = None
    order_date: datetime | None = None

    @staticmethod
    def confirmed(
        items: list[OrderItem],
        *,
        customer_name: str | None,
        customer_address: str | None,
        customer_phone: str | None,
        delivery_charge: Money,
        advance_paid: Money,
        cod_amount: Money,
        user_id: str,
    ) -> Order:
        """Build a confirmed order and compute its profit."""
        if not items:
            raise EmptyOrder("Order must contain at least one item")
        order = Order(
            items=list(items),
            customer_name=customer_name,
            customer_address=customer_address,
            customer_phone=customer_phone,
            delivery_charge=delivery_charge,
            advance_paid=advance_paid,
            cod_amount=cod_amount,
            profit=Decimal("0"),
            user_id=user_id,
        )
        order.profit = compute_profit(
            cod_amount, order.cost_of_goods.amount, advance_paid
        )
        return order

    @property
    def total_order_price(self) -> Money:
        return self.cod_amount

    @property
    def cost_of_goods(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.unit_buying_price
        return result


def compute_profit(cod: Money, cost_of_goods: Decimal, advance_paid: Money) -> Decimal:
    """COD minus the part of the cost of goods not covered by the advance.

    May be negative.
    """
    return cod.amount - (cost_of_goods - advance_paid.amount)

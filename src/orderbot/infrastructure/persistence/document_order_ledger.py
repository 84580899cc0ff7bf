"""Document-store implementation of OrderLedger.

Orders are documents in the ``orders`` collection. Amounts are stored
as decimal strings; ``createdAt`` and ``orderDate`` are filled in by
the store clock at commit.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from orderbot.domain.model.order import Order, OrderItem, OrderStatus
from orderbot.domain.model.value_objects import Money
from orderbot.domain.repository.order_ledger import OrderLedger
from orderbot.infrastructure.persistence.document_store import (
    SERVER_TIMESTAMP,
    DocumentTransaction,
    InMemoryDocumentStore,
)

ORDERS = "orders"


class DocumentOrderLedger(OrderLedger):

    def __init__(self, store: InMemoryDocumentStore) -> None:
        self._store = store

    # --- OrderLedger interface ------------------------------------------------

    async def create_order(self, txn: DocumentTransaction, order: Order) -> str:
        order.id = await txn.create(ORDERS, self._to_raw(order))
        return order.id

    async def get_order(self, order_id: str) -> Order | None:
        async def work(txn: DocumentTransaction) -> dict[str, Any] | None:
            return await txn.get(ORDERS, order_id)

        raw = await self._store.run(work)
        return self._to_domain(order_id, raw) if raw is not None else None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict[str, Any]:
        return {
            "customerName": order.customer_name,
            "customerAddress": order.customer_address,
            "customerPhoneNumber": order.customer_phone,
            "items": [
                {
                    "productId": item.product_id,
                    "productName": item.product_name,
                    "selectedSizesAndQuantities": item.sizes_and_quantities,
                    "unitSellingPrice": str(item.unit_selling_price.amount),
                    "itemTotalSellingPrice": str(item.line_total_selling_price.amount),
                    "unitBuyingPrice": str(item.unit_buying_price.amount),
                }
                for item in order.items
            ],
            "deliveryCharge": str(order.delivery_charge.amount),
            "advancePaid": str(order.advance_paid.amount),
            "totalOrderPrice": str(order.total_order_price.amount),
            "codAmount": str(order.cod_amount.amount),
            "profit": str(order.profit),
            "status": order.status.value,
            "source": order.source,
            "createdAt": SERVER_TIMESTAMP,
            "orderDate": SERVER_TIMESTAMP,
            "userId": order.user_id,
        }

    @staticmethod
    def _to_domain(order_id: str, raw: dict[str, Any]) -> Order:
        items = []
        for i in raw["items"]:
            ((size, quantity),) = i["selectedSizesAndQuantities"].items()
            items.append(
                OrderItem(
                    product_id=i["productId"],
                    product_name=i["productName"],
                    size=size,
                    quantity=quantity,
                    unit_selling_price=Money(Decimal(i["unitSellingPrice"])),
                    unit_buying_price=Money(Decimal(i["unitBuyingPrice"])),
                )
            )
        return Order(
            id=order_id,
            items=items,
            customer_name=raw.get("customerName"),
            customer_address=raw.get("customerAddress"),
            customer_phone=raw.get("customerPhoneNumber"),
            delivery_charge=Money(Decimal(raw["deliveryCharge"])),
            advance_paid=Money(Decimal(raw["advancePaid"])),
            cod_amount=Money(Decimal(raw["codAmount"])),
            profit=Decimal(raw["profit"]),
            user_id=raw["userId"],
            status=OrderStatus(raw["status"]),
            source=raw["source"],
            created_at=_timestamp(raw.get("createdAt")),
            order_date=_timestamp(raw.get("orderDate")),
        )


def _timestamp(value: datetime | str | None) -> datetime | None:
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return value

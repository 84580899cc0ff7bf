"""Application service: Show Order use case (query)."""

from __future__ import annotations

from orderbot.application.dto import OrderDTO, OrderItemDTO
from orderbot.domain.exceptions import EntityNotFoundError
from orderbot.domain.model.order import Order
from orderbot.domain.repository.order_ledger import OrderLedger


class ShowOrderHandler:

    def __init__(self, order_ledger: OrderLedger) -> None:
        self._order_ledger = order_ledger

    async def handle(self, order_id: str) -> OrderDTO:
        order = await self._order_ledger.get_order(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return self._to_dto(order)

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_name=order.customer_name or "",
            customer_address=order.customer_address or "",
            customer_phone=order.customer_phone or "",
            status=order.status.value,
            source=order.source,
            items=[
                OrderItemDTO(
                    product_name=item.product_name,
                    size=item.size,
                    quantity=item.quantity,
                    unit_selling_price=str(item.unit_selling_price),
                    unit_buying_price=str(item.unit_buying_price),
                )
                for item in order.items
            ],
            delivery_charge=str(order.delivery_charge),
            advance_paid=str(order.advance_paid),
            cod_amount=str(order.cod_amount),
            profit=f"{order.profit:.2f}",
            user_id=order.user_id,
            created_at=(
                order.created_at.strftime("%Y-%m-%d %H:%M UTC")
                if order.created_at
                else ""
            ),
        )

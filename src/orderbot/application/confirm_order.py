"""Application service: Confirm Order use case.

Turns a confirmation command into a confirmed order. Inside a single
store transaction it:

1. resolves every product code, in order, failing fast on the first
   bad one;
2. takes one unit out of each referenced size bucket on a working copy
   and builds the line items with the current prices;
3. computes the profit;
4. stages the product updates, then the new order.

Nothing is written before every code has been validated, and the store
commits the product updates and the order together or not at all.
Confirming the same text twice creates two orders.
"""

from __future__ import annotations

import logging
from typing import Any

from orderbot.application.dto import ConfirmationResult, OrderRequest
from orderbot.application.parse_command import parse_order_command
from orderbot.domain.exceptions import DomainException, EmptyOrder
from orderbot.domain.model.order import Order, OrderItem
from orderbot.domain.model.value_objects import Money
from orderbot.domain.repository.inventory_store import InventoryStore
from orderbot.domain.repository.order_ledger import OrderLedger
from orderbot.domain.repository.transaction import TransactionRunner
from orderbot.domain.service.inventory_resolver import InventoryResolver

logger = logging.getLogger(__name__)


class ConfirmOrderHandler:

    def __init__(
        self,
        transactions: TransactionRunner,
        inventory_store: InventoryStore,
        order_ledger: OrderLedger,
        *,
        case_sensitive_ids: bool = True,
    ) -> None:
        self._transactions = transactions
        self._inventory_store = inventory_store
        self._order_ledger = order_ledger
        self._case_sensitive_ids = case_sensitive_ids

    async def handle(self, raw_text: str, channel_user_id: str) -> ConfirmationResult:
        """Confirm the order described by *raw_text*.

        Never raises a DomainException: every failure comes back as a
        ConfirmationResult carrying the error kind and a readable reason.
        """
        request = parse_order_command(raw_text)
        try:
            order_id = await self.confirm(request, channel_user_id)
        except DomainException as exc:
            logger.warning(
                "Confirmation rejected: %s",
                exc,
                extra={"error_kind": exc.kind.value, "user_id": channel_user_id},
            )
            return ConfirmationResult.failure(exc.kind, str(exc))
        return ConfirmationResult.success(order_id)

    async def confirm(self, request: OrderRequest, channel_user_id: str) -> str:
        """Run the confirmation transaction and return the new order id.

        Raises a DomainException subclass on any failure.
        """
        if not request.product_codes:
            raise EmptyOrder("No product codes in confirmation command")

        async def work(txn: Any) -> str:
            return await self._confirm_in(txn, request, channel_user_id)

        order_id = await self._transactions.run(work)
        logger.info(
            "Order confirmed",
            extra={
                "order_id": order_id,
                "items": len(request.product_codes),
                "user_id": channel_user_id,
            },
        )
        return order_id

    async def _confirm_in(
        self, txn: Any, request: OrderRequest, channel_user_id: str
    ) -> str:
        resolver = InventoryResolver(
            self._inventory_store, txn, case_sensitive_ids=self._case_sensitive_ids
        )
        items: list[OrderItem] = []

        # Validate and stage on working copies; no writes yet
        for code in request.product_codes:
            product, size = await resolver.resolve(code)
            items.append(OrderItem.for_unit(product, size))
            product.take_one(size)

        order = Order.confirmed(
            items,
            customer_name=request.customer_name,
            customer_address=request.customer_address,
            customer_phone=request.customer_phone,
            delivery_charge=Money(request.delivery_charge),
            advance_paid=Money(request.advance_paid),
            cod_amount=Money(request.cash_on_delivery),
            user_id=channel_user_id,
        )
        for product in resolver.touched:
            await self._inventory_store.update_product(txn, product)
        return await self._order_ledger.create_order(txn, order)

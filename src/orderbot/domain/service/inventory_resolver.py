"""Domain service: Inventory Resolver.

Turns a ``<productId>-<size>`` code into the product and size bucket it
refers to, checking that at least one unit is on hand.

A resolver lives for one transaction attempt. It keeps a working copy
of every product it has returned, so when the same product appears
twice in one order the second lookup sees the units already taken by
the first. The resolver itself never writes to the store.
"""

from __future__ import annotations

from typing import Any

from orderbot.domain.exceptions import OutOfStock, ProductNotFound
from orderbot.domain.model.product import Product
from orderbot.domain.model.value_objects import ProductCode
from orderbot.domain.repository.inventory_store import InventoryStore


class InventoryResolver:

    def __init__(
        self,
        inventory_store: InventoryStore,
        txn: Any,
        *,
        case_sensitive_ids: bool = True,
    ) -> None:
        self._inventory_store = inventory_store
        self._txn = txn
        self._case_sensitive_ids = case_sensitive_ids
        self._working: dict[str, Product] = {}

    async def resolve(self, code: str) -> tuple[Product, str]:
        """Return the product and normalised size for *code*.

        Raises InvalidCodeFormat before touching the store, then
        ProductNotFound or OutOfStock.
        """
        parsed = ProductCode.parse(code)

        product = await self._inventory_store.query_by_product_id(
            self._txn, parsed.product_id, ignore_case=not self._case_sensitive_ids
        )
        if product is None:
            raise ProductNotFound(f"Product not found for code: {parsed.product_id}")

        # Reuse the copy already handed out in this transaction
        key = product.id or product.product_id
        product = self._working.setdefault(key, product)

        if not product.in_stock(parsed.size):
            raise OutOfStock(
                f"Product {product.name} (Size: {parsed.size}) is out of stock."
            )
        return product, parsed.size

    @property
    def touched(self) -> list[Product]:
        """Products returned so far, in first-seen order."""
        return list(self._working.values())

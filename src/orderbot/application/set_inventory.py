"""Application service: Set Inventory use case."""

from __future__ import annotations

from orderbot.domain.exceptions import EntityNotFoundError
from orderbot.domain.model.product import Product
from orderbot.domain.repository.inventory_store import InventoryStore


class SetInventoryHandler:

    def __init__(self, inventory_store: InventoryStore) -> None:
        self._inventory_store = inventory_store

    async def handle(self, product_id: str, size: str, quantity: int) -> Product:
        """Set the quantity on hand for one size of a product."""
        product = await self._inventory_store.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")

        product.set_stock(size, quantity)
        await self._inventory_store.save_product(product)
        return product

"""Application service: Add Product use case."""

from __future__ import annotations

from orderbot.domain.exceptions import ValidationError
from orderbot.domain.model.product import Product
from orderbot.domain.model.value_objects import Money
from orderbot.domain.repository.inventory_store import InventoryStore


class AddProductHandler:

    def __init__(self, inventory_store: InventoryStore) -> None:
        self._inventory_store = inventory_store

    async def handle(
        self,
        product_id: str,
        name: str,
        buying_price: str,
        selling_price: str,
        sizes: dict[str, int] | None = None,
    ) -> Product:
        """Add a new product to the catalogue."""
        if not product_id or not product_id.strip():
            raise ValidationError("Product id is required")
        if "-" in product_id:
            raise ValidationError("Product id cannot contain '-'")
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = await self._inventory_store.get_product(product_id.strip())
        if existing is not None:
            raise ValidationError(f"Product '{product_id}' already exists")

        product = Product(
            product_id=product_id.strip(),
            name=name.strip(),
            sizes=dict(sizes or {}),
            buying_price=Money.of(buying_price),
            selling_price=Money.of(selling_price),
        )
        product.id = await self._inventory_store.add_product(product)
        return product

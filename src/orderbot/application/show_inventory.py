"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from orderbot.domain.repository.inventory_store import InventoryStore


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: str
    product_name: str
    sizes: dict[str, int]
    available: int
    buying_price: str
    selling_price: str


class ShowInventoryHandler:

    def __init__(self, inventory_store: InventoryStore) -> None:
        self._inventory_store = inventory_store

    async def handle(self) -> list[InventoryLineDTO]:
        products = await self._inventory_store.list_products()
        return [
            InventoryLineDTO(
                product_id=product.product_id,
                product_name=product.name,
                sizes=dict(sorted(product.sizes.items())),
                available=product.available_amount,
                buying_price=str(product.buying_price),
                selling_price=str(product.selling_price),
            )
            for product in products
        ]

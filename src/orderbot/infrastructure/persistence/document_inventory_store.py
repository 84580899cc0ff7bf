"""Document-store implementation of InventoryStore.

Products are documents in the ``inventory`` collection::

    {"product_id": "TS01", "name": "Cotton Tee",
     "sizes": {"M": 3, "L": 0}, "availableAmount": 3,
     "price": "250.00", "sellingPrice": "450.00"}

``price`` is the buying price. ``availableAmount`` is rewritten
together with ``sizes`` on every update.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from orderbot.domain.model.product import Product
from orderbot.domain.model.value_objects import Money
from orderbot.domain.repository.inventory_store import InventoryStore
from orderbot.infrastructure.persistence.document_store import (
    DocumentTransaction,
    InMemoryDocumentStore,
)

INVENTORY = "inventory"


class DocumentInventoryStore(InventoryStore):

    def __init__(self, store: InMemoryDocumentStore) -> None:
        self._store = store

    # --- InventoryStore interface ---------------------------------------------

    async def query_by_product_id(
        self, txn: DocumentTransaction, product_id: str, *, ignore_case: bool = False
    ) -> Product | None:
        matches = await txn.query(
            INVENTORY, "product_id", product_id, limit=1, ignore_case=ignore_case
        )
        if not matches:
            return None
        doc_id, raw = matches[0]
        return self._to_domain(doc_id, raw)

    async def update_product(self, txn: DocumentTransaction, product: Product) -> None:
        await txn.update(
            INVENTORY,
            product.id,  # type: ignore[arg-type]
            {"sizes": dict(product.sizes), "availableAmount": product.available_amount},
        )

    async def add_product(self, product: Product) -> str:
        async def work(txn: DocumentTransaction) -> str:
            return await txn.create(INVENTORY, self._to_raw(product))

        return await self._store.run(work)

    async def get_product(self, product_id: str) -> Product | None:
        async def work(txn: DocumentTransaction) -> Product | None:
            return await self.query_by_product_id(txn, product_id)

        return await self._store.run(work)

    async def save_product(self, product: Product) -> None:
        async def work(txn: DocumentTransaction) -> None:
            await txn.update(INVENTORY, product.id, self._to_raw(product))  # type: ignore[arg-type]

        await self._store.run(work)

    async def list_products(self) -> list[Product]:
        async def work(txn: DocumentTransaction) -> list[Product]:
            return [
                self._to_domain(doc_id, raw)
                for doc_id, raw in await txn.scan(INVENTORY)
            ]

        return await self._store.run(work)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict[str, Any]:
        return {
            "product_id": product.product_id,
            "name": product.name,
            "sizes": dict(product.sizes),
            "availableAmount": product.available_amount,
            "price": str(product.buying_price.amount),
            "sellingPrice": str(product.selling_price.amount),
        }

    @staticmethod
    def _to_domain(doc_id: str, raw: dict[str, Any]) -> Product:
        return Product(
            id=doc_id,
            product_id=raw["product_id"],
            name=raw.get("name", raw["product_id"]),
            sizes={size: int(qty) for size, qty in (raw.get("sizes") or {}).items()},
            buying_price=Money(Decimal(str(raw.get("price") or 0))),
            selling_price=Money(Decimal(str(raw.get("sellingPrice") or 0))),
        )

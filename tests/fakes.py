"""Test doubles and setup helpers.

FakeInventoryStore keeps products in a dict and records every lookup,
for tests that only need the InventoryStore port. Coordinator tests
run against the real in-memory document store; the subclasses below
inject contention and outages into it.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from orderbot.application.confirm_order import ConfirmOrderHandler
from orderbot.domain.exceptions import StoreUnavailable
from orderbot.domain.model.product import Product
from orderbot.domain.model.value_objects import Money
from orderbot.domain.repository.inventory_store import InventoryStore
from orderbot.infrastructure.persistence.document_inventory_store import (
    INVENTORY,
    DocumentInventoryStore,
)
from orderbot.infrastructure.persistence.document_order_ledger import (
    ORDERS,
    DocumentOrderLedger,
)
from orderbot.infrastructure.persistence.document_store import (
    Collections,
    DocumentTransaction,
    InMemoryDocumentStore,
)


def product(
    product_id: str,
    sizes: dict[str, int],
    buying: str = "100",
    selling: str = "200",
    name: str | None = None,
) -> Product:
    return Product(
        product_id=product_id,
        name=name or f"Product {product_id}",
        sizes=sizes,
        buying_price=Money.of(buying),
        selling_price=Money.of(selling),
    )


class FakeInventoryStore(InventoryStore):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self.queries: list[str] = []
        for p in products or []:
            p.id = p.id or f"doc-{p.product_id}"
            self._store[p.id] = p

    async def query_by_product_id(
        self, txn: Any, product_id: str, *, ignore_case: bool = False
    ) -> Product | None:
        self.queries.append(product_id)
        for p in self._store.values():
            if p.product_id == product_id or (
                ignore_case and p.product_id.casefold() == product_id.casefold()
            ):
                return copy.deepcopy(p)
        return None

    async def update_product(self, txn: Any, product: Product) -> None:
        self._store[product.id] = copy.deepcopy(product)  # type: ignore[index]

    async def add_product(self, product: Product) -> str:
        product.id = f"doc-{product.product_id}"
        self._store[product.id] = copy.deepcopy(product)
        return product.id

    async def get_product(self, product_id: str) -> Product | None:
        return await self.query_by_product_id(None, product_id)

    async def save_product(self, product: Product) -> None:
        self._store[product.id] = copy.deepcopy(product)  # type: ignore[index]

    async def list_products(self) -> list[Product]:
        return [copy.deepcopy(p) for p in self._store.values()]


class ContendedDocumentStore(InMemoryDocumentStore):
    """Acts as if another writer touched every document a transaction
    read, right before each of the next ``contend(n)`` commits."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.remaining_conflicts = 0
        self.commit_attempts = 0

    def contend(self, commits: int) -> None:
        self.remaining_conflicts = commits
        self.commit_attempts = 0

    async def _commit(self, txn: DocumentTransaction) -> None:
        self.commit_attempts += 1
        if self.remaining_conflicts > 0:
            self.remaining_conflicts -= 1
            for collection, doc_id in txn.reads:
                doc = self._collections.get(collection, {}).get(doc_id)
                if doc is not None:
                    doc.version += 1
        await super()._commit(txn)


class UnavailableDocumentStore(InMemoryDocumentStore):
    """Fails every writing commit once ``down`` is set."""

    down = False

    async def _flush(self, collections: Collections) -> None:
        if self.down:
            raise StoreUnavailable("Backend is down")


@dataclass
class Harness:
    store: InMemoryDocumentStore
    inventory: DocumentInventoryStore
    ledger: DocumentOrderLedger
    handler: ConfirmOrderHandler

    def stock(self, product_id: str) -> dict[str, Any]:
        for raw in self.store.documents(INVENTORY).values():
            if raw["product_id"] == product_id:
                return raw
        raise KeyError(product_id)

    def orders(self) -> list[dict[str, Any]]:
        return list(self.store.documents(ORDERS).values())


async def setup(
    products: list[Product],
    store: InMemoryDocumentStore | None = None,
    *,
    case_sensitive_ids: bool = True,
) -> Harness:
    """Seed a document store with *products* and wire a handler to it."""
    store = store if store is not None else InMemoryDocumentStore()
    inventory = DocumentInventoryStore(store)
    ledger = DocumentOrderLedger(store)
    for p in products:
        await inventory.add_product(p)
    handler = ConfirmOrderHandler(
        store, inventory, ledger, case_sensitive_ids=case_sensitive_ids
    )
    return Harness(store=store, inventory=inventory, ledger=ledger, handler=handler)

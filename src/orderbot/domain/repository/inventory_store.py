"""Abstract inventory store for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Methods taking ``txn`` run inside a transaction
started by a TransactionRunner.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from orderbot.domain.model.product import Product


class InventoryStore(ABC):

    @abstractmethod
    async def query_by_product_id(
        self, txn: Any, product_id: str, *, ignore_case: bool = False
    ) -> Product | None:
        """Return the first product whose catalogue id matches, or None."""

    @abstractmethod
    async def update_product(self, txn: Any, product: Product) -> None:
        """Stage the product's sizes and available amount for commit."""

    # --- Catalogue management (outside the confirmation flow) -----------------

    @abstractmethod
    async def add_product(self, product: Product) -> str:
        """Persist a new product and return its document id."""

    @abstractmethod
    async def get_product(self, product_id: str) -> Product | None:
        """Return a product by catalogue id, or None."""

    @abstractmethod
    async def save_product(self, product: Product) -> None:
        """Persist changes to an existing product."""

    @abstractmethod
    async def list_products(self) -> list[Product]:
        """Return every product in the catalogue."""

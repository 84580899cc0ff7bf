"""Abstract order ledger for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from orderbot.domain.model.order import Order


class OrderLedger(ABC):

    @abstractmethod
    async def create_order(self, txn: Any, order: Order) -> str:
        """Stage a new order and return the id assigned to it.

        Sets ``order.id``. The creation timestamps are assigned by the
        store clock when the transaction commits.
        """

    @abstractmethod
    async def get_order(self, order_id: str) -> Order | None:
        """Return an order by its id, or None if not found."""

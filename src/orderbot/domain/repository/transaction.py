"""Abstract transaction runner.

The store executes a unit of work inside one atomic transaction and
hands it an opaque transaction handle. Every port call made with that
handle is part of the same transaction. Writes become visible only
when the unit of work returns without raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")

Work = Callable[[Any], Awaitable[T]]


class TransactionRunner(ABC):

    @abstractmethod
    async def run(self, work: Work[T]) -> T:
        """Run *work* atomically and return its result.

        Store-level conflicts re-run *work* from scratch, up to the
        store's retry limit, then raise TransactionConflict. Any other
        exception raised by *work* aborts the transaction and
        propagates unchanged.
        """

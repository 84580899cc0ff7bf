"""In-memory document store with optimistic multi-document transactions.

Documents live in named collections and carry a version number that
grows on every write. A transaction remembers the version of every
document it read, as first seen when read more than once, and
buffers its writes. At commit time, under the
store lock, every read version is checked again: if any document
changed in between, the commit is refused and the whole unit of work
runs again on fresh data. After ``max_attempts`` refused commits the
store gives up with TransactionConflict.

Reads hand out deep copies, so nothing a unit of work does to them is
visible to anyone else before commit.
"""

from __future__ import annotations

import asyncio
import copy
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from orderbot.domain.exceptions import TransactionConflict
from orderbot.domain.repository.transaction import T, TransactionRunner, Work

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5


class _ServerTimestamp:
    """Placeholder replaced by the store clock when a write commits."""

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"

    def __deepcopy__(self, memo: dict) -> _ServerTimestamp:
        return self


SERVER_TIMESTAMP = _ServerTimestamp()

Collections = dict[str, dict[str, "Document"]]


@dataclass
class Document:
    data: dict[str, Any]
    version: int = 1


@dataclass
class _Write:
    collection: str
    doc_id: str
    fields: dict[str, Any]
    merge: bool


class _CommitRefused(Exception):
    def __init__(self, collection: str, doc_id: str) -> None:
        super().__init__(f"{collection}/{doc_id} changed since it was read")


@dataclass
class DocumentTransaction:
    """Handle passed to a unit of work. Reads are tracked, writes buffered."""

    store: InMemoryDocumentStore
    reads: dict[tuple[str, str], int] = field(default_factory=dict)
    writes: list[_Write] = field(default_factory=list)

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        await asyncio.sleep(0)
        doc = self.store._collections.get(collection, {}).get(doc_id)
        # version 0 records that the document did not exist
        self.reads.setdefault((collection, doc_id), doc.version if doc else 0)
        return copy.deepcopy(doc.data) if doc else None

    async def query(
        self,
        collection: str,
        field_name: str,
        value: str,
        *,
        limit: int | None = None,
        ignore_case: bool = False,
    ) -> list[tuple[str, dict[str, Any]]]:
        """Return ``(doc_id, data)`` pairs whose *field_name* equals *value*."""
        await asyncio.sleep(0)
        wanted = value.casefold() if ignore_case else value
        matches: list[tuple[str, dict[str, Any]]] = []
        for doc_id, doc in self.store._collections.get(collection, {}).items():
            candidate = doc.data.get(field_name)
            if ignore_case and isinstance(candidate, str):
                candidate = candidate.casefold()
            if candidate != wanted:
                continue
            self.reads.setdefault((collection, doc_id), doc.version)
            matches.append((doc_id, copy.deepcopy(doc.data)))
            if limit is not None and len(matches) >= limit:
                break
        return matches

    async def scan(self, collection: str) -> list[tuple[str, dict[str, Any]]]:
        await asyncio.sleep(0)
        docs = self.store._collections.get(collection, {})
        for doc_id, doc in docs.items():
            self.reads.setdefault((collection, doc_id), doc.version)
        return [(doc_id, copy.deepcopy(doc.data)) for doc_id, doc in docs.items()]

    async def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
        await asyncio.sleep(0)
        self.writes.append(_Write(collection, doc_id, copy.deepcopy(fields), merge=True))

    async def create(self, collection: str, data: dict[str, Any]) -> str:
        await asyncio.sleep(0)
        doc_id = uuid.uuid4().hex
        self.writes.append(_Write(collection, doc_id, copy.deepcopy(data), merge=False))
        return doc_id


class InMemoryDocumentStore(TransactionRunner):

    def __init__(
        self,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._max_attempts = max_attempts
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._collections: Collections = {}
        self._lock = asyncio.Lock()

    # --- TransactionRunner interface ------------------------------------------

    async def run(self, work: Work[T]) -> T:
        for attempt in range(1, self._max_attempts + 1):
            await self._refresh()
            txn = DocumentTransaction(self)
            result = await work(txn)
            try:
                await self._commit(txn)
            except _CommitRefused as exc:
                logger.info(
                    "Transaction conflict (attempt %d of %d): %s",
                    attempt,
                    self._max_attempts,
                    exc,
                )
                continue
            return result

        logger.warning("Transaction abandoned after %d attempts", self._max_attempts)
        raise TransactionConflict(
            f"Transaction abandoned after {self._max_attempts} conflicting attempts"
        )

    # --- Inspection helpers ---------------------------------------------------

    def documents(self, collection: str) -> dict[str, dict[str, Any]]:
        """Committed documents of *collection*, as copies."""
        return {
            doc_id: copy.deepcopy(doc.data)
            for doc_id, doc in self._collections.get(collection, {}).items()
        }

    # --- Commit ---------------------------------------------------------------

    async def _commit(self, txn: DocumentTransaction) -> None:
        async with self._lock:
            await self._refresh()
            for (collection, doc_id), version in txn.reads.items():
                doc = self._collections.get(collection, {}).get(doc_id)
                if (doc.version if doc else 0) != version:
                    raise _CommitRefused(collection, doc_id)
            if not txn.writes:
                return

            staged = copy.deepcopy(self._collections)
            now = self._clock()
            for write in txn.writes:
                fields = {
                    key: now if value is SERVER_TIMESTAMP else value
                    for key, value in write.fields.items()
                }
                docs = staged.setdefault(write.collection, {})
                current = docs.get(write.doc_id)
                if write.merge:
                    if current is None:
                        raise _CommitRefused(write.collection, write.doc_id)
                    current.data.update(fields)
                    current.version += 1
                else:
                    docs[write.doc_id] = Document(data=fields)

            await self._flush(staged)
            self._collections = staged

    # --- Persistence hooks ----------------------------------------------------

    async def _refresh(self) -> None:
        """Reload committed state from the backing medium, if any."""

    async def _flush(self, collections: Collections) -> None:
        """Write *collections* to the backing medium, if any."""

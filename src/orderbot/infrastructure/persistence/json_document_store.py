"""JSON-file-backed document store.

Same transaction semantics as the in-memory store. The file is re-read
at the start of every transaction attempt and again under the commit
lock, so version checks see writes committed by other store instances
sharing the file. Timestamps are stored as ISO-8601 strings.
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from orderbot.domain.exceptions import StoreUnavailable
from orderbot.infrastructure.persistence.document_store import (
    DEFAULT_MAX_ATTEMPTS,
    Collections,
    Document,
    InMemoryDocumentStore,
)


class JsonDocumentStore(InMemoryDocumentStore):

    def __init__(
        self,
        file_path: Path,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__(max_attempts=max_attempts, clock=clock)
        self._file_path = file_path
        self._ensure_file()

    # --- Persistence hooks ----------------------------------------------------

    async def _refresh(self) -> None:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreUnavailable(f"Cannot read {self._file_path}: {exc}") from exc
        self._collections = {
            name: {
                doc_id: Document(data=entry["data"], version=entry["version"])
                for doc_id, entry in docs.items()
            }
            for name, docs in raw.items()
        }

    async def _flush(self, collections: Collections) -> None:
        raw = {
            name: {
                doc_id: {"version": doc.version, "data": doc.data}
                for doc_id, doc in docs.items()
            }
            for name, docs in collections.items()
        }
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        try:
            tmp_path.write_text(
                json.dumps(raw, indent=2, default=_encode) + "\n", encoding="utf-8"
            )
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            raise StoreUnavailable(f"Cannot write {self._file_path}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")


def _encode(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Cannot store {type(value).__name__} in a JSON document")

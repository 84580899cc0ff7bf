"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderbot.application.confirm_order import ConfirmOrderHandler
from orderbot.infrastructure.config import Settings
from orderbot.infrastructure.persistence.document_inventory_store import (
    DocumentInventoryStore,
)
from orderbot.infrastructure.persistence.document_order_ledger import (
    DocumentOrderLedger,
)
from orderbot.infrastructure.persistence.json_document_store import (
    JsonDocumentStore,
)


@dataclass(frozen=True)
class Container:
    settings: Settings
    store: JsonDocumentStore
    inventory_store: DocumentInventoryStore
    order_ledger: DocumentOrderLedger

    def confirm_order_handler(self) -> ConfirmOrderHandler:
        return ConfirmOrderHandler(
            self.store,
            self.inventory_store,
            self.order_ledger,
            case_sensitive_ids=self.settings.case_sensitive_ids,
        )


def build(settings: Settings | None = None) -> Container:
    settings = settings or Settings.from_env()
    store = JsonDocumentStore(
        settings.store_file, max_attempts=settings.max_transaction_attempts
    )
    return Container(
        settings=settings,
        store=store,
        inventory_store=DocumentInventoryStore(store),
        order_ledger=DocumentOrderLedger(store),
    )

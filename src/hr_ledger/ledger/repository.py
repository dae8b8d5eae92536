from __future__ import annotations

from typing import Protocol, Sequence

from ..records.store import RecordStore
from .model import Transaction


class TransactionRepository(Protocol):
    def list_all(self) -> Sequence[Transaction]:
        raise NotImplementedError

    def add(self, tx: Transaction) -> None:
        raise NotImplementedError


class StoreTransactionRepository(TransactionRepository):
    """Append-only: there is no update or delete path."""

    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Transaction]:
        return self._store.get_transactions()

    def add(self, tx: Transaction) -> None:
        # Newest first, matching how the ledger is displayed.
        self._store.set_transactions([tx, *self._store.get_transactions()])

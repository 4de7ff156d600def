"""Abstract transaction store."""

from __future__ import annotations

from abc import ABC, abstractmethod

from salonpos.domain.model.transaction import TransactionRecord


class TransactionRepository(ABC):

    @abstractmethod
    def add(self, record: TransactionRecord) -> None:
        """Durably store a new transaction. Records are never updated."""

    @abstractmethod
    def get_by_id(self, transaction_id: str) -> TransactionRecord | None:
        """Return a transaction by its reference ID, or None."""

    @abstractmethod
    def list_all(self) -> list[TransactionRecord]:
        """Return every stored transaction, oldest first."""

"""Abstract repository for InventoryItem aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from salonpos.domain.model.inventory import InventoryItem


class InventoryRepository(ABC):

    @abstractmethod
    def get(self, product_id: str, location_id: str) -> InventoryItem | None:
        """Return the stock record for a product at a location, or None."""

    @abstractmethod
    def list_all(self) -> list[InventoryItem]:
        """Return every stock record."""

    @abstractmethod
    def save(self, item: InventoryItem) -> None:
        """Persist a new or updated stock record."""

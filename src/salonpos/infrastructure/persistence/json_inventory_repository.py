"""JSON-file-backed implementation of InventoryRepository."""

from __future__ import annotations

from pathlib import Path

from salonpos.domain.model.inventory import InventoryItem
from salonpos.domain.repository.inventory_repository import InventoryRepository
from salonpos.infrastructure.persistence.json_file import JsonFile


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, [])

    # --- InventoryRepository interface ----------------------------------------

    def get(self, product_id: str, location_id: str) -> InventoryItem | None:
        for raw in self._file.load():
            if (raw["product_id"], raw["location_id"]) == (product_id, location_id):
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[InventoryItem]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, item: InventoryItem) -> None:
        records = self._file.load()
        replaced = False
        for i, raw in enumerate(records):
            if (raw["product_id"], raw["location_id"]) == item.key:
                records[i] = self._to_raw(item)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(item))
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "product_id": item.product_id,
            "product_name": item.product_name,
            "location_id": item.location_id,
            "quantity": item.quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        return InventoryItem(
            product_id=raw["product_id"],
            product_name=raw["product_name"],
            location_id=raw["location_id"],
            quantity=raw["quantity"],
        )

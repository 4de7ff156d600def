"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from salonpos.domain.repository.inventory_repository import InventoryRepository


@dataclass(frozen=True)
class InventoryLineDTO:
    product_name: str
    location_id: str
    quantity: int


class ShowInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, location_id: str | None = None) -> list[InventoryLineDTO]:
        items = self._inventory_repo.list_all()
        return [
            InventoryLineDTO(
                product_name=item.product_name,
                location_id=item.location_id,
                quantity=item.quantity,
            )
            for item in sorted(items, key=lambda i: (i.location_id, i.product_name))
            if location_id is None or item.location_id == location_id
        ]

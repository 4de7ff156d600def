"""Application service: Set Inventory use case."""

from __future__ import annotations

from salonpos.domain.exceptions import EntityNotFoundError
from salonpos.domain.model.inventory import InventoryItem
from salonpos.domain.repository.inventory_repository import InventoryRepository
from salonpos.domain.repository.product_repository import ProductRepository


class SetInventoryHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._product_repo = product_repo

    def handle(self, product_name: str, location_id: str, quantity: int) -> None:
        """Set the stock level for a product at one location."""
        product = self._product_repo.get_by_name(product_name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_name}'")

        existing = self._inventory_repo.get(product.id, location_id)
        if existing is not None:
            existing.set_quantity(quantity)
            self._inventory_repo.save(existing)
        else:
            item = InventoryItem(
                product_id=product.id,
                product_name=product.name,
                location_id=location_id,
                quantity=quantity,
            )
            self._inventory_repo.save(item)

"""Domain service: Inventory Sale.

Authoritative stock decrement for products sold at the register. Each call
is independent: it loads the stock record for the product at the sale's
location, refuses the decrement when stock would drop below zero, and
persists the result. Two registers selling the last unit therefore cannot
both succeed here, even though both carts accepted the item.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from salonpos.domain.exceptions import EntityNotFoundError
from salonpos.domain.model.inventory import InventoryItem
from salonpos.domain.model.transaction import PaymentMethod, TransactionReference
from salonpos.domain.model.value_objects import Money
from salonpos.domain.repository.inventory_repository import InventoryRepository

logger = structlog.get_logger()


@dataclass(frozen=True)
class ProductSale:
    """One product line of a completed sale, as seen by inventory."""

    product_id: str
    name: str
    quantity: int
    unit_price: Money
    location_id: str
    payment_method: PaymentMethod
    reference: TransactionReference
    client_id: str | None = None
    client_name: str | None = None
    staff_id: str | None = None
    staff_name: str | None = None


class InventorySaleService:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def record_product_sale(self, sale: ProductSale) -> InventoryItem:
        """Deduct ``sale.quantity`` units and return the updated stock record."""
        item = self._inventory_repo.get(sale.product_id, sale.location_id)
        if item is None:
            raise EntityNotFoundError(
                f"No inventory record for product '{sale.name}' "
                f"at location '{sale.location_id}'"
            )

        item.deduct(sale.quantity)
        self._inventory_repo.save(item)

        logger.info(
            "inventory_deducted",
            product_id=sale.product_id,
            location_id=sale.location_id,
            quantity=sale.quantity,
            remaining=item.quantity,
            reference=sale.reference.id,
        )
        return item

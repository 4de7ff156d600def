"""InventoryItem aggregate: stock of one product at one location."""

from __future__ import annotations

from dataclasses import dataclass

from salonpos.domain.exceptions import InsufficientStockError, ValidationError


@dataclass
class InventoryItem:
    """Aggregate root for stock tracking.

    Invariant: ``quantity`` is never negative. Sales go through
    ``deduct()``, which refuses any decrement that would break it.
    """

    product_id: str
    product_name: str
    location_id: str
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

    @property
    def key(self) -> tuple[str, str]:
        return self.product_id, self.location_id

    def deduct(self, quantity: int) -> None:
        """Remove sold units from stock."""
        if quantity <= 0:
            raise ValidationError("Deduct quantity must be positive")
        if quantity > self.quantity:
            raise InsufficientStockError(
                f"Insufficient inventory for {self.product_name} at {self.location_id} "
                f"(need {quantity}, have {self.quantity})"
            )
        self.quantity -= quantity

    def set_quantity(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        self.quantity = quantity

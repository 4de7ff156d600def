"""Checkout settings consumed by the register."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from salonpos.domain.exceptions import ValidationError


@dataclass(frozen=True)
class CheckoutSettings:
    tax_rate: Decimal = Decimal("0")  # percent, 0..100
    location_id: str = "loc1"

    def __post_init__(self) -> None:
        if not isinstance(self.tax_rate, Decimal):
            raise ValidationError("Tax rate must be a Decimal")
        if self.tax_rate < 0 or self.tax_rate > 100:
            raise ValidationError("Tax rate must be between 0 and 100")
        if not self.location_id:
            raise ValidationError("Location is required")

"""Catalog aggregates: the services and retail products a salon sells.

Catalog items live independently of carts and sales. Prices change over
time; cart lines and recorded transactions capture a snapshot instead of
referencing the live price.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from salonpos.domain.exceptions import ValidationError
from salonpos.domain.model.value_objects import Money


class ItemKind(Enum):
    SERVICE = "service"
    PRODUCT = "product"


@dataclass
class Service:
    """A bookable salon service (haircut, facial, ...)."""

    id: str
    name: str
    category: str
    price: Money
    duration_minutes: int = 0
    description: str = ""

    kind = ItemKind.SERVICE

    def update_price(self, new_price: Money) -> None:
        if new_price.amount <= 0:
            raise ValidationError("Service price must be greater than zero")
        self.price = new_price


@dataclass
class Product:
    """A retail product sold over the counter.

    Inactive products stay in the catalog for history but are hidden from
    the register.
    """

    id: str
    name: str
    category: str
    price: Money
    description: str = ""
    sku: str = ""
    is_retail: bool = True
    is_active: bool = True

    kind = ItemKind.PRODUCT

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing cart lines and transactions are unaffected; they hold a
        price snapshot.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price


CatalogItem = Service | Product

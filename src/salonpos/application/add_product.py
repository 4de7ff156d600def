"""Application services: Add Product / Add Service use cases."""

from __future__ import annotations

from salonpos.domain.exceptions import ValidationError
from salonpos.domain.model.catalog import Product, Service
from salonpos.domain.model.value_objects import Money
from salonpos.domain.repository.product_repository import (
    ProductRepository,
    ServiceRepository,
)


def _next_id(existing_ids: list[str]) -> str:
    numeric = [int(i) for i in existing_ids if i.isdigit()]
    return str(max(numeric) + 1) if numeric else "1"


def _require_name(name: str, what: str) -> str:
    if not name or not name.strip():
        raise ValidationError(f"{what} name is required")
    return name.strip()


def _require_price(price: str, what: str) -> Money:
    money = Money.of(price)
    if money.is_zero:
        raise ValidationError(f"{what} price must be greater than zero")
    return money


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        category: str,
        description: str = "",
        sku: str = "",
    ) -> Product:
        """Add a new retail product to the catalog."""
        name = _require_name(name, "Product")
        if self._product_repo.get_by_name(name) is not None:
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign ID based on existing products
        next_id = _next_id([p.id for p in self._product_repo.list_all()])

        product = Product(
            id=next_id,
            name=name,
            category=category.strip(),
            price=_require_price(price, "Product"),
            description=description,
            sku=sku,
        )
        self._product_repo.save(product)
        return product


class AddServiceHandler:

    def __init__(self, service_repo: ServiceRepository) -> None:
        self._service_repo = service_repo

    def handle(
        self,
        name: str,
        price: str,
        category: str,
        duration_minutes: int = 0,
        description: str = "",
    ) -> Service:
        """Add a new service to the menu."""
        name = _require_name(name, "Service")
        if self._service_repo.get_by_name(name) is not None:
            raise ValidationError(f"Service '{name}' already exists")
        if duration_minutes < 0:
            raise ValidationError("Service duration cannot be negative")

        service = Service(
            id=_next_id([s.id for s in self._service_repo.list_all()]),
            name=name,
            category=category.strip(),
            price=_require_price(price, "Service"),
            duration_minutes=duration_minutes,
            description=description,
        )
        self._service_repo.save(service)
        return service

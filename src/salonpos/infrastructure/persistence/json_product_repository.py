"""JSON-file-backed implementations of the catalog repositories."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from salonpos.domain.model.catalog import Product, Service
from salonpos.domain.model.value_objects import Money
from salonpos.domain.repository.product_repository import (
    ProductRepository,
    ServiceRepository,
)
from salonpos.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, [])

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.strip().lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._file.persist([self._to_raw(p) for p in products.values()])

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {item["id"]: self._to_domain(item) for item in self._file.load()}

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            category=raw.get("category", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            description=raw.get("description", ""),
            sku=raw.get("sku", ""),
            is_retail=raw.get("is_retail", True),
            is_active=raw.get("is_active", True),
        )

    @staticmethod
    def _to_raw(p: Product) -> dict:
        return {
            "id": p.id,
            "name": p.name,
            "category": p.category,
            "price": str(p.price.amount),
            "currency": p.price.currency,
            "description": p.description,
            "sku": p.sku,
            "is_retail": p.is_retail,
            "is_active": p.is_active,
        }


class JsonServiceRepository(ServiceRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, [])

    # --- ServiceRepository interface ------------------------------------------

    def get_by_id(self, service_id: str) -> Service | None:
        return self._load().get(service_id)

    def get_by_name(self, name: str) -> Service | None:
        for service in self._load().values():
            if service.name.lower() == name.strip().lower():
                return service
        return None

    def list_all(self) -> list[Service]:
        return list(self._load().values())

    def save(self, service: Service) -> None:
        services = self._load()
        services[service.id] = service
        self._file.persist([self._to_raw(s) for s in services.values()])

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Service]:
        return {item["id"]: self._to_domain(item) for item in self._file.load()}

    @staticmethod
    def _to_domain(raw: dict) -> Service:
        return Service(
            id=raw["id"],
            name=raw["name"],
            category=raw.get("category", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            duration_minutes=raw.get("duration_minutes", 0),
            description=raw.get("description", ""),
        )

    @staticmethod
    def _to_raw(s: Service) -> dict:
        return {
            "id": s.id,
            "name": s.name,
            "category": s.category,
            "price": str(s.price.amount),
            "currency": s.price.currency,
            "duration_minutes": s.duration_minutes,
            "description": s.description,
        }

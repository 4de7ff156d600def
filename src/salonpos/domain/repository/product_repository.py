"""Abstract repositories for the catalog aggregates.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from salonpos.domain.model.catalog import Product, Service


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""


class ServiceRepository(ABC):

    @abstractmethod
    def get_by_id(self, service_id: str) -> Service | None:
        """Return a service by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Service | None:
        """Return a service by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Service]:
        """Return every service in the catalog."""

    @abstractmethod
    def save(self, service: Service) -> None:
        """Persist a new or updated service."""

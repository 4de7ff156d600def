"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

from salonpos.application.dto import CatalogDTO, CatalogItemDTO
from salonpos.domain.repository.product_repository import (
    ProductRepository,
    ServiceRepository,
)
from salonpos.domain.service.catalog_filter import (
    CatalogTab,
    category_chips,
    filter_catalog,
)


class BrowseCatalogHandler:

    def __init__(
        self,
        service_repo: ServiceRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._service_repo = service_repo
        self._product_repo = product_repo

    def handle(
        self,
        tab: CatalogTab,
        search_term: str = "",
        category: str | None = None,
    ) -> CatalogDTO:
        services = self._service_repo.list_all()
        products = self._product_repo.list_all()

        items = filter_catalog(tab, search_term, category, services, products)
        return CatalogDTO(
            items=[
                CatalogItemDTO(
                    id=item.id,
                    kind=item.kind.value,
                    name=item.name,
                    category=item.category,
                    price=str(item.price),
                    description=item.description,
                )
                for item in items
            ],
            categories=category_chips(tab, services, products),
        )

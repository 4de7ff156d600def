"""Application service: Add To Cart use case.

Resolves a catalog reference (ID or name) for the requested kind, then
lets the Cart aggregate merge or append the line with a price snapshot.
"""

from __future__ import annotations

from salonpos.application.dto import CartDTO
from salonpos.application.notices import NoticeBoard
from salonpos.application.show_cart import build_cart_dto
from salonpos.domain.exceptions import EntityNotFoundError, ValidationError
from salonpos.domain.model.catalog import CatalogItem, ItemKind
from salonpos.domain.repository.cart_repository import CartRepository
from salonpos.domain.repository.product_repository import (
    ProductRepository,
    ServiceRepository,
)
from salonpos.domain.repository.settings_repository import SettingsRepository


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        service_repo: ServiceRepository,
        product_repo: ProductRepository,
        settings_repo: SettingsRepository,
        notices: NoticeBoard,
    ) -> None:
        self._cart_repo = cart_repo
        self._service_repo = service_repo
        self._product_repo = product_repo
        self._settings_repo = settings_repo
        self._notices = notices

    def handle(self, kind: ItemKind, item_ref: str) -> CartDTO:
        """Add one unit of the service or product named by ``item_ref``."""
        item = self._resolve(kind, item_ref)

        cart = self._cart_repo.get()
        cart.add_item(item)
        self._cart_repo.save(cart)

        self._notices.info("Added to cart", f"Added {item.name} to cart")

        settings = self._settings_repo.get_checkout_settings()
        return build_cart_dto(cart, settings.tax_rate)

    def _resolve(self, kind: ItemKind, item_ref: str) -> CatalogItem:
        repo = self._service_repo if kind is ItemKind.SERVICE else self._product_repo
        item = repo.get_by_id(item_ref) or repo.get_by_name(item_ref)
        if item is None:
            raise EntityNotFoundError(f"{kind.value.capitalize()} not found: '{item_ref}'")
        if kind is ItemKind.PRODUCT and not item.is_active:
            raise ValidationError(f"Product '{item.name}' is not available for sale")
        return item

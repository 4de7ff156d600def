"""Application services: in-place cart edits.

Remove, re-quantify and clear never fail for a stale index or a quantity
below one; the Cart aggregate ignores those.
"""

from __future__ import annotations

from salonpos.application.dto import CartDTO
from salonpos.application.show_cart import build_cart_dto
from salonpos.domain.model.cart import Cart
from salonpos.domain.repository.cart_repository import CartRepository
from salonpos.domain.repository.settings_repository import SettingsRepository


class _CartEditHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        settings_repo: SettingsRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._settings_repo = settings_repo

    def _commit(self, cart: Cart) -> CartDTO:
        self._cart_repo.save(cart)
        settings = self._settings_repo.get_checkout_settings()
        return build_cart_dto(cart, settings.tax_rate)


class RemoveFromCartHandler(_CartEditHandler):

    def handle(self, index: int) -> CartDTO:
        cart = self._cart_repo.get()
        cart.remove_item(index)
        return self._commit(cart)


class UpdateCartQuantityHandler(_CartEditHandler):

    def handle(self, index: int, quantity: int) -> CartDTO:
        cart = self._cart_repo.get()
        cart.update_quantity(index, quantity)
        return self._commit(cart)


class ClearCartHandler(_CartEditHandler):

    def handle(self) -> CartDTO:
        cart = self._cart_repo.get()
        cart.clear()
        return self._commit(cart)

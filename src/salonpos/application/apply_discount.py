"""Application service: Apply Discount use case.

The raw text is stored even when it is not a valid percentage so the
operator can keep editing it; the pricing calculator applies 0 until it is.
"""

from __future__ import annotations

from salonpos.application.dto import CartDTO
from salonpos.application.notices import NoticeBoard
from salonpos.application.show_cart import build_cart_dto
from salonpos.domain.repository.cart_repository import CartRepository
from salonpos.domain.repository.settings_repository import SettingsRepository


class ApplyDiscountHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        settings_repo: SettingsRepository,
        notices: NoticeBoard,
    ) -> None:
        self._cart_repo = cart_repo
        self._settings_repo = settings_repo
        self._notices = notices

    def handle(self, raw_percent: str) -> CartDTO:
        cart = self._cart_repo.get()
        cart.discount_input = raw_percent
        self._cart_repo.save(cart)

        settings = self._settings_repo.get_checkout_settings()
        dto = build_cart_dto(cart, settings.tax_rate)
        if dto.pricing.discount_error:
            self._notices.error("Invalid discount", dto.pricing.discount_error)
        return dto

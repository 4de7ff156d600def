"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from decimal import Decimal

from salonpos.application.dto import CartDTO, CartLineDTO, PricingDTO
from salonpos.domain.model.cart import Cart
from salonpos.domain.repository.cart_repository import CartRepository
from salonpos.domain.repository.settings_repository import SettingsRepository
from salonpos.domain.service.pricing_calculator import PricingResult, calculate_pricing


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        settings_repo: SettingsRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._settings_repo = settings_repo

    def handle(self) -> CartDTO:
        cart = self._cart_repo.get()
        settings = self._settings_repo.get_checkout_settings()
        return build_cart_dto(cart, settings.tax_rate)


# --- Mapping ------------------------------------------------------------------


def build_cart_dto(cart: Cart, tax_rate_percent: Decimal) -> CartDTO:
    """Price ``cart`` afresh and flatten it for display."""
    pricing = calculate_pricing(cart.lines, tax_rate_percent, cart.discount_input)
    return CartDTO(
        lines=[
            CartLineDTO(
                index=i,
                item_id=line.item_id,
                kind=line.kind.value,
                name=line.name,
                quantity=line.quantity,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for i, line in enumerate(cart.lines)
        ],
        pricing=_pricing_dto(pricing, tax_rate_percent),
        client_name=cart.client_name,
        discount_input=cart.discount_input,
        checkout_state=cart.checkout_state.value,
    )


def format_percent(value: Decimal) -> str:
    """Render 10.50 as "10.5" and 10 as "10"."""
    return format(value.normalize(), "f")


def _pricing_dto(pricing: PricingResult, tax_rate_percent: Decimal) -> PricingDTO:
    return PricingDTO(
        subtotal=str(pricing.subtotal),
        tax_rate_percent=format_percent(tax_rate_percent),
        tax_amount=str(pricing.tax_amount),
        total=str(pricing.total),
        discount_percent=format_percent(pricing.discount_percent),
        discount_amount=str(pricing.discount_amount),
        final_total=str(pricing.final_total),
        discount_error=pricing.discount_error,
    )

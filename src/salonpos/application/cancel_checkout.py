"""Application service: Cancel Checkout use case."""

from __future__ import annotations

from salonpos.application.dto import CheckoutOutcome
from salonpos.application.notices import NoticeBoard
from salonpos.domain.exceptions import NoCheckoutError
from salonpos.domain.repository.cart_repository import CartRepository


class CancelCheckoutHandler:

    def __init__(self, cart_repo: CartRepository, notices: NoticeBoard) -> None:
        self._cart_repo = cart_repo
        self._notices = notices

    def handle(self) -> CheckoutOutcome:
        """Leave the payment step; the cart is kept as it is."""
        cart = self._cart_repo.get()
        try:
            cart.cancel_checkout()
        except NoCheckoutError as exc:
            self._notices.error(exc.title, str(exc))
            return CheckoutOutcome(state=cart.checkout_state.value)

        self._cart_repo.save(cart)
        self._notices.info("Checkout cancelled", "Returned to the cart")
        return CheckoutOutcome(state=cart.checkout_state.value)

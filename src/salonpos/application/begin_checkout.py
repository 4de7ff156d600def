"""Application service: Begin Checkout use case.

Opens the payment step when the cart has items and the operator may sell.
A rejected checkout is not an error for the caller: the register stays
idle and the reason is posted as a notice.
"""

from __future__ import annotations

import structlog

from salonpos.application.dto import CheckoutOutcome
from salonpos.application.notices import NoticeBoard
from salonpos.domain.exceptions import CheckoutRejectedError
from salonpos.domain.model.operator import Operator
from salonpos.domain.repository.cart_repository import CartRepository

logger = structlog.get_logger()


class BeginCheckoutHandler:

    def __init__(self, cart_repo: CartRepository, notices: NoticeBoard) -> None:
        self._cart_repo = cart_repo
        self._notices = notices

    def handle(self, operator: Operator) -> CheckoutOutcome:
        cart = self._cart_repo.get()

        try:
            cart.begin_checkout(operator)
        except CheckoutRejectedError as exc:
            logger.info(
                "checkout_rejected",
                reason=exc.title,
                staff_id=operator.id,
                role=operator.role,
            )
            self._notices.error(exc.title, str(exc))
            return CheckoutOutcome(state=cart.checkout_state.value)

        self._cart_repo.save(cart)
        return CheckoutOutcome(state=cart.checkout_state.value)

"""Application service: Complete Payment use case.

The payment step of checkout. Validates what the operator entered, takes
the payment (redeeming a gift card when one is used), then records the
sale and returns the register to IDLE.

Once payment is taken the sale is never rolled back: if recording fails
the operator still sees "Payment successful", followed by a second notice
that the transaction must be reconciled by hand.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import structlog

from salonpos.application.dto import CheckoutOutcome, PaymentRequest
from salonpos.application.notices import NoticeBoard
from salonpos.application.record_transaction import SaleContext, TransactionRecorder
from salonpos.application.show_cart import format_percent
from salonpos.domain.exceptions import GiftCardError, NoCheckoutError, ValidationError
from salonpos.domain.model.cart import Cart, CheckoutState
from salonpos.domain.model.operator import Operator
from salonpos.domain.model.transaction import PaymentMethod
from salonpos.domain.model.value_objects import Money
from salonpos.domain.repository.cart_repository import CartRepository
from salonpos.domain.repository.gift_card_repository import GiftCardRepository
from salonpos.domain.repository.settings_repository import SettingsRepository
from salonpos.domain.service.pricing_calculator import PricingResult, calculate_pricing

logger = structlog.get_logger()

RECORDING_FAILED_MESSAGE = "Payment was processed but transaction recording failed."


class CompletePaymentHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        settings_repo: SettingsRepository,
        gift_card_repo: GiftCardRepository,
        recorder: TransactionRecorder,
        notices: NoticeBoard,
    ) -> None:
        self._cart_repo = cart_repo
        self._settings_repo = settings_repo
        self._gift_card_repo = gift_card_repo
        self._recorder = recorder
        self._notices = notices

    def handle(self, operator: Operator, request: PaymentRequest) -> CheckoutOutcome:
        """Take payment for the cart awaiting payment and record the sale.

        Payment-step validation problems are posted as notices and leave
        the register AWAITING_PAYMENT so the operator can correct them.
        """
        cart = self._cart_repo.get()
        if cart.checkout_state is not CheckoutState.AWAITING_PAYMENT:
            exc = NoCheckoutError("No checkout is awaiting payment")
            logger.info("payment_rejected", reason=str(exc))
            self._notices.error(exc.title, str(exc))
            return CheckoutOutcome(state=cart.checkout_state.value)

        settings = self._settings_repo.get_checkout_settings()
        pricing = calculate_pricing(cart.lines, settings.tax_rate, cart.discount_input)
        method = PaymentMethod.classify(request.method)

        try:
            self._validate(pricing)
            gift_card_amount = (
                self._redeem_gift_card(request, pricing.final_total)
                if method is PaymentMethod.GIFT_CARD
                else None
            )
        except ValidationError as exc:
            logger.info("payment_rejected", reason=str(exc), payment_method=method.value)
            self._notices.error("Payment not taken", str(exc))
            return CheckoutOutcome(state=cart.checkout_state.value)

        gift_card_code = (
            request.gift_card_code.strip().upper() if gift_card_amount is not None else None
        )
        transaction_id = self._record(
            cart,
            pricing,
            operator,
            settings.location_id,
            method,
            gift_card_code,
            gift_card_amount,
        )

        self._notices.info(
            "Payment successful",
            _payment_summary(pricing, method, gift_card_code, gift_card_amount),
        )
        if transaction_id is None:
            self._notices.error("Payment Error", RECORDING_FAILED_MESSAGE)

        cart.finish_checkout()
        self._cart_repo.save(cart)
        return CheckoutOutcome(
            state=cart.checkout_state.value,
            completed=True,
            transaction_id=transaction_id,
        )

    # --- Payment step ---------------------------------------------------------

    @staticmethod
    def _validate(pricing: PricingResult) -> None:
        if pricing.discount_error:
            raise ValidationError(pricing.discount_error)
        if pricing.final_total.is_zero:
            raise ValidationError(
                "Transaction amount must be greater than zero. "
                "Please check your cart and discounts."
            )

    def _redeem_gift_card(self, request: PaymentRequest, amount_due: Money) -> Money:
        """Redeem the gift card and return the amount it covers."""
        code = (request.gift_card_code or "").strip()
        if not code:
            raise GiftCardError("Please enter a gift card code")

        card = self._gift_card_repo.get_by_code(code)
        if card is None:
            raise GiftCardError("Invalid gift card code or gift card not found")
        card.ensure_usable()

        if request.gift_card_amount is None:
            amount = min(card.current_balance, amount_due)
        else:
            amount = _parse_amount(request.gift_card_amount)
        if amount.is_zero:
            raise GiftCardError("Invalid gift card amount")
        if amount > amount_due:
            raise GiftCardError(
                f"Gift card amount {amount} exceeds the amount due {amount_due}"
            )

        card.redeem(amount)
        self._gift_card_repo.save(card)
        logger.info(
            "gift_card_redeemed",
            code=card.code,
            amount=str(amount.amount),
            balance=str(card.current_balance.amount),
        )
        return amount

    # --- Recording ------------------------------------------------------------

    def _record(
        self,
        cart: Cart,
        pricing: PricingResult,
        operator: Operator,
        location_id: str,
        method: PaymentMethod,
        gift_card_code: str | None,
        gift_card_amount: Money | None,
    ) -> str | None:
        """Record the sale; return its ID, or None when recording failed."""
        sale = SaleContext(
            lines=tuple(cart.lines),
            pricing=pricing,
            operator=operator,
            location_id=location_id,
            client=cart.client,
        )
        try:
            record = self._recorder.record(
                sale,
                method,
                gift_card_code=gift_card_code,
                gift_card_amount=gift_card_amount,
                discount_percent=pricing.discount_percent if pricing.has_discount else None,
                discount_amount=pricing.discount_amount if pricing.has_discount else None,
            )
        except Exception:
            logger.exception(
                "transaction_recording_failed",
                amount=str(pricing.final_total.amount),
                payment_method=method.value,
                staff_id=operator.id,
            )
            return None
        return record.id


def _parse_amount(raw: str) -> Money:
    try:
        return Money(Decimal(raw.strip()))
    except (InvalidOperation, ValidationError) as exc:
        raise GiftCardError("Invalid gift card amount") from exc


def _payment_summary(
    pricing: PricingResult,
    method: PaymentMethod,
    gift_card_code: str | None,
    gift_card_amount: Money | None,
) -> str:
    final_total = pricing.final_total
    if gift_card_code and gift_card_amount is not None:
        text = f"{gift_card_amount} paid with Gift Card ({gift_card_code})"
        if gift_card_amount < final_total:
            text += (
                f", remaining {final_total - gift_card_amount} "
                "requires additional payment"
            )
        return text

    text = f"{final_total} paid with {method.label}"
    if pricing.has_discount:
        text += (
            f" ({format_percent(pricing.discount_percent)}% discount applied: "
            f"-{pricing.discount_amount})"
        )
    return text

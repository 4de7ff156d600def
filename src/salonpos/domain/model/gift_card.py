"""GiftCard aggregate: prepaid balance redeemable at the register."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from salonpos.domain.exceptions import GiftCardError
from salonpos.domain.model.value_objects import Money


class GiftCardStatus(Enum):
    ACTIVE = "active"
    REDEEMED = "redeemed"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


@dataclass
class GiftCard:
    """Invariants:
    - ``current_balance`` never exceeds ``original_amount`` through redemption
    - a card with zero balance is REDEEMED
    """

    code: str
    original_amount: Money
    current_balance: Money
    status: GiftCardStatus = GiftCardStatus.ACTIVE

    @staticmethod
    def issue(code: str, amount: Money) -> GiftCard:
        if not code or not code.strip():
            raise GiftCardError("Gift card code is required")
        if amount.is_zero:
            raise GiftCardError("Gift card amount must be greater than zero")
        return GiftCard(
            code=code.strip().upper(),
            original_amount=amount,
            current_balance=amount,
        )

    def ensure_usable(self) -> None:
        """Raise GiftCardError unless the card can pay for something."""
        if self.status is GiftCardStatus.REDEEMED:
            raise GiftCardError("Gift card has been fully redeemed")
        if self.status is GiftCardStatus.EXPIRED:
            raise GiftCardError("Gift card has expired")
        if self.status is GiftCardStatus.CANCELLED:
            raise GiftCardError("Gift card has been cancelled")
        if self.current_balance.is_zero:
            raise GiftCardError("Gift card has no remaining balance")

    def redeem(self, amount: Money) -> None:
        self.ensure_usable()
        if amount.is_zero:
            raise GiftCardError("Gift card amount must be greater than zero")
        if amount > self.current_balance:
            raise GiftCardError(
                f"Gift card {self.code} has only {self.current_balance} available"
            )
        self.current_balance = self.current_balance - amount
        if self.current_balance.is_zero:
            self.status = GiftCardStatus.REDEEMED

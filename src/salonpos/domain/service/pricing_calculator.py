"""Domain service: Pricing Calculator.

Derives the register totals from the cart lines, the tax rate in the
checkout settings and the operator's discount text:

    subtotal        = sum(unit_price * quantity)
    tax_amount      = subtotal * tax_rate / 100
    total           = subtotal + tax_amount
    discount_amount = total * discount_percent / 100
    final_total     = total - discount_amount

Nothing is cached; callers recompute on every read so a stale total cannot
exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from salonpos.domain.exceptions import ValidationError
from salonpos.domain.model.cart import CartLine
from salonpos.domain.model.value_objects import HUNDRED, Money, parse_percentage

DISCOUNT_RANGE_MESSAGE = "Discount must be between 0 and 100"


@dataclass(frozen=True)
class DiscountInput:
    """Raw discount text as typed, plus its interpretation.

    The raw text is always kept so the field stays editable. Only a number
    in 0..100 is applied; everything else reports an error and counts as 0.
    """

    raw: str = ""

    @property
    def error(self) -> str | None:
        if not self.raw.strip():
            return None
        try:
            parse_percentage(self.raw)
        except ValidationError:
            return DISCOUNT_RANGE_MESSAGE
        return None

    @property
    def percent(self) -> Decimal:
        if not self.raw.strip() or self.error:
            return Decimal("0")
        return parse_percentage(self.raw)


@dataclass(frozen=True)
class PricingResult:
    subtotal: Money
    tax_rate: Decimal  # fraction, e.g. 0.05
    tax_amount: Money
    total: Money
    discount_percent: Decimal
    discount_amount: Money
    final_total: Money
    discount_error: str | None = None

    @property
    def has_discount(self) -> bool:
        return self.discount_percent > 0 and not self.discount_amount.is_zero


def calculate_pricing(
    lines: Sequence[CartLine],
    tax_rate_percent: Decimal,
    discount_input: DiscountInput | str = "",
) -> PricingResult:
    """Price the cart. Pure: equal inputs always give equal results."""
    if isinstance(discount_input, str):
        discount_input = DiscountInput(discount_input)

    subtotal = Money.zero()
    for line in lines:
        subtotal = subtotal + line.line_total

    tax_rate = tax_rate_percent / HUNDRED
    tax_amount = subtotal * tax_rate
    total = subtotal + tax_amount

    discount_percent = discount_input.percent
    discount_amount = total.percent(discount_percent)
    final_total = total - discount_amount

    return PricingResult(
        subtotal=subtotal,
        tax_rate=tax_rate,
        tax_amount=tax_amount,
        total=total,
        discount_percent=discount_percent,
        discount_amount=discount_amount,
        final_total=final_total,
        discount_error=discount_input.error,
    )

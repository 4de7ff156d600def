"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is pre-formatted.
"""

from __future__ import annotations

from dataclasses import dataclass

from salonpos.domain.model.transaction import PaymentMethod


@dataclass(frozen=True)
class CartLineDTO:
    """A single cart line as displayed to the operator."""

    index: int
    item_id: str
    kind: str
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class PricingDTO:
    subtotal: str
    tax_rate_percent: str
    tax_amount: str
    total: str
    discount_percent: str
    discount_amount: str
    final_total: str
    discount_error: str | None


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    pricing: PricingDTO
    client_name: str
    discount_input: str
    checkout_state: str


@dataclass(frozen=True)
class CatalogItemDTO:
    id: str
    kind: str
    name: str
    category: str
    price: str
    description: str


@dataclass(frozen=True)
class CatalogDTO:
    items: list[CatalogItemDTO]
    categories: list[str]


@dataclass(frozen=True)
class PaymentRequest:
    """Input: what the operator chose in the payment step."""

    method: PaymentMethod | str
    gift_card_code: str | None = None
    gift_card_amount: str | None = None


@dataclass(frozen=True)
class CheckoutOutcome:
    """Output: where the register ended up after a checkout step."""

    state: str
    completed: bool = False
    transaction_id: str | None = None


@dataclass(frozen=True)
class TransactionItemDTO:
    name: str
    quantity: int
    unit_price: str
    total_price: str
    category: str


@dataclass(frozen=True)
class TransactionDTO:
    id: str
    date: str
    client_name: str
    staff_name: str
    type: str
    description: str
    payment_method: str
    status: str
    location: str
    items: list[TransactionItemDTO]
    subtotal: str
    tax_amount: str
    discount_amount: str | None
    amount: str
    gift_card_code: str | None
    gift_card_amount: str | None
    remaining_balance: str | None

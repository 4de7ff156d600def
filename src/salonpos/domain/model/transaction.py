"""TransactionRecord: the durable trace of a completed sale.

Records are built once per checkout and never mutated afterwards; the
transaction store owns them from the moment they are handed over.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from salonpos.domain.model.value_objects import Money


class TransactionType(Enum):
    SERVICE_SALE = "service_sale"
    PRODUCT_SALE = "product_sale"


class TransactionStatus(Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class TransactionSource(Enum):
    POS = "pos"


class PaymentMethod(Enum):
    CASH = "cash"
    CREDIT_CARD = "credit_card"
    GIFT_CARD = "gift_card"
    MOBILE_PAYMENT = "mobile_payment"

    @property
    def label(self) -> str:
        return _PAYMENT_LABELS[self]

    @staticmethod
    def classify(method: PaymentMethod | str) -> PaymentMethod:
        """Map a payment method name onto the closed enum.

        Enum members pass through unchanged. Free text is matched by
        case-insensitive substring ("gift card", then "card"/"credit",
        then "mobile"); anything else falls back to cash, so "Cashapp"
        becomes CASH.
        """
        if isinstance(method, PaymentMethod):
            return method
        text = method.lower()
        if "gift card" in text:
            return PaymentMethod.GIFT_CARD
        if "card" in text or "credit" in text:
            return PaymentMethod.CREDIT_CARD
        if "mobile" in text:
            return PaymentMethod.MOBILE_PAYMENT
        return PaymentMethod.CASH


_PAYMENT_LABELS = {
    PaymentMethod.CASH: "Cash",
    PaymentMethod.CREDIT_CARD: "Credit Card",
    PaymentMethod.GIFT_CARD: "Gift Card",
    PaymentMethod.MOBILE_PAYMENT: "Mobile Payment",
}


@dataclass(frozen=True)
class TransactionItem:
    id: str
    name: str
    quantity: int
    unit_price: Money
    total_price: Money
    category: str
    sku: str


@dataclass(frozen=True)
class TransactionReference:
    type: str
    id: str


@dataclass(frozen=True)
class TransactionRecord:
    id: str
    client_id: str | None
    client_name: str
    staff_id: str | None
    staff_name: str
    type: TransactionType
    category: str
    description: str
    amount: Money
    payment_method: PaymentMethod
    status: TransactionStatus
    location: str
    source: TransactionSource
    reference: TransactionReference
    items: tuple[TransactionItem, ...]
    metadata: dict[str, Any] = field(default_factory=dict)
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

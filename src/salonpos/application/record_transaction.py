"""Application service: Transaction Recorder.

Turns a paid cart into a TransactionRecord, hands it to the transaction
store and decrements stock for every product line. Called exactly once per
completed checkout.

Failure scopes differ on purpose:
- the transaction store raising propagates to the caller, which still
  treats the payment as taken;
- an inventory decrement raising is logged and the loop moves on to the
  next product line. Stock bookkeeping never blocks a sale.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable

import structlog

from salonpos.application.notices import NoticeBoard
from salonpos.application.show_cart import format_percent
from salonpos.domain.model.cart import CartLine, SelectedClient, WALK_IN_CLIENT_NAME
from salonpos.domain.model.catalog import ItemKind
from salonpos.domain.model.operator import Operator
from salonpos.domain.model.transaction import (
    PaymentMethod,
    TransactionItem,
    TransactionRecord,
    TransactionReference,
    TransactionSource,
    TransactionStatus,
    TransactionType,
)
from salonpos.domain.model.value_objects import Money
from salonpos.domain.repository.transaction_repository import TransactionRepository
from salonpos.domain.service.inventory_sale_service import (
    InventorySaleService,
    ProductSale,
)
from salonpos.domain.service.pricing_calculator import PricingResult

logger = structlog.get_logger()

POS_SALE_CATEGORY = "POS Sale"
POS_REFERENCE_TYPE = "pos_sale"


@dataclass(frozen=True)
class SaleContext:
    """Everything about the sale that the recorder reads but does not own."""

    lines: tuple[CartLine, ...]
    pricing: PricingResult
    operator: Operator
    location_id: str
    client: SelectedClient | None = None


class TransactionRecorder:

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        inventory_service: InventorySaleService,
        notices: NoticeBoard,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._transaction_repo = transaction_repo
        self._inventory_service = inventory_service
        self._notices = notices
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def record(
        self,
        sale: SaleContext,
        payment_method: PaymentMethod | str,
        gift_card_code: str | None = None,
        gift_card_amount: Money | None = None,
        discount_percent: Decimal | None = None,
        discount_amount: Money | None = None,
    ) -> TransactionRecord:
        """Record the sale and return the stored TransactionRecord."""
        total = sale.pricing.total
        final_total = total - discount_amount if discount_amount is not None else total
        method = PaymentMethod.classify(payment_method)

        now = self._clock()
        reference = TransactionReference(
            type=POS_REFERENCE_TYPE,
            id=f"pos-{int(now.timestamp() * 1000)}",
        )

        record = TransactionRecord(
            id=reference.id,
            date=now,
            client_id=sale.client.id if sale.client else None,
            client_name=sale.client.name if sale.client else WALK_IN_CLIENT_NAME,
            staff_id=sale.operator.id,
            staff_name=sale.operator.display_name,
            type=_transaction_type(sale.lines),
            category=POS_SALE_CATEGORY,
            description=_describe(sale.lines, discount_percent),
            amount=final_total,
            payment_method=method,
            status=TransactionStatus.COMPLETED,
            location=sale.location_id,
            source=TransactionSource.POS,
            reference=reference,
            items=tuple(_to_item(line, i) for i, line in enumerate(sale.lines)),
            metadata=_metadata(
                sale,
                final_total=final_total,
                processed_at=now,
                gift_card_code=gift_card_code,
                gift_card_amount=gift_card_amount,
                discount_percent=discount_percent,
                discount_amount=discount_amount,
            ),
        )

        self._transaction_repo.add(record)
        logger.info(
            "transaction_recorded",
            transaction_id=record.id,
            amount=str(record.amount.amount),
            payment_method=method.value,
            items=len(record.items),
        )

        self._deduct_inventory(sale, method, reference)

        self._notices.info(
            "Transaction Recorded",
            f"Sale transaction of {final_total} has been recorded.",
        )
        return record

    def _deduct_inventory(
        self,
        sale: SaleContext,
        method: PaymentMethod,
        reference: TransactionReference,
    ) -> None:
        for line in sale.lines:
            if line.kind is not ItemKind.PRODUCT:
                continue
            try:
                self._inventory_service.record_product_sale(
                    ProductSale(
                        product_id=line.item_id,
                        name=line.name,
                        quantity=line.quantity,
                        unit_price=line.unit_price,
                        location_id=sale.location_id,
                        payment_method=method,
                        reference=reference,
                        client_id=sale.client.id if sale.client else None,
                        client_name=sale.client.name if sale.client else WALK_IN_CLIENT_NAME,
                        staff_id=sale.operator.id,
                        staff_name=sale.operator.display_name,
                    )
                )
            except Exception:
                logger.exception(
                    "inventory_update_failed",
                    product_id=line.item_id,
                    product_name=line.name,
                    quantity=line.quantity,
                    reference=reference.id,
                )


# --- Record building ----------------------------------------------------------


def _transaction_type(lines: tuple[CartLine, ...]) -> TransactionType:
    if any(line.kind is ItemKind.SERVICE for line in lines):
        return TransactionType.SERVICE_SALE
    return TransactionType.PRODUCT_SALE


def _count(lines: tuple[CartLine, ...], kind: ItemKind) -> int:
    return sum(1 for line in lines if line.kind is kind)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def _describe(lines: tuple[CartLine, ...], discount_percent: Decimal | None) -> str:
    services = _count(lines, ItemKind.SERVICE)
    products = _count(lines, ItemKind.PRODUCT)
    text = (
        f"POS Sale - {_plural(len(lines), 'item')} "
        f"({_plural(services, 'service')}, {_plural(products, 'product')})"
    )
    if discount_percent:
        text += f" with {format_percent(discount_percent)}% discount"
    return text


def _to_item(line: CartLine, index: int) -> TransactionItem:
    return TransactionItem(
        id=f"{line.kind.value}-{line.item_id}-{index}",
        name=line.name,
        quantity=line.quantity,
        unit_price=line.unit_price,
        total_price=line.line_total,
        category="Service" if line.kind is ItemKind.SERVICE else "Product",
        sku=line.item_id,
    )


def _metadata(
    sale: SaleContext,
    *,
    final_total: Money,
    processed_at: datetime,
    gift_card_code: str | None,
    gift_card_amount: Money | None,
    discount_percent: Decimal | None,
    discount_amount: Money | None,
) -> dict[str, Any]:
    pricing = sale.pricing
    metadata: dict[str, Any] = {
        "subtotal": pricing.subtotal.amount,
        "tax_rate": pricing.tax_rate,
        "tax_amount": pricing.tax_amount.amount,
        "original_total": pricing.total.amount,
    }
    if discount_percent and discount_amount is not None and not discount_amount.is_zero:
        metadata["discount_percentage"] = discount_percent
        metadata["discount_amount"] = discount_amount.amount
        metadata["discount_applied"] = True

    metadata["final_total"] = final_total.amount
    metadata["item_count"] = len(sale.lines)
    metadata["service_count"] = _count(sale.lines, ItemKind.SERVICE)
    metadata["product_count"] = _count(sale.lines, ItemKind.PRODUCT)
    metadata["processed_at"] = processed_at.isoformat()

    if gift_card_code and gift_card_amount is not None and not gift_card_amount.is_zero:
        metadata["gift_card_code"] = gift_card_code
        metadata["gift_card_amount"] = gift_card_amount.amount
        metadata["remaining_balance"] = final_total.amount - gift_card_amount.amount
    return metadata

"""Application services: Show Transaction and List Transactions (queries)."""

from __future__ import annotations

from decimal import Decimal

from salonpos.application.dto import TransactionDTO, TransactionItemDTO
from salonpos.domain.exceptions import EntityNotFoundError
from salonpos.domain.model.transaction import TransactionRecord
from salonpos.domain.model.value_objects import Money
from salonpos.domain.repository.transaction_repository import TransactionRepository


class ShowTransactionHandler:

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    def handle(self, transaction_id: str) -> TransactionDTO:
        record = self._transaction_repo.get_by_id(transaction_id)
        if record is None:
            raise EntityNotFoundError(f"Transaction '{transaction_id}' not found")
        return to_transaction_dto(record)


class ListTransactionsHandler:

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    def handle(self) -> list[TransactionDTO]:
        return [to_transaction_dto(r) for r in self._transaction_repo.list_all()]


# --- Mapping ------------------------------------------------------------------


def _money(metadata: dict, key: str) -> str | None:
    value = metadata.get(key)
    if value is None:
        return None
    return str(Money(Decimal(str(value))))


def to_transaction_dto(record: TransactionRecord) -> TransactionDTO:
    meta = record.metadata
    return TransactionDTO(
        id=record.id,
        date=record.date.strftime("%Y-%m-%d %H:%M UTC"),
        client_name=record.client_name,
        staff_name=record.staff_name,
        type=record.type.value,
        description=record.description,
        payment_method=record.payment_method.label,
        status=record.status.value,
        location=record.location,
        items=[
            TransactionItemDTO(
                name=item.name,
                quantity=item.quantity,
                unit_price=str(item.unit_price),
                total_price=str(item.total_price),
                category=item.category,
            )
            for item in record.items
        ],
        subtotal=_money(meta, "subtotal") or str(Money.zero()),
        tax_amount=_money(meta, "tax_amount") or str(Money.zero()),
        discount_amount=_money(meta, "discount_amount"),
        amount=str(record.amount),
        gift_card_code=meta.get("gift_card_code"),
        gift_card_amount=_money(meta, "gift_card_amount"),
        remaining_balance=_money(meta, "remaining_balance"),
    )

"""JSON-file-backed implementation of TransactionRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from salonpos.domain.exceptions import ValidationError
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
from salonpos.infrastructure.persistence.json_file import JsonFile

# Metadata entries stored as decimal strings and restored as Decimal.
_DECIMAL_METADATA = frozenset(
    {
        "subtotal",
        "tax_rate",
        "tax_amount",
        "original_total",
        "discount_percentage",
        "discount_amount",
        "final_total",
        "gift_card_amount",
        "remaining_balance",
    }
)


class JsonTransactionRepository(TransactionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, [])

    # --- TransactionRepository interface --------------------------------------

    def add(self, record: TransactionRecord) -> None:
        records = self._file.load()
        if any(raw["id"] == record.id for raw in records):
            raise ValidationError(f"Transaction '{record.id}' already recorded")
        records.append(self._to_raw(record))
        self._file.persist(records)

    def get_by_id(self, transaction_id: str) -> TransactionRecord | None:
        for raw in self._file.load():
            if raw["id"] == transaction_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[TransactionRecord]:
        return [self._to_domain(raw) for raw in self._file.load()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: TransactionRecord) -> dict:
        return {
            "id": record.id,
            "date": record.date.isoformat(),
            "client_id": record.client_id,
            "client_name": record.client_name,
            "staff_id": record.staff_id,
            "staff_name": record.staff_name,
            "type": record.type.value,
            "category": record.category,
            "description": record.description,
            "amount": str(record.amount.amount),
            "currency": record.amount.currency,
            "payment_method": record.payment_method.value,
            "status": record.status.value,
            "location": record.location,
            "source": record.source.value,
            "reference": {"type": record.reference.type, "id": record.reference.id},
            "items": [
                {
                    "id": item.id,
                    "name": item.name,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price.amount),
                    "total_price": str(item.total_price.amount),
                    "category": item.category,
                    "sku": item.sku,
                }
                for item in record.items
            ],
            "metadata": {
                key: str(value) if isinstance(value, Decimal) else value
                for key, value in record.metadata.items()
            },
        }

    @staticmethod
    def _to_domain(raw: dict) -> TransactionRecord:
        currency = raw.get("currency", "USD")
        metadata: dict[str, Any] = {
            key: Decimal(value) if key in _DECIMAL_METADATA else value
            for key, value in raw.get("metadata", {}).items()
        }
        return TransactionRecord(
            id=raw["id"],
            date=datetime.fromisoformat(raw["date"]),
            client_id=raw.get("client_id"),
            client_name=raw["client_name"],
            staff_id=raw.get("staff_id"),
            staff_name=raw["staff_name"],
            type=TransactionType(raw["type"]),
            category=raw["category"],
            description=raw["description"],
            amount=Money(Decimal(raw["amount"]), currency),
            payment_method=PaymentMethod(raw["payment_method"]),
            status=TransactionStatus(raw["status"]),
            location=raw["location"],
            source=TransactionSource(raw["source"]),
            reference=TransactionReference(**raw["reference"]),
            items=tuple(
                TransactionItem(
                    id=i["id"],
                    name=i["name"],
                    quantity=i["quantity"],
                    unit_price=Money(Decimal(i["unit_price"]), currency),
                    total_price=Money(Decimal(i["total_price"]), currency),
                    category=i["category"],
                    sku=i["sku"],
                )
                for i in raw["items"]
            ),
            metadata=metadata,
        )

"""JSON-file-backed implementation of GiftCardRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from salonpos.domain.model.gift_card import GiftCard, GiftCardStatus
from salonpos.domain.model.value_objects import Money
from salonpos.domain.repository.gift_card_repository import GiftCardRepository
from salonpos.infrastructure.persistence.json_file import JsonFile


class JsonGiftCardRepository(GiftCardRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, [])

    def get_by_code(self, code: str) -> GiftCard | None:
        for raw in self._file.load():
            if raw["code"] == code.strip().upper():
                return self._to_domain(raw)
        return None

    def save(self, card: GiftCard) -> None:
        records = [raw for raw in self._file.load() if raw["code"] != card.code]
        records.append(self._to_raw(card))
        self._file.persist(records)

    @staticmethod
    def _to_raw(card: GiftCard) -> dict:
        return {
            "code": card.code,
            "original_amount": str(card.original_amount.amount),
            "current_balance": str(card.current_balance.amount),
            "currency": card.current_balance.currency,
            "status": card.status.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> GiftCard:
        currency = raw.get("currency", "USD")
        return GiftCard(
            code=raw["code"],
            original_amount=Money(Decimal(raw["original_amount"]), currency),
            current_balance=Money(Decimal(raw["current_balance"]), currency),
            status=GiftCardStatus(raw["status"]),
        )

"""Application services: Issue Gift Card and Check Balance use cases."""

from __future__ import annotations

from salonpos.domain.exceptions import EntityNotFoundError, GiftCardError
from salonpos.domain.model.gift_card import GiftCard
from salonpos.domain.model.value_objects import Money
from salonpos.domain.repository.gift_card_repository import GiftCardRepository


class IssueGiftCardHandler:

    def __init__(self, gift_card_repo: GiftCardRepository) -> None:
        self._gift_card_repo = gift_card_repo

    def handle(self, code: str, amount: str) -> GiftCard:
        card = GiftCard.issue(code, Money.of(amount))
        if self._gift_card_repo.get_by_code(card.code) is not None:
            raise GiftCardError(f"Gift card {card.code} already exists")
        self._gift_card_repo.save(card)
        return card


class CheckGiftCardHandler:

    def __init__(self, gift_card_repo: GiftCardRepository) -> None:
        self._gift_card_repo = gift_card_repo

    def handle(self, code: str) -> GiftCard:
        card = self._gift_card_repo.get_by_code(code.strip())
        if card is None:
            raise EntityNotFoundError(f"Gift card not found: '{code}'")
        return card

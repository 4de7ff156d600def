"""Abstract repository for GiftCard aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from salonpos.domain.model.gift_card import GiftCard


class GiftCardRepository(ABC):

    @abstractmethod
    def get_by_code(self, code: str) -> GiftCard | None:
        """Return a gift card by code (case-insensitive), or None."""

    @abstractmethod
    def save(self, card: GiftCard) -> None:
        """Persist a new or updated gift card."""

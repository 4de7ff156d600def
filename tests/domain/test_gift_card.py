"""Unit tests for the GiftCard aggregate."""

import pytest

from salonpos.domain.exceptions import GiftCardError
from salonpos.domain.model.gift_card import GiftCard, GiftCardStatus
from salonpos.domain.model.value_objects import Money


class TestIssue:

    def test_code_is_normalised(self):
        card = GiftCard.issue(" gc-100 ", Money.of("50"))
        assert card.code == "GC-100"
        assert card.current_balance == Money.of("50")
        assert card.status is GiftCardStatus.ACTIVE

    def test_zero_amount_rejected(self):
        with pytest.raises(GiftCardError, match="greater than zero"):
            GiftCard.issue("GC1", Money.zero())


class TestRedeem:

    def test_partial_redeem_reduces_balance(self):
        card = GiftCard.issue("GC1", Money.of("50"))
        card.redeem(Money.of("20"))
        assert card.current_balance == Money.of("30")
        assert card.status is GiftCardStatus.ACTIVE

    def test_full_redeem_marks_redeemed(self):
        card = GiftCard.issue("GC1", Money.of("50"))
        card.redeem(Money.of("50"))
        assert card.current_balance.is_zero
        assert card.status is GiftCardStatus.REDEEMED

    def test_more_than_balance_rejected(self):
        card = GiftCard.issue("GC1", Money.of("50"))
        with pytest.raises(GiftCardError, match="only \\$50.00 available"):
            card.redeem(Money.of("60"))

    @pytest.mark.parametrize(
        "status, message",
        [
            (GiftCardStatus.EXPIRED, "expired"),
            (GiftCardStatus.CANCELLED, "cancelled"),
            (GiftCardStatus.REDEEMED, "fully redeemed"),
        ],
    )
    def test_unusable_status_rejected(self, status, message):
        card = GiftCard("GC1", Money.of("50"), Money.of("50"), status)
        with pytest.raises(GiftCardError, match=message):
            card.redeem(Money.of("10"))

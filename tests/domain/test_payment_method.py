"""Unit tests for payment method classification."""

import pytest

from salonpos.domain.model.transaction import PaymentMethod


class TestClassify:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Cash", PaymentMethod.CASH),
            ("Visa Credit Card", PaymentMethod.CREDIT_CARD),
            ("debit card", PaymentMethod.CREDIT_CARD),
            ("Gift Card", PaymentMethod.GIFT_CARD),
            ("Mobile Payment", PaymentMethod.MOBILE_PAYMENT),
        ],
    )
    def test_free_text(self, text, expected):
        assert PaymentMethod.classify(text) is expected

    def test_unrecognised_text_falls_back_to_cash(self):
        # "Cashapp" is a mobile wallet, but nothing in the name matches
        assert PaymentMethod.classify("Cashapp") is PaymentMethod.CASH

    def test_enum_passes_through(self):
        assert PaymentMethod.classify(PaymentMethod.GIFT_CARD) is PaymentMethod.GIFT_CARD

    def test_labels(self):
        assert PaymentMethod.CREDIT_CARD.label == "Credit Card"
        assert PaymentMethod.MOBILE_PAYMENT.label == "Mobile Payment"

"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from salonpos.domain.exceptions import ValidationError
from salonpos.domain.model.value_objects import Money, parse_percentage


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_decimal_is_exact(self):
        assert Money.of("105") * Decimal("0.1") == Money(Decimal("10.5"))

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("10") * 0.1

    def test_percent(self):
        assert Money.of("105").percent(Decimal("10")) == Money(Decimal("10.5"))

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_rounds_to_cents(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("94.5")) == "$94.50"

    def test_str_rounds_half_up(self):
        assert str(Money.of("10.125")) == "$10.13"
        assert str(Money.of("10.115")) == "$10.12"
        assert str(Money.of("0.005")) == "$0.01"

    def test_is_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero


# ── Percentages ──────────────────────────────────────────────────────────────


class TestParsePercentage:

    @pytest.mark.parametrize("raw", ["0", "10", "12.5", "100", " 7 "])
    def test_in_range(self, raw):
        assert parse_percentage(raw) == Decimal(raw.strip())

    @pytest.mark.parametrize("raw", ["-1", "100.01", "abc", "", "NaN", "Infinity"])
    def test_out_of_range_or_not_a_number(self, raw):
        with pytest.raises(ValidationError):
            parse_percentage(raw)

"""Unit tests for the pricing calculator."""

from decimal import Decimal

import pytest

from salonpos.domain.model.cart import CartLine
from salonpos.domain.model.catalog import ItemKind
from salonpos.domain.model.value_objects import Money
from salonpos.domain.service.pricing_calculator import (
    DISCOUNT_RANGE_MESSAGE,
    DiscountInput,
    calculate_pricing,
)


def _line(price: str, quantity: int = 1, kind: ItemKind = ItemKind.SERVICE) -> CartLine:
    return CartLine(
        item_id="1",
        kind=kind,
        name="Item",
        unit_price=Money.of(price),
        quantity=quantity,
    )


class TestTotals:

    def test_service_with_tax_and_no_discount(self):
        result = calculate_pricing([_line("100")], Decimal("5"))

        assert result.subtotal == Money.of("100")
        assert result.tax_rate == Decimal("0.05")
        assert result.tax_amount == Money.of("5")
        assert result.total == Money.of("105")
        assert result.discount_amount.is_zero
        assert result.final_total == Money.of("105")
        assert not result.has_discount

    def test_ten_percent_discount_applies_to_total_after_tax(self):
        result = calculate_pricing([_line("100")], Decimal("5"), "10")

        assert result.discount_percent == Decimal("10")
        assert result.discount_amount == Money.of("10.5")
        assert result.final_total == Money.of("94.5")
        assert result.has_discount

    def test_empty_cart_prices_to_zero(self):
        result = calculate_pricing([], Decimal("8.25"), "15")

        assert result.subtotal.is_zero
        assert result.tax_amount.is_zero
        assert result.final_total.is_zero

    def test_subtotal_sums_price_times_quantity(self):
        lines = [_line("45", 2), _line("12.50", 3, ItemKind.PRODUCT)]
        result = calculate_pricing(lines, Decimal("0"))
        assert result.subtotal == Money.of("127.50")

    def test_full_discount_is_allowed(self):
        result = calculate_pricing([_line("30")], Decimal("0"), "100")
        assert result.final_total.is_zero

    def test_same_inputs_give_same_result(self):
        lines = [_line("19.99", 3)]
        first = calculate_pricing(lines, Decimal("7.5"), "12.5")
        second = calculate_pricing(lines, Decimal("7.5"), "12.5")
        assert first == second

    @pytest.mark.parametrize(
        "price, qty, tax, discount",
        [("19.99", 3, "7.5", "12.5"), ("0.01", 1, "33", "33.3"), ("250", 2, "0", "0")],
    )
    def test_formula(self, price, qty, tax, discount):
        result = calculate_pricing([_line(price, qty)], Decimal(tax), discount)

        subtotal = Decimal(price) * qty
        total = subtotal + subtotal * Decimal(tax) / 100
        expected_final = total - total * Decimal(discount) / 100

        assert result.total.amount == total
        assert result.final_total.amount == expected_final


class TestDiscountInput:

    def test_blank_is_zero_without_error(self):
        assert DiscountInput("").percent == 0
        assert DiscountInput("  ").error is None

    @pytest.mark.parametrize("raw", ["150", "-5", "abc"])
    def test_invalid_counts_as_zero_and_reports(self, raw):
        discount = DiscountInput(raw)
        assert discount.percent == 0
        assert discount.error == DISCOUNT_RANGE_MESSAGE

    def test_invalid_discount_leaves_total_unchanged(self):
        result = calculate_pricing([_line("100")], Decimal("5"), "150")

        assert result.discount_error == DISCOUNT_RANGE_MESSAGE
        assert result.discount_amount.is_zero
        assert result.final_total == Money.of("105")

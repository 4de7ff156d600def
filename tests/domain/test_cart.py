"""Unit tests for the Cart aggregate."""

import pytest

from salonpos.domain.exceptions import (
    EmptyCartError,
    PermissionDeniedError,
    ValidationError,
)
from salonpos.domain.model.cart import Cart, CheckoutState, SelectedClient
from salonpos.domain.model.catalog import ItemKind, Product, Service
from salonpos.domain.model.operator import Operator
from salonpos.domain.model.value_objects import Money

CASHIER = Operator(id="s1", name="Sam", role="stylist", permissions=frozenset({"create_sale"}))


def _haircut() -> Service:
    return Service(id="1", name="Haircut", category="Hair", price=Money.of("50"))


def _shampoo() -> Product:
    return Product(id="1", name="Shampoo", category="Hair Care", price=Money.of("20"))


class TestAddItem:

    def test_new_item_appends_line_with_quantity_one(self):
        cart = Cart()
        cart.add_item(_haircut())

        assert len(cart.lines) == 1
        line = cart.lines[0]
        assert line.kind is ItemKind.SERVICE
        assert line.quantity == 1
        assert line.unit_price == Money.of("50")
        assert line.category == "Hair"

    def test_same_item_twice_merges_and_keeps_first_price(self):
        cart = Cart()
        shampoo = _shampoo()
        cart.add_item(shampoo)

        # Catalog price changes between the two adds
        shampoo.update_price(Money.of("25"))
        cart.add_item(shampoo)

        assert len(cart.lines) == 1
        assert cart.lines[0].quantity == 2
        assert cart.lines[0].unit_price == Money.of("20")

    def test_service_and_product_with_same_id_stay_separate(self):
        cart = Cart()
        cart.add_item(_haircut())
        cart.add_item(_shampoo())

        assert [line.kind for line in cart.lines] == [ItemKind.SERVICE, ItemKind.PRODUCT]


class TestLineEdits:

    def _cart(self) -> Cart:
        cart = Cart()
        cart.add_item(_haircut())
        cart.add_item(_shampoo())
        return cart

    def test_remove_by_index(self):
        cart = self._cart()
        cart.remove_item(0)
        assert [line.name for line in cart.lines] == ["Shampoo"]

    def test_remove_stale_index_is_noop(self):
        cart = self._cart()
        cart.remove_item(5)
        cart.remove_item(-1)
        assert len(cart.lines) == 2

    def test_update_quantity(self):
        cart = self._cart()
        cart.update_quantity(1, 4)
        assert cart.lines[1].quantity == 4
        assert cart.lines[1].line_total == Money.of("80")

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_quantity_below_one_is_noop(self, quantity):
        cart = self._cart()
        cart.update_quantity(0, quantity)
        assert cart.lines[0].quantity == 1

    def test_update_stale_index_is_noop(self):
        cart = self._cart()
        cart.update_quantity(9, 3)
        assert [line.quantity for line in cart.lines] == [1, 1]

    def test_clear(self):
        cart = self._cart()
        cart.clear()
        assert cart.is_empty


class TestCheckoutTransitions:

    def test_begin_checkout_moves_to_awaiting_payment(self):
        cart = Cart()
        cart.add_item(_haircut())
        cart.begin_checkout(CASHIER)
        assert cart.checkout_state is CheckoutState.AWAITING_PAYMENT

    def test_empty_cart_rejected(self):
        cart = Cart()
        with pytest.raises(EmptyCartError, match="add items"):
            cart.begin_checkout(CASHIER)
        assert cart.checkout_state is CheckoutState.IDLE

    def test_empty_cart_reported_before_missing_permission(self):
        cart = Cart()
        with pytest.raises(EmptyCartError):
            cart.begin_checkout(Operator())

    def test_missing_permission_rejected(self):
        cart = Cart()
        cart.add_item(_haircut())
        with pytest.raises(PermissionDeniedError, match="permission"):
            cart.begin_checkout(Operator(id="s2", role="stylist"))
        assert cart.checkout_state is CheckoutState.IDLE

    def test_receptionist_needs_no_permission(self):
        cart = Cart()
        cart.add_item(_haircut())
        cart.begin_checkout(Operator(id="s3", role="Receptionist"))
        assert cart.checkout_state is CheckoutState.AWAITING_PAYMENT

    def test_begin_twice_rejected(self):
        cart = Cart()
        cart.add_item(_haircut())
        cart.begin_checkout(CASHIER)
        with pytest.raises(ValidationError, match="already"):
            cart.begin_checkout(CASHIER)

    def test_cancel_keeps_lines(self):
        cart = Cart(discount_input="10")
        cart.add_item(_haircut())
        cart.begin_checkout(CASHIER)
        cart.cancel_checkout()

        assert cart.checkout_state is CheckoutState.IDLE
        assert len(cart.lines) == 1
        assert cart.discount_input == "10"

    def test_cancel_when_idle_rejected(self):
        with pytest.raises(ValidationError, match="No checkout"):
            Cart().cancel_checkout()

    def test_finish_empties_the_sale(self):
        cart = Cart(discount_input="10", client=SelectedClient("c1", "Jane Doe"))
        cart.add_item(_haircut())
        cart.begin_checkout(CASHIER)
        cart.finish_checkout()

        assert cart.is_empty
        assert cart.discount_input == ""
        assert cart.client is None
        assert cart.client_name == "Walk-in Customer"
        assert cart.checkout_state is CheckoutState.IDLE

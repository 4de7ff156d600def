"""Unit tests for stock records and the inventory sale service."""

import pytest

from salonpos.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from salonpos.domain.model.inventory import InventoryItem
from salonpos.domain.model.transaction import PaymentMethod, TransactionReference
from salonpos.domain.model.value_objects import Money
from salonpos.domain.service.inventory_sale_service import (
    InventorySaleService,
    ProductSale,
)
from tests.fakes import FakeInventoryRepository


def _stock(quantity: int = 10) -> InventoryItem:
    return InventoryItem(
        product_id="1", product_name="Shampoo", location_id="loc1", quantity=quantity
    )


def _sale(quantity: int, location_id: str = "loc1") -> ProductSale:
    return ProductSale(
        product_id="1",
        name="Shampoo",
        quantity=quantity,
        unit_price=Money.of("20"),
        location_id=location_id,
        payment_method=PaymentMethod.CASH,
        reference=TransactionReference(type="pos_sale", id="pos-1"),
    )


class TestInventoryItem:

    def test_deduct(self):
        item = _stock(10)
        item.deduct(3)
        assert item.quantity == 7

    def test_deduct_all(self):
        item = _stock(2)
        item.deduct(2)
        assert item.quantity == 0

    def test_deduct_more_than_stock_rejected(self):
        item = _stock(2)
        with pytest.raises(InsufficientStockError, match="need 3, have 2"):
            item.deduct(3)
        assert item.quantity == 2

    def test_deduct_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _stock().deduct(0)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _stock(-1)


class TestInventorySaleService:

    def test_sale_decrements_stored_stock(self):
        repo = FakeInventoryRepository([_stock(10)])
        InventorySaleService(repo).record_product_sale(_sale(4))
        assert repo.get("1", "loc1").quantity == 6

    def test_second_sale_of_last_unit_fails(self):
        repo = FakeInventoryRepository([_stock(1)])
        service = InventorySaleService(repo)

        service.record_product_sale(_sale(1))
        with pytest.raises(InsufficientStockError):
            service.record_product_sale(_sale(1))
        assert repo.get("1", "loc1").quantity == 0

    def test_unknown_location_rejected(self):
        repo = FakeInventoryRepository([_stock(10)])
        with pytest.raises(EntityNotFoundError, match="loc2"):
            InventorySaleService(repo).record_product_sale(_sale(1, "loc2"))

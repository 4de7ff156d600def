"""Unit tests for the catalog filter."""

from salonpos.domain.model.catalog import Product, Service
from salonpos.domain.model.value_objects import Money
from salonpos.domain.service.catalog_filter import (
    CatalogTab,
    category_chips,
    filter_catalog,
)

SERVICES = [
    Service(id="1", name="Haircut", category="Hair", price=Money.of("50")),
    Service(id="2", name="Facial", category="Skin", price=Money.of("80"),
            description="Deep cleansing treatment"),
    Service(id="3", name="Blow Dry", category="Hair", price=Money.of("30")),
]

PRODUCTS = [
    Product(id="1", name="Shampoo", category="Hair Care", price=Money.of("20")),
    Product(id="2", name="Serum", category="Skin Care", price=Money.of("45")),
    Product(id="3", name="Old Gel", category="Hair Care", price=Money.of("9"),
            is_active=False),
]


class TestFilterCatalog:

    def test_services_tab_without_filters_returns_all_services(self):
        items = filter_catalog(CatalogTab.SERVICES, "", None, SERVICES, PRODUCTS)
        assert [i.name for i in items] == ["Haircut", "Facial", "Blow Dry"]

    def test_search_matches_description_case_insensitively(self):
        items = filter_catalog(CatalogTab.SERVICES, "CLEANSING", None, SERVICES, PRODUCTS)
        assert [i.name for i in items] == ["Facial"]

    def test_search_matches_category(self):
        items = filter_catalog(CatalogTab.SERVICES, "hair", None, SERVICES, PRODUCTS)
        assert [i.name for i in items] == ["Haircut", "Blow Dry"]

    def test_category_chip_narrows(self):
        items = filter_catalog(CatalogTab.SERVICES, "", "Skin", SERVICES, PRODUCTS)
        assert [i.name for i in items] == ["Facial"]

    def test_inactive_products_hidden(self):
        items = filter_catalog(CatalogTab.PRODUCTS, "", None, SERVICES, PRODUCTS)
        assert [i.name for i in items] == ["Shampoo", "Serum"]


class TestCategoryChips:

    def test_service_categories_keep_catalog_order(self):
        assert category_chips(CatalogTab.SERVICES, SERVICES, PRODUCTS) == ["Hair", "Skin"]

    def test_product_categories_sorted_and_unique(self):
        assert category_chips(CatalogTab.PRODUCTS, SERVICES, PRODUCTS) == [
            "Hair Care",
            "Skin Care",
        ]

"""End-to-end tests for the salonpos command line."""

import json

import pytest
import structlog
from click.testing import CliRunner

from salonpos.infrastructure.cli.main import cli

_ENV_VARS = (
    "SALONPOS_LOCATION",
    "SALONPOS_STAFF_ID",
    "SALONPOS_STAFF_NAME",
    "SALONPOS_ROLE",
    "SALONPOS_PERMISSIONS",
    "SALONPOS_LOG_JSON",
)


@pytest.fixture
def runner(tmp_path, monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SALONPOS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SALONPOS_TAX_RATE", "5")
    monkeypatch.setenv("SALONPOS_LOG_LEVEL", "WARNING")
    yield CliRunner()
    # the CLI points structlog at the runner's stderr
    structlog.reset_defaults()


def _run(runner, *args):
    return runner.invoke(cli, list(args), catch_exceptions=False)


def _stock_catalog(runner):
    _run(runner, "catalog", "add-service", "--name", "Haircut", "--price", "100",
         "--category", "Hair", "--duration", "45")
    _run(runner, "catalog", "add-product", "--name", "Shampoo", "--price", "20",
         "--category", "Hair Care")
    _run(runner, "inventory", "set", "--product", "Shampoo", "--quantity", "5")


class TestCatalogCommands:

    def test_browse_lists_services_and_categories(self, runner):
        _stock_catalog(runner)

        result = _run(runner, "catalog", "browse")

        assert result.exit_code == 0
        assert "Categories: Hair" in result.output
        assert "Haircut" in result.output
        assert "Shampoo" not in result.output

    def test_inactive_product_hidden_from_browse(self, runner):
        _stock_catalog(runner)
        _run(runner, "catalog", "update-product", "--id", "1", "--inactive")

        result = _run(runner, "catalog", "browse", "--tab", "products")

        assert "No products found." in result.output


class TestCartCommands:

    def test_add_and_discount_show_totals(self, runner):
        _stock_catalog(runner)

        result = _run(runner, "cart", "add", "--service", "Haircut")
        assert "Added Haircut to cart" in result.output
        assert "$105.00" in result.output

        result = _run(runner, "cart", "discount", "10")
        assert "$94.50" in result.output

    def test_invalid_discount_reported(self, runner):
        _stock_catalog(runner)
        _run(runner, "cart", "add", "--service", "Haircut")

        result = _run(runner, "cart", "discount", "150")

        assert "Discount must be between 0 and 100" in result.output

    def test_negative_discount_is_kept_and_reported(self, runner, tmp_path):
        _stock_catalog(runner)
        _run(runner, "cart", "add", "--service", "Haircut")

        result = _run(runner, "cart", "discount", "-5")

        assert result.exit_code == 0
        assert "Discount must be between 0 and 100" in result.output
        assert "$105.00" in result.output
        cart = json.loads((tmp_path / "cart.json").read_text())
        assert cart["discount_input"] == "-5"

        result = _run(runner, "cart", "quantity", "--line", "1", "--qty", "2")
        assert result.exit_code == 0
        assert "$210.00" in result.output

    def test_unknown_item_fails(self, runner):
        result = _run(runner, "cart", "add", "--product", "Nope")
        assert result.exit_code == 1
        assert "Product not found" in result.output

    def test_needs_exactly_one_item_kind(self, runner):
        result = _run(runner, "cart", "add")
        assert result.exit_code == 2

    def test_lines_are_numbered_from_one(self, runner):
        _stock_catalog(runner)
        _run(runner, "cart", "add", "--service", "Haircut")
        _run(runner, "cart", "add", "--product", "Shampoo")

        result = _run(runner, "cart", "remove", "--line", "1")

        assert "Haircut" not in result.output
        assert "Shampoo" in result.output


class TestCheckoutCommands:

    def test_empty_cart_checkout_fails(self, runner):
        result = _run(runner, "--role", "receptionist", "checkout", "begin")

        assert result.exit_code == 1
        assert "Cart is empty" in result.output

    def test_checkout_without_permission_fails(self, runner):
        _stock_catalog(runner)
        _run(runner, "cart", "add", "--service", "Haircut")

        result = _run(runner, "--role", "stylist", "checkout", "begin")

        assert result.exit_code == 1
        assert "Permission denied" in result.output

    def test_full_sale(self, runner, tmp_path):
        _stock_catalog(runner)
        _run(runner, "cart", "add", "--service", "Haircut")
        _run(runner, "cart", "add", "--product", "Shampoo")
        _run(runner, "cart", "discount", "10")
        _run(runner, "cart", "client", "--id", "c1", "--name", "Jane Doe")

        result = _run(runner, "--permission", "create_sale", "--staff-name", "Sam",
                      "checkout", "begin")
        assert result.exit_code == 0
        assert "awaiting payment" in result.output

        result = _run(runner, "--staff-name", "Sam", "checkout", "pay", "--method", "cash")
        assert result.exit_code == 0
        assert "Payment successful" in result.output
        assert "$113.40 paid with Cash" in result.output

        records = json.loads((tmp_path / "transactions.json").read_text())
        assert len(records) == 1
        assert records[0]["client_name"] == "Jane Doe"
        assert records[0]["amount"] == "113.400"

        result = _run(runner, "inventory", "show")
        assert "Shampoo" in result.output
        assert " 4" in result.output

        result = _run(runner, "transaction", "show", records[0]["id"])
        assert "Total paid" in result.output
        assert "$113.40" in result.output

    def test_gift_card_sale(self, runner):
        _stock_catalog(runner)
        _run(runner, "giftcard", "issue", "--code", "gc1", "--amount", "50")
        _run(runner, "cart", "add", "--service", "Haircut")
        _run(runner, "--role", "receptionist", "checkout", "begin")

        result = _run(runner, "checkout", "pay", "--method", "gift_card", "--gift-card", "GC1")

        assert result.exit_code == 0
        assert "remaining $55.00 requires additional payment" in result.output
        result = _run(runner, "giftcard", "balance", "GC1")
        assert "GC1: $0.00 of $50.00 (redeemed)" in result.output

    def test_pay_without_checkout_fails(self, runner):
        result = _run(runner, "checkout", "pay", "--method", "cash")
        assert result.exit_code == 1
        assert "No checkout is awaiting payment" in result.output

    def test_begin_twice_reports_checkout_in_progress(self, runner):
        _stock_catalog(runner)
        _run(runner, "cart", "add", "--service", "Haircut")
        _run(runner, "--role", "receptionist", "checkout", "begin")

        result = _run(runner, "--role", "receptionist", "checkout", "begin")

        assert result.exit_code == 1
        assert "Checkout in progress: Checkout is already awaiting payment" in result.output

    def test_cancel_returns_to_cart(self, runner):
        _stock_catalog(runner)
        _run(runner, "cart", "add", "--service", "Haircut")
        _run(runner, "--role", "receptionist", "checkout", "begin")

        result = _run(runner, "checkout", "cancel")
        assert result.exit_code == 0
        assert "Checkout cancelled" in result.output

        result = _run(runner, "checkout", "cancel")
        assert result.exit_code == 1
        assert "No checkout in progress" in result.output


class TestSettingsCommands:

    def test_set_and_show(self, runner):
        result = _run(runner, "settings", "set", "--tax-rate", "8.25", "--location", "loc2")
        assert result.exit_code == 0

        result = _run(runner, "settings", "show")
        assert "Tax rate: 8.25%" in result.output
        assert "Location: loc2" in result.output

    def test_out_of_range_tax_rejected(self, runner):
        result = _run(runner, "settings", "set", "--tax-rate", "120")
        assert result.exit_code == 1


class TestConfiguration:

    def test_bad_tax_rate_in_environment_is_a_clean_error(self, runner, monkeypatch):
        monkeypatch.setenv("SALONPOS_TAX_RATE", "abc")

        result = _run(runner, "cart", "show")

        assert result.exit_code == 1
        assert "Invalid configuration: Invalid percentage: 'abc'" in result.output
        assert "Traceback" not in result.output

"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from salonpos.domain.model.settings import CheckoutSettings
from salonpos.infrastructure.config import AppConfig
from salonpos.infrastructure.persistence.json_cart_repository import JsonCartRepository
from salonpos.infrastructure.persistence.json_gift_card_repository import (
    JsonGiftCardRepository,
)
from salonpos.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from salonpos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
    JsonServiceRepository,
)
from salonpos.infrastructure.persistence.json_settings_repository import (
    JsonSettingsRepository,
)
from salonpos.infrastructure.persistence.json_transaction_repository import (
    JsonTransactionRepository,
)


class Repositories:
    """Lazily constructed JSON repositories under ``config.data_dir``."""

    def __init__(self, config: AppConfig) -> None:
        self._config = config

    def products(self) -> JsonProductRepository:
        return JsonProductRepository(self._config.data_dir / "products.json")

    def services(self) -> JsonServiceRepository:
        return JsonServiceRepository(self._config.data_dir / "services.json")

    def inventory(self) -> JsonInventoryRepository:
        return JsonInventoryRepository(self._config.data_dir / "inventory.json")

    def cart(self) -> JsonCartRepository:
        return JsonCartRepository(self._config.data_dir / "cart.json")

    def transactions(self) -> JsonTransactionRepository:
        return JsonTransactionRepository(self._config.data_dir / "transactions.json")

    def gift_cards(self) -> JsonGiftCardRepository:
        return JsonGiftCardRepository(self._config.data_dir / "gift_cards.json")

    def settings(self) -> JsonSettingsRepository:
        defaults = CheckoutSettings(
            tax_rate=self._config.default_tax_rate,
            location_id=self._config.default_location,
        )
        return JsonSettingsRepository(self._config.data_dir / "settings.json", defaults)

"""Application service: Update Checkout Settings use case."""

from __future__ import annotations

from dataclasses import replace

from salonpos.domain.model.settings import CheckoutSettings
from salonpos.domain.model.value_objects import parse_percentage
from salonpos.domain.repository.settings_repository import SettingsRepository


class UpdateCheckoutSettingsHandler:

    def __init__(self, settings_repo: SettingsRepository) -> None:
        self._settings_repo = settings_repo

    def handle(
        self,
        tax_rate: str | None = None,
        location_id: str | None = None,
    ) -> CheckoutSettings:
        settings = self._settings_repo.get_checkout_settings()
        if tax_rate is not None:
            settings = replace(settings, tax_rate=parse_percentage(tax_rate))
        if location_id is not None:
            settings = replace(settings, location_id=location_id.strip())
        self._settings_repo.save_checkout_settings(settings)
        return settings

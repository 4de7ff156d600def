"""JSON-file-backed implementation of SettingsRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from salonpos.domain.model.settings import CheckoutSettings
from salonpos.domain.repository.settings_repository import SettingsRepository
from salonpos.infrastructure.persistence.json_file import JsonFile


class JsonSettingsRepository(SettingsRepository):
    """Settings file; ``defaults`` apply until the first save."""

    def __init__(self, file_path: Path, defaults: CheckoutSettings) -> None:
        self._defaults = defaults
        self._file = JsonFile(file_path, {})

    def get_checkout_settings(self) -> CheckoutSettings:
        raw = self._file.load().get("checkout")
        if raw is None:
            return self._defaults
        return CheckoutSettings(
            tax_rate=Decimal(raw["tax_rate"]),
            location_id=raw["location_id"],
        )

    def save_checkout_settings(self, settings: CheckoutSettings) -> None:
        data = self._file.load()
        data["checkout"] = {
            "tax_rate": str(settings.tax_rate),
            "location_id": settings.location_id,
        }
        self._file.persist(data)

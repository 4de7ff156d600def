"""Abstract settings provider."""

from __future__ import annotations

from abc import ABC, abstractmethod

from salonpos.domain.model.settings import CheckoutSettings


class SettingsRepository(ABC):

    @abstractmethod
    def get_checkout_settings(self) -> CheckoutSettings:
        """Return the current checkout settings (defaults if never saved)."""

    @abstractmethod
    def save_checkout_settings(self, settings: CheckoutSettings) -> None:
        """Persist checkout settings."""

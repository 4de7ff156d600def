"""Abstract repository for the register's Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from salonpos.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get(self) -> Cart:
        """Return the register's current cart (an empty one if none is stored)."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the register's cart, replacing the previous one."""

"""Application service: Select Client use case."""

from __future__ import annotations

from salonpos.application.notices import NoticeBoard
from salonpos.domain.exceptions import ValidationError
from salonpos.domain.model.cart import SelectedClient
from salonpos.domain.repository.cart_repository import CartRepository


class SelectClientHandler:

    def __init__(self, cart_repo: CartRepository, notices: NoticeBoard) -> None:
        self._cart_repo = cart_repo
        self._notices = notices

    def handle(self, client_id: str | None, client_name: str | None) -> None:
        """Attach a client to the sale, or revert to walk-in when both are None."""
        cart = self._cart_repo.get()

        if client_id is None and client_name is None:
            cart.client = None
            self._cart_repo.save(cart)
            self._notices.info("Client cleared", "Sale is for a walk-in customer")
            return

        if not client_id or not client_name or not client_name.strip():
            raise ValidationError("Client ID and name are both required")

        cart.client = SelectedClient(id=client_id.strip(), name=client_name.strip())
        self._cart_repo.save(cart)
        self._notices.info("Client selected", f"Selected client: {cart.client.name}")

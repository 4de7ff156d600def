"""JSON-file-backed implementation of CartRepository.

The register keeps exactly one cart, stored as a single JSON object.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from salonpos.domain.model.cart import Cart, CartLine, CheckoutState, SelectedClient
from salonpos.domain.model.catalog import ItemKind
from salonpos.domain.model.value_objects import Money
from salonpos.domain.repository.cart_repository import CartRepository
from salonpos.infrastructure.persistence.json_file import JsonFile


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, self._to_raw(Cart()))

    def get(self) -> Cart:
        return self._to_domain(self._file.load())

    def save(self, cart: Cart) -> None:
        self._file.persist(self._to_raw(cart))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "checkout_state": cart.checkout_state.value,
            "discount_input": cart.discount_input,
            "client": (
                {"id": cart.client.id, "name": cart.client.name} if cart.client else None
            ),
            "lines": [
                {
                    "item_id": line.item_id,
                    "kind": line.kind.value,
                    "name": line.name,
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                    "quantity": line.quantity,
                    "category": line.category,
                }
                for line in cart.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        client = raw.get("client")
        return Cart(
            lines=[
                CartLine(
                    item_id=line["item_id"],
                    kind=ItemKind(line["kind"]),
                    name=line["name"],
                    unit_price=Money(Decimal(line["unit_price"]), line.get("currency", "USD")),
                    quantity=line["quantity"],
                    category=line.get("category", ""),
                )
                for line in raw.get("lines", [])
            ],
            discount_input=raw.get("discount_input", ""),
            client=SelectedClient(client["id"], client["name"]) if client else None,
            checkout_state=CheckoutState(raw.get("checkout_state", "idle")),
        )

"""Cart aggregate: the register's in-progress sale.

The Cart owns its lines, the raw discount text typed by the operator, the
selected client and the checkout state. Line operations never raise:
stale indices and quantities below one are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from salonpos.domain.exceptions import (
    CheckoutInProgressError,
    EmptyCartError,
    NoCheckoutError,
    PermissionDeniedError,
)
from salonpos.domain.model.catalog import CatalogItem, ItemKind
from salonpos.domain.model.operator import Operator
from salonpos.domain.model.value_objects import Money

WALK_IN_CLIENT_NAME = "Walk-in Customer"


class CheckoutState(Enum):
    IDLE = "idle"
    AWAITING_PAYMENT = "awaiting_payment"


@dataclass
class CartLine:
    """A service or product in the cart.

    ``name``, ``unit_price`` and ``category`` are copied from the catalog
    when the line is created and are never re-synced.
    """

    item_id: str
    kind: ItemKind
    name: str
    unit_price: Money
    quantity: int = 1
    category: str = ""

    @property
    def identity(self) -> tuple[str, ItemKind]:
        return self.item_id, self.kind

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class SelectedClient:
    id: str
    name: str


@dataclass
class Cart:
    lines: list[CartLine] = field(default_factory=list)
    discount_input: str = ""
    client: SelectedClient | None = None
    checkout_state: CheckoutState = CheckoutState.IDLE

    # --- Line operations ------------------------------------------------------

    def add_item(self, item: CatalogItem) -> CartLine:
        """Add one unit of ``item``, merging with an existing line."""
        for line in self.lines:
            if line.identity == (item.id, item.kind):
                line.quantity += 1
                return line

        line = CartLine(
            item_id=item.id,
            kind=item.kind,
            name=item.name,
            unit_price=item.price,  # <-- price snapshot
            quantity=1,
            category=item.category,
        )
        self.lines.append(line)
        return line

    def remove_item(self, index: int) -> None:
        if 0 <= index < len(self.lines):
            del self.lines[index]

    def update_quantity(self, index: int, new_quantity: int) -> None:
        if new_quantity < 1:
            return
        if 0 <= index < len(self.lines):
            self.lines[index].quantity = new_quantity

    def clear(self) -> None:
        self.lines.clear()

    # --- Checkout state transitions -------------------------------------------

    def begin_checkout(self, operator: Operator) -> None:
        """Transition IDLE -> AWAITING_PAYMENT.

        The empty-cart check runs before the permission check, so an
        operator without rights still sees the empty-cart message first.
        """
        if self.checkout_state is CheckoutState.AWAITING_PAYMENT:
            raise CheckoutInProgressError("Checkout is already awaiting payment")
        if self.is_empty:
            raise EmptyCartError("Please add items to the cart before checkout")
        if not operator.can_create_sale:
            raise PermissionDeniedError("You don't have permission to process sales")
        self.checkout_state = CheckoutState.AWAITING_PAYMENT

    def cancel_checkout(self) -> None:
        """Transition AWAITING_PAYMENT -> IDLE without side effects."""
        self._require_awaiting_payment()
        self.checkout_state = CheckoutState.IDLE

    def finish_checkout(self) -> None:
        """Transition AWAITING_PAYMENT -> IDLE after payment, emptying the sale."""
        self._require_awaiting_payment()
        self.lines.clear()
        self.discount_input = ""
        self.client = None
        self.checkout_state = CheckoutState.IDLE

    # --- Computed properties --------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def client_name(self) -> str:
        return self.client.name if self.client else WALK_IN_CLIENT_NAME

    # --- Internal helpers -----------------------------------------------------

    def _require_awaiting_payment(self) -> None:
        if self.checkout_state is not CheckoutState.AWAITING_PAYMENT:
            raise NoCheckoutError("No checkout is awaiting payment")

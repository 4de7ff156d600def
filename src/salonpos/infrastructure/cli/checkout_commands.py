"""CLI commands for the checkout step."""

from __future__ import annotations

import click

from salonpos.application.begin_checkout import BeginCheckoutHandler
from salonpos.application.cancel_checkout import CancelCheckoutHandler
from salonpos.application.complete_payment import CompletePaymentHandler
from salonpos.application.dto import PaymentRequest
from salonpos.application.record_transaction import TransactionRecorder
from salonpos.domain.model.transaction import PaymentMethod
from salonpos.domain.service.inventory_sale_service import InventorySaleService
from salonpos.infrastructure.cli.context import AppContext

_METHODS = [m.value for m in PaymentMethod]


@click.command("begin")
@click.pass_context
def checkout_begin(ctx: click.Context) -> None:
    """Open the payment step for the current cart."""
    app: AppContext = ctx.obj
    handler = BeginCheckoutHandler(app.repos.cart(), app.notices)
    outcome = handler.handle(app.operator)

    if app.flush_notices():
        ctx.exit(1)
    click.echo(f"Checkout {outcome.state.replace('_', ' ')}.")


@click.command("cancel")
@click.pass_context
def checkout_cancel(ctx: click.Context) -> None:
    """Leave the payment step and return to the cart."""
    app: AppContext = ctx.obj
    CancelCheckoutHandler(app.repos.cart(), app.notices).handle()
    if app.flush_notices():
        ctx.exit(1)


@click.command("pay")
@click.option(
    "--method",
    required=True,
    type=click.Choice(_METHODS, case_sensitive=False),
    help="Payment method.",
)
@click.option("--gift-card", "gift_card_code", default=None, help="Gift card code.")
@click.option(
    "--gift-card-amount",
    default=None,
    help="Amount to take from the gift card (default: as much as possible).",
)
@click.pass_context
def checkout_pay(
    ctx: click.Context,
    method: str,
    gift_card_code: str | None,
    gift_card_amount: str | None,
) -> None:
    """Take payment and record the sale."""
    app: AppContext = ctx.obj
    recorder = TransactionRecorder(
        transaction_repo=app.repos.transactions(),
        inventory_service=InventorySaleService(app.repos.inventory()),
        notices=app.notices,
    )
    handler = CompletePaymentHandler(
        cart_repo=app.repos.cart(),
        settings_repo=app.repos.settings(),
        gift_card_repo=app.repos.gift_cards(),
        recorder=recorder,
        notices=app.notices,
    )
    request = PaymentRequest(
        method=PaymentMethod(method.lower()),
        gift_card_code=gift_card_code,
        gift_card_amount=gift_card_amount,
    )

    outcome = handler.handle(app.operator, request)

    failed = app.flush_notices()
    if outcome.transaction_id:
        click.echo(f"Transaction {outcome.transaction_id}")
    if failed:
        ctx.exit(1)

"""CLI commands for gift cards."""

from __future__ import annotations

import click

from salonpos.application.gift_cards import CheckGiftCardHandler, IssueGiftCardHandler
from salonpos.domain.exceptions import DomainException
from salonpos.infrastructure.cli.context import AppContext, pass_app


@click.command("issue")
@click.option("--code", required=True, help="Gift card code.")
@click.option("--amount", required=True, help="Initial balance (e.g. 50.00).")
@pass_app
def giftcard_issue(app: AppContext, code: str, amount: str) -> None:
    """Issue a new gift card."""
    handler = IssueGiftCardHandler(gift_card_repo=app.repos.gift_cards())

    try:
        card = handler.handle(code=code, amount=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Gift card {card.code} issued for {card.original_amount}")


@click.command("balance")
@click.argument("code")
@pass_app
def giftcard_balance(app: AppContext, code: str) -> None:
    """Show a gift card's balance and status."""
    handler = CheckGiftCardHandler(gift_card_repo=app.repos.gift_cards())

    try:
        card = handler.handle(code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"{card.code}: {card.current_balance} of {card.original_amount} "
        f"({card.status.value})"
    )

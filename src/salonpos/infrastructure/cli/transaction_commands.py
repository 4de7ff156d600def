"""CLI commands for recorded sales."""

from __future__ import annotations

import click

from salonpos.application.dto import TransactionDTO
from salonpos.application.show_transaction import (
    ListTransactionsHandler,
    ShowTransactionHandler,
)
from salonpos.domain.exceptions import DomainException
from salonpos.infrastructure.cli.context import AppContext, pass_app


def display_receipt(dto: TransactionDTO) -> None:
    """Shared formatting for a single sale."""
    click.echo(f"Transaction {dto.id}  [{dto.status}]")
    click.echo(f"  Date:     {dto.date}")
    click.echo(f"  Client:   {dto.client_name}")
    click.echo(f"  Staff:    {dto.staff_name}")
    click.echo(f"  Location: {dto.location}")
    click.echo(f"  {dto.description}")
    click.echo()

    click.echo(f"  {'Item':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*52}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<24} {item.quantity:>5} {item.unit_price:>10} {item.total_price:>10}"
        )
    click.echo(f"  {'-'*52}")

    click.echo(f"  {'Subtotal':<40} {dto.subtotal:>12}")
    click.echo(f"  {'Tax':<40} {dto.tax_amount:>12}")
    if dto.discount_amount:
        click.echo(f"  {'Discount':<40} {'-' + dto.discount_amount:>12}")
    click.echo(f"  {'Total paid':<40} {dto.amount:>12}")
    click.echo(f"  Paid with {dto.payment_method}")
    if dto.gift_card_code:
        click.echo(
            f"  Gift card {dto.gift_card_code}: {dto.gift_card_amount} "
            f"(remaining due {dto.remaining_balance})"
        )


@click.command("list")
@pass_app
def transaction_list(app: AppContext) -> None:
    """List recorded sales."""
    handler = ListTransactionsHandler(transaction_repo=app.repos.transactions())
    records = handler.handle()

    if not records:
        click.echo("No transactions found.")
        return

    click.echo(f"{'ID':<18} {'Date':<22} {'Client':<20} {'Method':<15} {'Amount':>10}")
    click.echo("-" * 89)
    for r in records:
        click.echo(
            f"{r.id:<18} {r.date:<22} {r.client_name:<20} {r.payment_method:<15} {r.amount:>10}"
        )


@click.command("show")
@click.argument("transaction_id")
@pass_app
def transaction_show(app: AppContext, transaction_id: str) -> None:
    """Print the receipt for a recorded sale."""
    handler = ShowTransactionHandler(transaction_repo=app.repos.transactions())

    try:
        dto = handler.handle(transaction_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_receipt(dto)

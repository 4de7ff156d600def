"""CLI commands for the register's cart.

Lines are numbered from 1 on screen; the application layer uses 0-based
indices.
"""

from __future__ import annotations

import click

from salonpos.application.add_to_cart import AddToCartHandler
from salonpos.application.apply_discount import ApplyDiscountHandler
from salonpos.application.dto import CartDTO
from salonpos.application.edit_cart import (
    ClearCartHandler,
    RemoveFromCartHandler,
    UpdateCartQuantityHandler,
)
from salonpos.application.select_client import SelectClientHandler
from salonpos.application.show_cart import ShowCartHandler
from salonpos.domain.exceptions import DomainException
from salonpos.domain.model.catalog import ItemKind
from salonpos.infrastructure.cli.context import AppContext, pass_app


def display_cart(dto: CartDTO) -> None:
    """Shared formatting for the cart and its totals."""
    click.echo(f"Client: {dto.client_name}   (checkout={dto.checkout_state})")
    click.echo()

    if not dto.lines:
        click.echo("  Cart is empty.")
    else:
        click.echo(f"  {'#':>3} {'Item':<24} {'Kind':<8} {'Qty':>5} {'Price':>10} {'Total':>10}")
        click.echo(f"  {'-'*64}")
        for line in dto.lines:
            click.echo(
                f"  {line.index + 1:>3} {line.name:<24} {line.kind:<8} "
                f"{line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
            )
        click.echo(f"  {'-'*64}")

    p = dto.pricing
    click.echo(f"  {'Subtotal':<40} {p.subtotal:>24}")
    click.echo(f"  {'Tax (' + p.tax_rate_percent + '%)':<40} {p.tax_amount:>24}")
    click.echo(f"  {'Total':<40} {p.total:>24}")
    if dto.discount_input:
        label = f"Discount ({p.discount_percent}%)"
        click.echo(f"  {label:<40} {'-' + p.discount_amount:>24}")
        if p.discount_error:
            click.echo(f"  ! {p.discount_error} (entered '{dto.discount_input}')")
    click.echo(f"  {'Amount Due':<40} {p.final_total:>24}")


@click.command("add")
@click.option("--service", "service_ref", default=None, help="Service ID or name.")
@click.option("--product", "product_ref", default=None, help="Product ID or name.")
@pass_app
def cart_add(app: AppContext, service_ref: str | None, product_ref: str | None) -> None:
    """Add one unit of a service or product to the cart."""
    if (service_ref is None) == (product_ref is None):
        raise click.UsageError("Give exactly one of --service or --product.")

    handler = AddToCartHandler(
        cart_repo=app.repos.cart(),
        service_repo=app.repos.services(),
        product_repo=app.repos.products(),
        settings_repo=app.repos.settings(),
        notices=app.notices,
    )
    kind = ItemKind.SERVICE if service_ref is not None else ItemKind.PRODUCT

    try:
        dto = handler.handle(kind, service_ref or product_ref)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    app.flush_notices()
    display_cart(dto)


@click.command("remove")
@click.option("--line", "line_no", required=True, type=int, help="Line number to remove.")
@pass_app
def cart_remove(app: AppContext, line_no: int) -> None:
    """Remove a line from the cart."""
    handler = RemoveFromCartHandler(app.repos.cart(), app.repos.settings())
    display_cart(handler.handle(line_no - 1))


@click.command("quantity")
@click.option("--line", "line_no", required=True, type=int, help="Line number to change.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity (ignored below 1).")
@pass_app
def cart_quantity(app: AppContext, line_no: int, quantity: int) -> None:
    """Change the quantity of a cart line."""
    handler = UpdateCartQuantityHandler(app.repos.cart(), app.repos.settings())
    display_cart(handler.handle(line_no - 1, quantity))


@click.command("clear")
@pass_app
def cart_clear(app: AppContext) -> None:
    """Empty the cart."""
    handler = ClearCartHandler(app.repos.cart(), app.repos.settings())
    display_cart(handler.handle())


@click.command("discount", context_settings={"ignore_unknown_options": True})
@click.argument("percent")
@pass_app
def cart_discount(app: AppContext, percent: str) -> None:
    """Set the discount percentage (0-100); pass "" to remove it."""
    handler = ApplyDiscountHandler(app.repos.cart(), app.repos.settings(), app.notices)
    dto = handler.handle(percent)
    app.flush_notices()
    display_cart(dto)


@click.command("client")
@click.option("--id", "client_id", default=None, help="Client ID.")
@click.option("--name", "client_name", default=None, help="Client name.")
@click.option("--walk-in", is_flag=True, default=False, help="Clear the selected client.")
@pass_app
def cart_client(
    app: AppContext,
    client_id: str | None,
    client_name: str | None,
    walk_in: bool,
) -> None:
    """Select the client for this sale."""
    if walk_in and (client_id or client_name):
        raise click.UsageError("--walk-in cannot be combined with --id/--name.")
    if not walk_in and client_id is None and client_name is None:
        raise click.UsageError("Give --id and --name, or --walk-in.")

    handler = SelectClientHandler(app.repos.cart(), app.notices)
    try:
        handler.handle(client_id, client_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    app.flush_notices()


@click.command("show")
@pass_app
def cart_show(app: AppContext) -> None:
    """Show the cart with current totals."""
    handler = ShowCartHandler(app.repos.cart(), app.repos.settings())
    display_cart(handler.handle())

"""CLI commands for inventory management."""

from __future__ import annotations

import click

from salonpos.application.set_inventory import SetInventoryHandler
from salonpos.application.show_inventory import ShowInventoryHandler
from salonpos.domain.exceptions import DomainException
from salonpos.infrastructure.cli.context import AppContext, pass_app


@click.command("set")
@click.option("--product", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--location", default=None, help="Location ID (default: the register's).")
@pass_app
def inventory_set(app: AppContext, product: str, quantity: int, location: str | None) -> None:
    """Set the stock level for a product."""
    location_id = location or app.repos.settings().get_checkout_settings().location_id
    handler = SetInventoryHandler(
        inventory_repo=app.repos.inventory(),
        product_repo=app.repos.products(),
    )

    try:
        handler.handle(product_name=product, location_id=location_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory for '{product}' at {location_id} set to {quantity}")


@click.command("show")
@click.option("--location", default=None, help="Only this location.")
@pass_app
def inventory_show(app: AppContext, location: str | None) -> None:
    """Show current stock levels."""
    handler = ShowInventoryHandler(inventory_repo=app.repos.inventory())
    lines = handler.handle(location_id=location)

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'Product':<24} {'Location':<10} {'Quantity':>8}")
    click.echo("-" * 44)
    for line in lines:
        click.echo(f"{line.product_name:<24} {line.location_id:<10} {line.quantity:>8}")

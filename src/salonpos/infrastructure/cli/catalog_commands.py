"""CLI commands for the service menu and retail catalog."""

from __future__ import annotations

import click

from salonpos.application.add_product import AddProductHandler, AddServiceHandler
from salonpos.application.browse_catalog import BrowseCatalogHandler
from salonpos.application.update_product import UpdateProductHandler
from salonpos.domain.exceptions import DomainException
from salonpos.domain.service.catalog_filter import CatalogTab
from salonpos.infrastructure.cli.context import AppContext, pass_app


@click.command("browse")
@click.option(
    "--tab",
    type=click.Choice([t.value for t in CatalogTab]),
    default=CatalogTab.SERVICES.value,
    show_default=True,
    help="Which side of the catalog to show.",
)
@click.option("--search", "search_term", default="", help="Filter on name, category or description.")
@click.option("--category", default=None, help="Only this category.")
@pass_app
def catalog_browse(app: AppContext, tab: str, search_term: str, category: str | None) -> None:
    """List services or products available at the register."""
    handler = BrowseCatalogHandler(
        service_repo=app.repos.services(),
        product_repo=app.repos.products(),
    )
    dto = handler.handle(CatalogTab(tab), search_term=search_term, category=category)

    if dto.categories:
        click.echo("Categories: " + ", ".join(dto.categories))
        click.echo()

    if not dto.items:
        click.echo(f"No {tab} found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<16} {'Price':>10}")
    click.echo("-" * 59)
    for item in dto.items:
        click.echo(f"{item.id:<6} {item.name:<24} {item.category:<16} {item.price:>10}")


@click.command("add-service")
@click.option("--name", required=True, help="Service name.")
@click.option("--price", required=True, help="Price (e.g. 45.00).")
@click.option("--category", required=True, help="Service category, e.g. Hair.")
@click.option("--duration", "duration_minutes", type=int, default=0, help="Duration in minutes.")
@click.option("--description", default="", help="Short description.")
@pass_app
def catalog_add_service(
    app: AppContext,
    name: str,
    price: str,
    category: str,
    duration_minutes: int,
    description: str,
) -> None:
    """Add a service to the menu."""
    handler = AddServiceHandler(service_repo=app.repos.services())

    try:
        service = handler.handle(
            name=name,
            price=price,
            category=category,
            duration_minutes=duration_minutes,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Service #{service.id} '{service.name}' added at {service.price}")


@click.command("add-product")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, help="Product category, e.g. Shampoo.")
@click.option("--description", default="", help="Short description.")
@click.option("--sku", default="", help="Stock keeping unit.")
@pass_app
def catalog_add_product(
    app: AppContext,
    name: str,
    price: str,
    category: str,
    description: str,
    sku: str,
) -> None:
    """Add a retail product to the catalog."""
    handler = AddProductHandler(product_repo=app.repos.products())

    try:
        product = handler.handle(
            name=name,
            price=price,
            category=category,
            description=description,
            sku=sku,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update-product")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--active/--inactive", default=None, help="Offer or withdraw the product.")
@pass_app
def catalog_update_product(
    app: AppContext,
    product_id: str,
    price: str | None,
    active: bool | None,
) -> None:
    """Change a product's price or availability."""
    if price is None and active is None:
        raise click.UsageError("Nothing to update: give --price and/or --active/--inactive.")

    handler = UpdateProductHandler(product_repo=app.repos.products())

    try:
        handler.handle(product_id=product_id, new_price=price, active=active)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")

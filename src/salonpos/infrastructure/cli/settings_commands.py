"""CLI commands for checkout settings."""

from __future__ import annotations

import click

from salonpos.application.show_cart import format_percent
from salonpos.application.update_settings import UpdateCheckoutSettingsHandler
from salonpos.domain.exceptions import DomainException
from salonpos.infrastructure.cli.context import AppContext, pass_app


@click.command("show")
@pass_app
def settings_show(app: AppContext) -> None:
    """Show the tax rate and location used at checkout."""
    settings = app.repos.settings().get_checkout_settings()
    click.echo(f"Tax rate: {format_percent(settings.tax_rate)}%")
    click.echo(f"Location: {settings.location_id}")


@click.command("set")
@click.option("--tax-rate", default=None, help="Tax rate percentage, 0-100.")
@click.option("--location", default=None, help="Location ID for sales and stock.")
@pass_app
def settings_set(app: AppContext, tax_rate: str | None, location: str | None) -> None:
    """Change checkout settings."""
    if tax_rate is None and location is None:
        raise click.UsageError("Nothing to update: give --tax-rate and/or --location.")

    handler = UpdateCheckoutSettingsHandler(settings_repo=app.repos.settings())
    try:
        settings = handler.handle(tax_rate=tax_rate, location_id=location)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Settings updated: tax {format_percent(settings.tax_rate)}%, "
        f"location {settings.location_id}"
    )

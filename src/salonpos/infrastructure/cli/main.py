import click

from salonpos.domain.exceptions import DomainException
from salonpos.domain.model.operator import Operator
from salonpos.infrastructure.bootstrap import Repositories
from salonpos.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_client,
    cart_discount,
    cart_quantity,
    cart_remove,
    cart_show,
)
from salonpos.infrastructure.cli.catalog_commands import (
    catalog_add_product,
    catalog_add_service,
    catalog_browse,
    catalog_update_product,
)
from salonpos.infrastructure.cli.checkout_commands import (
    checkout_begin,
    checkout_cancel,
    checkout_pay,
)
from salonpos.infrastructure.cli.context import AppContext
from salonpos.infrastructure.cli.gift_card_commands import giftcard_balance, giftcard_issue
from salonpos.infrastructure.cli.inventory_commands import inventory_set, inventory_show
from salonpos.infrastructure.cli.settings_commands import settings_set, settings_show
from salonpos.infrastructure.cli.transaction_commands import (
    transaction_list,
    transaction_show,
)
from salonpos.infrastructure.config import AppConfig
from salonpos.infrastructure.log_config import configure_logging


@click.group()
@click.option("--staff-id", envvar="SALONPOS_STAFF_ID", default=None, help="Operator ID.")
@click.option("--staff-name", envvar="SALONPOS_STAFF_NAME", default=None, help="Operator name.")
@click.option("--role", envvar="SALONPOS_ROLE", default="", help="Operator role, e.g. receptionist.")
@click.option(
    "--permission",
    "permissions",
    multiple=True,
    envvar="SALONPOS_PERMISSIONS",
    help="Operator permission (repeatable), e.g. create_sale.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    staff_id: str | None,
    staff_name: str | None,
    role: str,
    permissions: tuple[str, ...],
) -> None:
    """Salon POS: register, checkout and sales records"""
    try:
        config = AppConfig.from_env()
    except DomainException as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    configure_logging(config.log_level, json=config.log_json)
    ctx.obj = AppContext(
        config=config,
        repos=Repositories(config),
        operator=Operator(
            id=staff_id,
            name=staff_name,
            role=role,
            permissions=frozenset(permissions),
        ),
    )


@cli.group()
def catalog() -> None:
    """Browse and manage services and products."""


@cli.group()
def cart() -> None:
    """Build the current sale."""


@cli.group()
def checkout() -> None:
    """Take payment for the current sale."""


@cli.group()
def inventory() -> None:
    """Manage product stock."""


@cli.group()
def settings() -> None:
    """Checkout settings."""


@cli.group()
def giftcard() -> None:
    """Issue and inspect gift cards."""


@cli.group()
def transaction() -> None:
    """Recorded sales."""


# Register subcommands
catalog.add_command(catalog_browse)
catalog.add_command(catalog_add_service)
catalog.add_command(catalog_add_product)
catalog.add_command(catalog_update_product)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_quantity)
cart.add_command(cart_clear)
cart.add_command(cart_discount)
cart.add_command(cart_client)
cart.add_command(cart_show)
checkout.add_command(checkout_begin)
checkout.add_command(checkout_cancel)
checkout.add_command(checkout_pay)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
settings.add_command(settings_show)
settings.add_command(settings_set)
giftcard.add_command(giftcard_issue)
giftcard.add_command(giftcard_balance)
transaction.add_command(transaction_list)
transaction.add_command(transaction_show)

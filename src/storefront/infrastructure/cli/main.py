import click

from storefront.infrastructure.cli.auth_commands import (
    auth_grant_admin,
    auth_login,
    auth_register,
    auth_whoami,
)
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_review,
    product_seed,
    product_show,
    product_update,
)
from storefront.infrastructure.logger_config import setup_logging


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG).")
def cli(log_level: str | None) -> None:
    """Storefront — catalog, accounts and shopping cart"""
    setup_logging(log_level)


@cli.group()
def auth() -> None:
    """Register, log in and inspect your token."""


@cli.group()
def product() -> None:
    """Browse and manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage your shopping cart."""


# Register subcommands
auth.add_command(auth_grant_admin)
auth.add_command(auth_login)
auth.add_command(auth_register)
auth.add_command(auth_whoami)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_review)
product.add_command(product_seed)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
cli.add_command(checkout)

"""CLI commands for the shopping cart.

Every command prints the cart as the server now holds it; nothing is
cached on the client side.
"""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.get_cart import GetCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.update_cart_quantity import UpdateCartQuantityHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_max_retries,
    cart_repository,
    product_repository,
    user_repository,
)
from storefront.infrastructure.cli.session import authenticate, to_click_error, token_option


def _mutation_repos() -> dict:
    return {
        "cart_repo": cart_repository(),
        "user_repo": user_repository(),
        "product_repo": product_repository(),
        "max_retries": cart_max_retries(),
    }


def _display_unavailable(dto: CartDTO) -> None:
    for product_id in dto.unavailable_product_ids:
        click.echo(
            f"  Product '{product_id}' is no longer available. "
            f"Run 'storefront cart remove --product {product_id}' to drop it."
        )


def display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a cart."""
    if not dto.lines:
        click.echo("Your cart is empty.")
        _display_unavailable(dto)
        return

    click.echo(f"  {'ID':<6} {'Product':<32} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*67}")
    for line in dto.lines:
        click.echo(
            f"  {line.product.id:<6} {line.product.name[:32]:<32} {line.quantity:>5} "
            f"{line.product.price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*67}")
    click.echo(f"  {'Subtotal (' + str(dto.total_items) + ' items)':<45} {dto.subtotal:>22}")
    _display_unavailable(dto)


@click.command("show")
@token_option
def cart_show(token: str | None) -> None:
    """Show the contents of your cart."""
    identity = authenticate(token)
    handler = GetCartHandler(
        cart_repo=cart_repository(),
        user_repo=user_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(identity.user_id)
    except DomainException as exc:
        raise to_click_error(exc)

    display_cart(dto)


@click.command("add")
@token_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", type=int, default=1, show_default=True, help="Units to add.")
def cart_add(token: str | None, product_id: str, quantity: int) -> None:
    """Add units of a product to your cart (adds to any already there)."""
    identity = authenticate(token)
    handler = AddToCartHandler(**_mutation_repos())

    try:
        dto = handler.handle(identity.user_id, product_id, quantity)
    except DomainException as exc:
        raise to_click_error(exc)

    display_cart(dto)


@click.command("update")
@token_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", type=int, required=True, help="New quantity (0 removes).")
def cart_update(token: str | None, product_id: str, quantity: int) -> None:
    """Set the quantity of a product already in your cart."""
    identity = authenticate(token)
    handler = UpdateCartQuantityHandler(**_mutation_repos())

    try:
        dto = handler.handle(identity.user_id, product_id, quantity)
    except DomainException as exc:
        raise to_click_error(exc)

    display_cart(dto)


@click.command("remove")
@token_option
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(token: str | None, product_id: str) -> None:
    """Remove a product from your cart."""
    identity = authenticate(token)
    handler = RemoveFromCartHandler(**_mutation_repos())

    try:
        dto = handler.handle(identity.user_id, product_id)
    except DomainException as exc:
        raise to_click_error(exc)

    display_cart(dto)


@click.command("clear")
@token_option
def cart_clear(token: str | None) -> None:
    """Empty your cart."""
    identity = authenticate(token)
    handler = ClearCartHandler(**_mutation_repos())

    try:
        message = handler.handle(identity.user_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(message)

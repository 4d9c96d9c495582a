"""CLI command for checking out the cart."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutHandler, PaymentMethod
from storefront.application.dto import CheckoutSummaryDTO, ShippingAddress
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_max_retries,
    cart_repository,
    product_repository,
    user_repository,
)
from storefront.infrastructure.cli.session import authenticate, to_click_error, token_option


def _display_summary(summary: CheckoutSummaryDTO) -> None:
    address = summary.shipping_address
    click.echo("Order placed successfully!")
    click.echo()
    click.echo("Shipping to:")
    click.echo(f"  {address.full_name}")
    click.echo(f"  {address.address_line1}")
    if address.address_line2:
        click.echo(f"  {address.address_line2}")
    click.echo(f"  {address.city}, {address.state} {address.zip_code}")
    click.echo(f"  {address.country}")
    click.echo()
    click.echo(f"Payment method: {summary.payment_method}")
    click.echo()
    for line in summary.lines:
        click.echo(f"  {line.product.name[:40]:<40} x {line.quantity:>3} {line.line_total:>12}")
    click.echo(f"  {'-'*58}")
    click.echo(f"  {'Subtotal (' + str(summary.total_items) + ' items)':<46} {summary.subtotal:>12}")
    click.echo(f"  {'Shipping':<46} {'FREE':>12}")
    click.echo(f"  {'Order Total':<46} {summary.total:>12}")
    click.echo()
    click.echo(f"Placed at {summary.placed_at}")


@click.command("checkout")
@token_option
@click.option("--full-name", required=True, help="Recipient name.")
@click.option("--address-line1", required=True, help="Street address.")
@click.option("--address-line2", default="", help="Apartment, suite, etc.")
@click.option("--city", required=True)
@click.option("--state", required=True, help="State or province.")
@click.option("--zip-code", required=True, help="Zip or postal code.")
@click.option("--country", required=True)
@click.option(
    "--payment",
    "payment_method",
    required=True,
    type=click.Choice([m.value for m in PaymentMethod]),
    help="Payment method (placeholder, nothing is charged).",
)
def checkout(
    token: str | None,
    full_name: str,
    address_line1: str,
    address_line2: str,
    city: str,
    state: str,
    zip_code: str,
    country: str,
    payment_method: str,
) -> None:
    """Place an order for everything in your cart and empty it."""
    identity = authenticate(token)
    handler = CheckoutHandler(
        cart_repo=cart_repository(),
        user_repo=user_repository(),
        product_repo=product_repository(),
        max_retries=cart_max_retries(),
    )
    address = ShippingAddress(
        full_name=full_name,
        address_line1=address_line1,
        address_line2=address_line2,
        city=city,
        state=state,
        zip_code=zip_code,
        country=country,
    )

    try:
        summary = handler.handle(identity.user_id, address, payment_method)
    except DomainException as exc:
        raise to_click_error(exc)

    _display_summary(summary)

"""CLI commands for the Product catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.add_review import AddReviewHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dto import ProductDTO
from storefront.application.list_products import ListProductsHandler, ShowProductHandler
from storefront.application.seed_catalog import SeedCatalogHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository, user_repository
from storefront.infrastructure.cli.session import authenticate, to_click_error, token_option
from storefront.infrastructure.seed_data import DEMO_PRODUCTS


def _parse_specs(raw: tuple[str, ...]) -> dict[str, str | int | float]:
    """Parse ('Weight=250g', 'Ports=2') into {'Weight': '250g', 'Ports': 2}."""
    specs: dict[str, str | int | float] = {}
    for pair in raw:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid specification '{pair}'. Expected 'Key=Value'."
            )
        key, value = pair.split("=", 1)
        specs[key.strip()] = _coerce_number(value.strip())
    return specs


def _coerce_number(value: str) -> str | int | float:
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue
    return value


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"Category: {dto.category}")
    click.echo(f"Price:    {dto.price}")
    click.echo(f"Stock:    {dto.stock}")
    click.echo(f"Rating:   {dto.rating:.1f} ({dto.num_reviews} reviews)")
    click.echo()
    click.echo(dto.long_description or dto.description)

    if dto.specifications:
        click.echo()
        click.echo("Specifications:")
        for key, value in dto.specifications.items():
            click.echo(f"  {key:<20} {value}")

    if dto.reviews:
        click.echo()
        click.echo("Reviews:")
        for review in dto.reviews:
            click.echo(f"  [{review.rating}/5] {review.author} ({review.date}): {review.comment}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        products = handler.handle()
    except DomainException as exc:
        raise to_click_error(exc)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<36} {'Category':<18} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 80)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name[:36]:<36} {p.category[:18]:<18} {p.price:>10} {p.stock:>6}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show the full details of a product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise to_click_error(exc)

    _display_product(dto)


@click.command("add")
@token_option
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Short description.")
@click.option("--long-description", default="", help="Detailed description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--image-url", required=True, help="Main image URL.")
@click.option("--image", "images", multiple=True, help="Carousel image URL (repeatable).")
@click.option("--category", required=True, help="Category.")
@click.option("--spec", "specs", multiple=True, help="Specification as 'Key=Value' (repeatable).")
def product_add(
    token: str | None,
    name: str,
    description: str,
    long_description: str,
    price: str,
    stock: int,
    image_url: str,
    images: tuple[str, ...],
    category: str,
    specs: tuple[str, ...],
) -> None:
    """Add a new product to the catalog (admin only)."""
    identity = authenticate(token)
    handler = AddProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            identity,
            name=name,
            description=description,
            price=price,
            stock=stock,
            image_url=image_url,
            category=category,
            long_description=long_description,
            carousel_images=list(images),
            specifications=_parse_specs(specs),
        )
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price} ({dto.stock} in stock)")


@click.command("update")
@token_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New short description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.option("--category", default=None, help="New category.")
@click.option("--spec", "specs", multiple=True, help="Replace specifications ('Key=Value').")
def product_update(
    token: str | None,
    product_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    stock: int | None,
    category: str | None,
    specs: tuple[str, ...],
) -> None:
    """Update selected fields of a product (admin only)."""
    identity = authenticate(token)
    handler = UpdateProductHandler(product_repo=product_repository())

    changes: dict[str, object] = {
        key: value
        for key, value in (
            ("name", name),
            ("description", description),
            ("price", price),
            ("stock", stock),
            ("category", category),
        )
        if value is not None
    }
    if specs:
        changes["specifications"] = _parse_specs(specs)

    try:
        dto = handler.handle(identity, product_id, **changes)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Product #{dto.id} updated ({', '.join(sorted(changes))})")


@click.command("delete")
@token_option
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(token: str | None, product_id: str) -> None:
    """Remove a product from the catalog (admin only)."""
    identity = authenticate(token)
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(identity, product_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo("Product successfully removed.")


@click.command("review")
@token_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--rating", required=True, type=click.IntRange(1, 5), help="Rating 1-5.")
@click.option("--comment", default="", help="Review text.")
def product_review(token: str | None, product_id: str, rating: int, comment: str) -> None:
    """Leave a review on a product."""
    identity = authenticate(token)
    handler = AddReviewHandler(
        product_repo=product_repository(),
        user_repo=user_repository(),
    )

    try:
        dto = handler.handle(identity, product_id, rating, comment)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Thanks! '{dto.name}' is now rated {dto.rating:.1f} ({dto.num_reviews} reviews)")


@click.command("seed")
def product_seed() -> None:
    """Load the demo catalog into an empty data directory."""
    handler = SeedCatalogHandler(product_repo=product_repository())

    try:
        count = handler.handle(DEMO_PRODUCTS)
    except DomainException as exc:
        raise to_click_error(exc)

    if count:
        click.echo(f"Seeded {count} products.")
    else:
        click.echo("Catalog already has products; nothing seeded.")

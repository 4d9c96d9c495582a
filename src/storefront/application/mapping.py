"""Domain -> DTO mapping shared by the catalog, cart and checkout handlers."""

from __future__ import annotations

import dataclasses
import logging

from storefront.application.dto import CartDTO, CartLineDTO, ProductDTO, ReviewDTO
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        long_description=product.long_description,
        price=str(product.price),
        stock=product.stock,
        image_url=product.image_url,
        carousel_images=list(product.carousel_images),
        category=product.category,
        rating=product.rating,
        num_reviews=product.num_reviews,
        specifications=dict(product.specifications),
        reviews=[
            ReviewDTO(
                author=review.author,
                rating=review.rating,
                comment=review.comment,
                date=review.date.strftime("%Y-%m-%d"),
            )
            for review in product.reviews
        ],
    )


def lines_to_dto(pairs: list[tuple[CartLine, Product]]) -> CartDTO:
    """Build a CartDTO from lines already paired with their products."""
    lines: list[CartLineDTO] = []
    line_totals: list[Money] = []
    total_items = 0
    for line, product in pairs:
        line_total = product.price * line.quantity.value
        line_totals.append(line_total)
        total_items += line.quantity.value
        lines.append(
            CartLineDTO(
                product=product_to_dto(product),
                quantity=line.quantity.value,
                line_total=str(line_total),
            )
        )
    return CartDTO(lines=lines, total_items=total_items, subtotal=str(Money.total(line_totals)))


def cart_to_dto(cart: Cart, product_repo: ProductRepository) -> CartDTO:
    """Join every cart line with its current product.

    Lines whose product has been deleted from the catalog are priced out
    of the view and listed in ``unavailable_product_ids``. They stay in
    storage until the user removes them; checkout refuses until then.
    """
    pairs: list[tuple[CartLine, Product]] = []
    missing: list[str] = []
    for line in cart.lines:
        product = product_repo.get_by_id(line.product_id)
        if product is None:
            logger.warning(
                "Cart of user %s references missing product %s",
                cart.user_id,
                line.product_id,
            )
            missing.append(line.product_id)
            continue
        pairs.append((line, product))
    return dataclasses.replace(lines_to_dto(pairs), unavailable_product_ids=missing)

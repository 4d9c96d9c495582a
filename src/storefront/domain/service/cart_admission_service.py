"""Domain service: Cart Admission.

Coordinates the cross-aggregate rule between a Cart and the Products it
refers to: a line's quantity may not exceed the product's stock at the
moment the line is written.

Every operation is validate-then-mutate: all checks run against the
current state first, and the cart is only touched once they have passed,
so a rejected request never leaves a half-applied cart behind.

This is an admission check, not a reservation. Stock is read, never
decremented here.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CartAdmissionService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def add(self, cart: Cart, product_id: str, quantity: int) -> Product:
        """Additively admit *quantity* units of a product into the cart."""
        requested = Quantity(quantity)
        product = self._load_product(product_id)

        new_total = cart.quantity_of(product.id) + requested.value
        self._check_stock(product, new_total)

        cart.add(product.id, requested)
        return product

    def update(self, cart: Cart, product_id: str, new_quantity: int) -> None:
        """Set an existing line to exactly *new_quantity* (0 removes it)."""
        if not isinstance(new_quantity, int) or isinstance(new_quantity, bool):
            raise ValidationError("Quantity must be an integer")
        if new_quantity < 0:
            raise ValidationError("Quantity must be a non-negative number")

        if cart.line_for(product_id) is None:
            raise EntityNotFoundError(
                f"Product '{product_id}' not found in cart"
            )
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(
                f"Product '{product_id}' linked to cart item no longer exists"
            )

        if new_quantity > 0:
            self._check_stock(product, new_quantity)
        cart.set_quantity(product_id, new_quantity)

    def verify(self, cart: Cart) -> list[tuple[CartLine, Product]]:
        """Re-run the admission check for every line without mutating.

        Returns each line paired with its current product so callers can
        price the cart from the same snapshot that was checked.
        """
        checked: list[tuple[CartLine, Product]] = []
        for line in cart.lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product '{line.product_id}' in cart no longer exists. "
                    "Remove it from the cart before checking out."
                )
            self._check_stock(product, line.quantity.value)
            checked.append((line, product))
        return checked

    # --- Internal helpers -----------------------------------------------------

    def _load_product(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")
        return product

    @staticmethod
    def _check_stock(product: Product, requested_total: int) -> None:
        if not product.has_stock_for(requested_total):
            logger.warning(
                "Rejected %d x %s: only %d in stock",
                requested_total,
                product.id,
                product.stock,
            )
            raise InsufficientStockError(
                product_id=product.id,
                product_name=product.name,
                requested=requested_total,
                available=product.stock,
            )

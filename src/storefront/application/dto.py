"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money values are
pre-formatted strings, e.g. "$15.00".
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReviewDTO:
    author: str
    rating: int
    comment: str
    date: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog product as displayed to the user."""

    id: str
    name: str
    description: str
    long_description: str
    price: str
    stock: int
    image_url: str
    carousel_images: list[str]
    category: str
    rating: float
    num_reviews: int
    specifications: dict[str, str | int | float]
    reviews: list[ReviewDTO] = field(default_factory=list)


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a cart line with the product details joined in."""

    product: ProductDTO
    quantity: int
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart after a query or mutation."""

    lines: list[CartLineDTO]
    total_items: int
    subtotal: str
    # lines kept in storage whose product left the catalog; excluded from totals
    unavailable_product_ids: list[str] = field(default_factory=list)

    def quantity_of(self, product_id: str) -> int:
        for line in self.lines:
            if line.product.id == product_id:
                return line.quantity
        return 0


@dataclass(frozen=True)
class AuthResultDTO:
    """Output: a registered or logged-in user plus a fresh token."""

    user_id: str
    username: str
    email: str
    is_admin: bool
    token: str


@dataclass(frozen=True)
class ShippingAddress:
    """Input: where a checked-out cart should be delivered."""

    full_name: str
    address_line1: str
    city: str
    state: str
    zip_code: str
    country: str
    address_line2: str = ""


@dataclass(frozen=True)
class CheckoutSummaryDTO:
    """Output: the review-step summary of a placed checkout."""

    shipping_address: ShippingAddress
    payment_method: str
    lines: list[CartLineDTO]
    total_items: int
    subtotal: str
    shipping: str
    total: str
    placed_at: str

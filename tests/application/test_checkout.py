"""Integration tests for the Checkout use case."""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import ShippingAddress
from storefront.application.get_cart import GetCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from tests.fakes import (
    FakeCartRepository,
    FakeProductRepository,
    FakeUserRepository,
    make_product,
    make_user,
)

ADDRESS = ShippingAddress(
    full_name="Alice Smith",
    address_line1="1 Main St",
    city="Springfield",
    state="IL",
    zip_code="62701",
    country="USA",
)


def _setup():
    products = FakeProductRepository([
        make_product(id="p1", price="10.00", stock=5),
        make_product(id="p2", name="Gadget", price="2.50", stock=10),
    ])
    repos = dict(
        cart_repo=FakeCartRepository(),
        user_repo=FakeUserRepository([make_user(id="u1")]),
        product_repo=products,
    )
    return CheckoutHandler(**repos), AddToCartHandler(**repos), repos


class TestCheckout:

    def test_summary_and_cart_cleared(self):
        checkout, add, repos = _setup()
        add.handle("u1", "p1", 2)
        add.handle("u1", "p2", 4)

        summary = checkout.handle("u1", ADDRESS, "PayPal")

        assert summary.total_items == 6
        assert summary.subtotal == "$30.00"
        assert summary.shipping == "$0.00"
        assert summary.total == "$30.00"
        assert summary.payment_method == "PayPal"
        assert repos["cart_repo"].get_for_user("u1").is_empty

    def test_stock_not_decremented(self):
        checkout, add, repos = _setup()
        add.handle("u1", "p1", 5)
        checkout.handle("u1", ADDRESS, "Credit Card")
        assert repos["product_repo"].get_by_id("p1").stock == 5

    def test_empty_cart_rejected(self):
        checkout, _, _ = _setup()
        with pytest.raises(ValidationError, match="empty cart"):
            checkout.handle("u1", ADDRESS, "PayPal")

    def test_missing_address_field_rejected(self):
        checkout, add, _ = _setup()
        add.handle("u1", "p1", 1)
        address = ShippingAddress(
            full_name="Alice", address_line1="", city="X", state="Y",
            zip_code="1", country="Z",
        )
        with pytest.raises(ValidationError, match="address_line1"):
            checkout.handle("u1", address, "PayPal")

    def test_unknown_payment_method_rejected(self):
        checkout, add, _ = _setup()
        add.handle("u1", "p1", 1)
        with pytest.raises(ValidationError, match="Unsupported payment method"):
            checkout.handle("u1", ADDRESS, "Bitcoin")

    def test_stock_rechecked_at_checkout(self):
        checkout, add, repos = _setup()
        add.handle("u1", "p1", 4)
        product = repos["product_repo"].get_by_id("p1")
        product.update_details(stock=3)

        with pytest.raises(InsufficientStockError):
            checkout.handle("u1", ADDRESS, "PayPal")
        assert repos["cart_repo"].get_for_user("u1").quantity_of("p1") == 4

    def test_deleted_product_blocks_checkout_until_removed(self):
        checkout, add, repos = _setup()
        add.handle("u1", "p1", 1)
        add.handle("u1", "p2", 2)
        repos["product_repo"].delete("p1")

        view = GetCartHandler(**repos).handle("u1")
        assert [line.product.id for line in view.lines] == ["p2"]
        assert view.unavailable_product_ids == ["p1"]

        with pytest.raises(EntityNotFoundError, match="Remove it from the cart"):
            checkout.handle("u1", ADDRESS, "PayPal")
        assert repos["cart_repo"].get_for_user("u1").quantity_of("p1") == 1

        RemoveFromCartHandler(**repos).handle("u1", "p1")
        summary = checkout.handle("u1", ADDRESS, "PayPal")
        assert summary.total == "$5.00"

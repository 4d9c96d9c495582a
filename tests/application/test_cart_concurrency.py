"""Optimistic versioning and retry of cart mutations."""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.domain.exceptions import ConcurrencyError, InsufficientStockError
from storefront.domain.model.value_objects import Quantity
from tests.fakes import (
    FakeCartRepository,
    FakeProductRepository,
    FakeUserRepository,
    RacingCartRepository,
    make_product,
    make_user,
)


def _handler(carts, max_retries: int = 3, stock: int = 10) -> AddToCartHandler:
    return AddToCartHandler(
        cart_repo=carts,
        user_repo=FakeUserRepository([make_user(id="u1")]),
        product_repo=FakeProductRepository([
            make_product(id="p1", stock=stock),
            make_product(id="p2", name="Gadget", stock=50),
        ]),
        max_retries=max_retries,
    )


class TestVersionCheck:

    def test_save_bumps_version(self):
        carts = FakeCartRepository()
        cart = carts.get_for_user("u1")
        cart.add("p1", Quantity(1))
        carts.save(cart)
        assert cart.version == 1
        assert carts.get_for_user("u1").version == 1

    def test_stale_save_rejected(self):
        carts = FakeCartRepository()
        first = carts.get_for_user("u1")
        second = carts.get_for_user("u1")
        first.add("p1", Quantity(1))
        carts.save(first)
        second.add("p1", Quantity(2))
        with pytest.raises(ConcurrencyError):
            carts.save(second)
        assert carts.get_for_user("u1").quantity_of("p1") == 1


class TestRetry:

    def test_transient_conflict_is_retried(self):
        carts = RacingCartRepository(conflicts=2)
        dto = _handler(carts).handle("u1", "p1", 2)
        assert dto.quantity_of("p1") == 2

    def test_retry_keeps_the_competing_write(self):
        carts = RacingCartRepository(
            conflicts=1,
            rival_change=lambda cart: cart.add("p2", Quantity(3)),
        )
        dto = _handler(carts).handle("u1", "p1", 2)

        assert dto.quantity_of("p1") == 2
        assert dto.quantity_of("p2") == 3
        stored = carts.get_for_user("u1")
        assert stored.quantity_of("p1") == 2
        assert stored.quantity_of("p2") == 3

    def test_retry_adds_onto_the_competing_line(self):
        carts = RacingCartRepository(
            conflicts=1,
            rival_change=lambda cart: cart.add("p1", Quantity(3)),
        )
        dto = _handler(carts).handle("u1", "p1", 2)
        assert dto.quantity_of("p1") == 5
        assert carts.get_for_user("u1").quantity_of("p1") == 5

    def test_retry_rechecks_stock_against_the_competing_write(self):
        # p1 has 5 in stock; we hold 1, the other request takes the line to 4
        carts = RacingCartRepository(
            conflicts=0,
            rival_change=lambda cart: cart.add("p1", Quantity(3)),
        )
        handler = _handler(carts, stock=5)
        handler.handle("u1", "p1", 1)
        carts._conflicts = 1

        with pytest.raises(InsufficientStockError, match="Only 5 available"):
            handler.handle("u1", "p1", 2)

        stored = carts.get_for_user("u1")
        assert stored.quantity_of("p1") == 4
        assert stored.version == 2

    def test_persistent_conflict_propagates(self):
        carts = RacingCartRepository(conflicts=5)
        with pytest.raises(ConcurrencyError):
            _handler(carts, max_retries=3).handle("u1", "p1", 1)

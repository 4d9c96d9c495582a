"""Unit tests for the Cart aggregate."""

import pytest

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Quantity


class TestCartAdd:

    def test_add_to_empty_cart_creates_line(self):
        cart = Cart.empty("u1")
        cart.add("p1", Quantity(3))
        assert cart.quantity_of("p1") == 3
        assert len(cart.lines) == 1

    def test_add_same_product_accumulates(self):
        cart = Cart.empty("u1")
        cart.add("p1", Quantity(2))
        cart.add("p1", Quantity(3))
        assert cart.quantity_of("p1") == 5
        assert len(cart.lines) == 1

    def test_lines_keep_insertion_order(self):
        cart = Cart.empty("u1")
        cart.add("p2", Quantity(1))
        cart.add("p1", Quantity(1))
        cart.add("p2", Quantity(1))
        assert [line.product_id for line in cart.lines] == ["p2", "p1"]


class TestCartSetQuantity:

    def test_absolute_set(self):
        cart = Cart.empty("u1")
        cart.add("p1", Quantity(2))
        cart.set_quantity("p1", 7)
        assert cart.quantity_of("p1") == 7

    def test_zero_removes_line(self):
        cart = Cart.empty("u1")
        cart.add("p1", Quantity(2))
        cart.set_quantity("p1", 0)
        assert cart.line_for("p1") is None
        assert cart.is_empty

    def test_missing_line_rejected(self):
        cart = Cart.empty("u1")
        with pytest.raises(EntityNotFoundError, match="not found in cart"):
            cart.set_quantity("p1", 1)


class TestCartRemoveAndClear:

    def test_remove_present_line(self):
        cart = Cart.empty("u1")
        cart.add("p1", Quantity(1))
        assert cart.remove("p1") is True
        assert cart.is_empty

    def test_remove_absent_line_is_noop(self):
        cart = Cart.empty("u1")
        cart.add("p1", Quantity(1))
        assert cart.remove("p2") is False
        assert cart.quantity_of("p1") == 1

    def test_clear(self):
        cart = Cart.empty("u1")
        cart.add("p1", Quantity(1))
        cart.add("p2", Quantity(4))
        cart.clear()
        assert cart.is_empty
        assert cart.total_items == 0

    def test_total_items(self):
        cart = Cart.empty("u1")
        cart.add("p1", Quantity(2))
        cart.add("p2", Quantity(4))
        assert cart.total_items == 6

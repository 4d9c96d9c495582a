"""Unit tests for the Product aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, Review
from storefront.domain.model.value_objects import Money
from tests.fakes import make_product


class TestProductCreate:

    def test_valid_product(self):
        product = make_product(stock=0)
        assert product.stock == 0
        assert product.rating == 0.0

    def test_name_is_trimmed(self):
        product = Product.create(
            id="1", name="  Lamp  ", description="A lamp", price=Money.of("5"),
            stock=1, image_url="x.png", category="Home",
        )
        assert product.name == "Lamp"

    def test_short_name_rejected(self):
        with pytest.raises(ValidationError, match="at least 3"):
            make_product(name="ab")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            make_product(stock=-1)

    def test_free_product_allowed(self):
        assert make_product(price="0").price == Money.zero()

    def test_missing_category_rejected(self):
        with pytest.raises(ValidationError, match="category is required"):
            Product.create(
                id="1", name="Lamp", description="A lamp", price=Money.of("5"),
                stock=1, image_url="x.png", category=" ",
            )

    def test_specifications_accept_strings_and_numbers(self):
        product = Product.create(
            id="1", name="Lamp", description="A lamp", price=Money.of("5"),
            stock=1, image_url="x.png", category="Home",
            specifications={"Color": "Red", "Watts": 40, "Weight": 1.5},
        )
        assert product.specifications["Watts"] == 40

    def test_specifications_reject_nested_values(self):
        with pytest.raises(ValidationError, match="Specification"):
            Product.create(
                id="1", name="Lamp", description="A lamp", price=Money.of("5"),
                stock=1, image_url="x.png", category="Home",
                specifications={"Dims": {"w": 1}},
            )


class TestProductUpdate:

    def test_partial_update(self):
        product = make_product(stock=5)
        product.update_details(stock=9, name="Better Widget")
        assert product.stock == 9
        assert product.name == "Better Widget"
        assert product.description == "A widget"

    def test_invalid_update_rolls_back(self):
        product = make_product(stock=5)
        with pytest.raises(ValidationError):
            product.update_details(stock=-2, name="Renamed")
        assert product.stock == 5
        assert product.name == "Widget"

    def test_unknown_field_rejected(self):
        product = make_product()
        with pytest.raises(ValidationError, match="Unknown product field"):
            product.update_details(colour="red")


class TestProductReviews:

    def test_first_review_sets_rating(self):
        product = make_product()
        product.add_review(Review(author="bob", rating=4, comment="Nice"))
        assert product.rating == 4.0
        assert product.num_reviews == 1
        assert len(product.reviews) == 1

    def test_review_folds_into_running_average(self):
        product = make_product()
        product.rating = 4.5
        product.num_reviews = 2
        product.add_review(Review(author="bob", rating=3))
        assert product.rating == 4.0
        assert product.num_reviews == 3

    def test_rating_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="between 1 and 5"):
            Review(author="bob", rating=6)

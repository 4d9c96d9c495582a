"""Unit tests for Money and Quantity."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class TestMoney:

    def test_parses_price_strings(self):
        price = Money.of("79.99")
        assert price.amount == Decimal("79.99")
        assert price.currency == "USD"

    def test_float_input_goes_through_str(self):
        assert Money.of(34.5) == Money.of("34.50")

    def test_rounds_to_the_cent(self):
        assert Money.of("9.999") == Money.of("10")
        assert Money.of("0.005").amount == Decimal("0.01")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-0.01")

    @pytest.mark.parametrize("raw", ["twelve", "", "Infinity"])
    def test_unparseable_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(raw)

    def test_line_total(self):
        assert Money.of("189.99") * 2 == Money.of("379.98")

    def test_multiplying_by_bool_refused(self):
        with pytest.raises(TypeError):
            Money.of("1") * True

    def test_total_of_nothing_is_zero(self):
        assert Money.total([]) == Money.zero()

    def test_total(self):
        prices = [Money.of("0.10"), Money.of("0.20"), Money.of("29.99")]
        assert Money.total(prices) == Money.of("30.29")

    def test_currencies_do_not_mix(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_display(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.zero()) == "$0.00"


class TestQuantity:

    def test_holds_value(self):
        assert str(Quantity(5)) == "5"

    @pytest.mark.parametrize("value", [0, -3])
    def test_below_one_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(value)

    @pytest.mark.parametrize("value", [2.5, "2", True])
    def test_non_integers_rejected(self, value):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(value)

    def test_sum(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)

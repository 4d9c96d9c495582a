"""Prices and quantities.

Both are frozen dataclasses that refuse to exist in an invalid state, so
a cart line or a product price never has to be re-checked downstream.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

CENT = Decimal("0.01")
DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class Money:
    """A price or a sum of prices, held to the cent.

    Amounts are rounded half-up to two places on construction, so
    ``Money.of("9.999")`` is $10.00 and line totals add up exactly.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Invalid money amount: {self.amount}")
        if self.amount < 0:
            raise ValidationError(f"Price cannot be negative, got {self.amount}")
        object.__setattr__(self, "amount", self.amount.quantize(CENT, rounding=ROUND_HALF_UP))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Parse user or document input. Floats go through ``str`` first."""
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(value)

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal(0), currency)

    @staticmethod
    def total(prices: Iterable[Money], currency: str = DEFAULT_CURRENCY) -> Money:
        result = Money.zero(currency)
        for price in prices:
            result = result + price
        return result

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, units: int) -> Money:
        if not isinstance(units, int) or isinstance(units, bool):
            raise TypeError(f"A price can only be multiplied by a unit count, got {units!r}")
        return Money(self.amount * units, self.currency)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"


@dataclass(frozen=True)
class Quantity:
    """Units of one product on a cart line. Always at least one."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a quantity
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {self.value!r}"
            )
        if self.value < 1:
            raise ValidationError(f"Quantity must be positive, got {self.value}")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)

"""Cart aggregate — one per user, keyed by user id.

The cart itself knows nothing about stock. Admission against a product's
stock is the job of ``CartAdmissionService``, which validates first and only
then calls the mutating methods here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import Quantity


@dataclass
class CartLine:
    """One (product, quantity) pairing. Quantity is always positive."""

    product_id: str
    quantity: Quantity


@dataclass
class Cart:
    """Aggregate root for a user's shopping cart.

    Invariants:
    - at most one line per ``product_id``
    - every line has a positive quantity (zero means the line is gone)

    ``version`` is the optimistic concurrency stamp: it is the version the
    cart was loaded at, and the repository refuses to save over a newer one.
    """

    user_id: str
    lines: list[CartLine] = field(default_factory=list)
    version: int = 0

    @staticmethod
    def empty(user_id: str) -> Cart:
        return Cart(user_id=user_id)

    # --- Queries --------------------------------------------------------------

    def line_for(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def quantity_of(self, product_id: str) -> int:
        line = self.line_for(product_id)
        return line.quantity.value if line else 0

    @property
    def total_items(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    # --- Mutations ------------------------------------------------------------

    def add(self, product_id: str, quantity: Quantity) -> None:
        """Additive upsert: increment an existing line or append a new one."""
        line = self.line_for(product_id)
        if line is None:
            self.lines.append(CartLine(product_id=product_id, quantity=quantity))
        else:
            line.quantity = line.quantity + quantity

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Absolute set on an existing line. Zero removes the line."""
        line = self.line_for(product_id)
        if line is None:
            raise EntityNotFoundError(
                f"Product '{product_id}' not found in cart"
            )
        if quantity == 0:
            self.remove(product_id)
        else:
            line.quantity = Quantity(quantity)

    def remove(self, product_id: str) -> bool:
        """Drop the line for *product_id*. Returns False if it was not there."""
        before = len(self.lines)
        self.lines = [line for line in self.lines if line.product_id != product_id]
        return len(self.lines) != before

    def clear(self) -> None:
        self.lines = []

"""Abstract repository for Cart aggregate.

Implementations must honour the optimistic version check in ``save``: a
cart may only be written over the version it was loaded at.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_for_user(self, user_id: str) -> Cart:
        """Return the user's cart, or an empty cart at version 0."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart if the stored version equals ``cart.version``.

        On success ``cart.version`` is incremented to the new stored
        version. Raises ConcurrencyError if another write got there first.
        """

"""Application service: Clear Cart use case."""

from __future__ import annotations

import logging

from storefront.application.cart_mutation import CartMutationHandler
from storefront.domain.model.cart import Cart

logger = logging.getLogger(__name__)

CART_CLEARED_MESSAGE = "Cart cleared successfully!"


class ClearCartHandler(CartMutationHandler):

    def handle(self, user_id: str) -> str:
        def mutation(cart: Cart) -> bool:
            if cart.is_empty:
                return False
            cart.clear()
            return True

        self._mutate(user_id, mutation)
        logger.info("User %s cleared their cart", user_id)
        return CART_CLEARED_MESSAGE

"""Application service: Remove From Cart use case.

Idempotent: removing a product that is not in the cart succeeds and
performs no write.
"""

from __future__ import annotations

import logging

from storefront.application.cart_mutation import CartMutationHandler
from storefront.application.dto import CartDTO
from storefront.domain.model.cart import Cart

logger = logging.getLogger(__name__)


class RemoveFromCartHandler(CartMutationHandler):

    def handle(self, user_id: str, product_id: str) -> CartDTO:
        def mutation(cart: Cart) -> bool:
            return cart.remove(product_id)

        cart = self._mutate(user_id, mutation)
        logger.info("User %s removed %s from cart", user_id, product_id)
        return self._view(cart)

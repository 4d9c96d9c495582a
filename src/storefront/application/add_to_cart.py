"""Application service: Add To Cart use case.

Additive: adding a product that is already in the cart increases the
existing line rather than replacing it.
"""

from __future__ import annotations

import logging

from storefront.application.cart_mutation import CartMutationHandler
from storefront.application.dto import CartDTO
from storefront.domain.model.cart import Cart
from storefront.domain.service.cart_admission_service import CartAdmissionService

logger = logging.getLogger(__name__)


class AddToCartHandler(CartMutationHandler):

    def handle(self, user_id: str, product_id: str, quantity: int) -> CartDTO:
        """Add *quantity* units of a product to the user's cart.

        Raises ValidationError for a non-positive quantity,
        EntityNotFoundError for an unknown user or product, and
        InsufficientStockError if the resulting line would exceed stock.
        """
        admission = CartAdmissionService(self._product_repo)

        def mutation(cart: Cart) -> bool:
            admission.add(cart, product_id, quantity)
            return True

        cart = self._mutate(user_id, mutation)
        logger.info(
            "User %s added %s x %s (line now %d)",
            user_id,
            quantity,
            product_id,
            cart.quantity_of(product_id),
        )
        return self._view(cart)

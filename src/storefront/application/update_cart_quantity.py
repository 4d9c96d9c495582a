"""Application service: Update Cart Quantity use case.

Absolute: the line is set to exactly the requested quantity, and a
quantity of zero removes the line.
"""

from __future__ import annotations

import logging

from storefront.application.cart_mutation import CartMutationHandler
from storefront.application.dto import CartDTO
from storefront.domain.model.cart import Cart
from storefront.domain.service.cart_admission_service import CartAdmissionService

logger = logging.getLogger(__name__)


class UpdateCartQuantityHandler(CartMutationHandler):

    def handle(self, user_id: str, product_id: str, new_quantity: int) -> CartDTO:
        admission = CartAdmissionService(self._product_repo)

        def mutation(cart: Cart) -> bool:
            admission.update(cart, product_id, new_quantity)
            return True

        cart = self._mutate(user_id, mutation)
        logger.info("User %s set %s to %d", user_id, product_id, new_quantity)
        return self._view(cart)

"""Shared read-check-write cycle for every cart mutation use case.

Each attempt reloads the cart, applies the mutation to the fresh copy and
saves it under the optimistic version check. A lost race is retried from
scratch (including the stock check) up to ``max_retries`` times.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from storefront.application.dto import CartDTO
from storefront.application.mapping import cart_to_dto
from storefront.domain.exceptions import ConcurrencyError, EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 3

# Applies a change to the cart; returns False when nothing changed.
CartMutation = Callable[[Cart], bool]


class CartMutationHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> None:
        self._cart_repo = cart_repo
        self._user_repo = user_repo
        self._product_repo = product_repo
        self._max_retries = max(1, max_retries)

    def _require_user(self, user_id: str) -> None:
        if self._user_repo.get_by_id(user_id) is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")

    def _mutate(self, user_id: str, mutation: CartMutation) -> Cart:
        self._require_user(user_id)

        for attempt in range(1, self._max_retries + 1):
            cart = self._cart_repo.get_for_user(user_id)
            if not mutation(cart):
                return cart
            try:
                self._cart_repo.save(cart)
            except ConcurrencyError:
                if attempt == self._max_retries:
                    raise
                logger.warning(
                    "Cart of user %s changed concurrently, retrying (%d/%d)",
                    user_id,
                    attempt,
                    self._max_retries,
                )
                continue
            return cart

        # unreachable: the loop either returns or re-raises
        raise ConcurrencyError(f"Cart of user {user_id} could not be saved")

    def _view(self, cart: Cart) -> CartDTO:
        return cart_to_dto(cart, self._product_repo)

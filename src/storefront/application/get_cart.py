"""Application service: Get Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.mapping import cart_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class GetCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(self, user_id: str) -> CartDTO:
        if self._user_repo.get_by_id(user_id) is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")

        cart = self._cart_repo.get_for_user(user_id)
        return cart_to_dto(cart, self._product_repo)

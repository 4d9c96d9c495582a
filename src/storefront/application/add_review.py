"""Application service: Add Review use case."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.mapping import product_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Review
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.identity import Identity


class AddReviewHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ) -> None:
        self._product_repo = product_repo
        self._user_repo = user_repo

    def handle(
        self, identity: Identity, product_id: str, rating: int, comment: str = ""
    ) -> ProductDTO:
        """Append a review authored by the calling user."""
        user = self._user_repo.get_by_id(identity.user_id)
        if user is None:
            raise EntityNotFoundError(f"User '{identity.user_id}' not found")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")

        product.add_review(
            Review(author=user.username, rating=rating, comment=(comment or "").strip())
        )
        self._product_repo.save(product)
        return product_to_dto(product)

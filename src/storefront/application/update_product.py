"""Application service: Update Product use case (admin only).

Partial update: only the fields supplied are changed. Changing ``stock``
here is the only way stock ever moves; carts already holding more than
the new stock are not re-validated until checkout.
"""

from __future__ import annotations

import logging

from storefront.application.authenticate import require_admin
from storefront.application.dto import ProductDTO
from storefront.application.mapping import product_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.identity import Identity

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, identity: Identity, product_id: str, **changes: object) -> ProductDTO:
        require_admin(identity)
        if not changes:
            raise ValidationError("No product fields to update")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")

        if "price" in changes and not isinstance(changes["price"], Money):
            changes["price"] = Money.of(changes["price"])  # type: ignore[arg-type]

        product.update_details(**changes)
        self._product_repo.save(product)
        logger.info("Product %s updated (%s)", product_id, ", ".join(sorted(changes)))
        return product_to_dto(product)

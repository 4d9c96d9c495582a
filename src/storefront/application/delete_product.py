"""Application service: Delete Product use case (admin only)."""

from __future__ import annotations

import logging

from storefront.application.authenticate import require_admin
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.identity import Identity

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, identity: Identity, product_id: str) -> None:
        require_admin(identity)
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError(f"Product not found: '{product_id}'")
        logger.info("Product %s deleted by %s", product_id, identity.user_id)

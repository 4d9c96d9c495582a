"""Application service: Add Product use case (admin only)."""

from __future__ import annotations

import logging

from storefront.application.authenticate import require_admin
from storefront.application.dto import ProductDTO
from storefront.application.mapping import product_to_dto
from storefront.domain.model.product import Product, SpecValue
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.identity import Identity

logger = logging.getLogger(__name__)


def next_product_id(product_repo: ProductRepository) -> str:
    """Auto-assign the next integer ID based on existing products."""
    numeric = [int(p.id) for p in product_repo.list_all() if p.id.isdigit()]
    return str(max(numeric) + 1) if numeric else "1"


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        identity: Identity,
        name: str,
        description: str,
        price: str,
        stock: int,
        image_url: str,
        category: str,
        long_description: str = "",
        carousel_images: list[str] | None = None,
        specifications: dict[str, SpecValue] | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        require_admin(identity)

        product = Product.create(
            id=next_product_id(self._product_repo),
            name=name,
            description=description,
            price=Money.of(price),
            stock=stock,
            image_url=image_url,
            category=category,
            long_description=long_description,
            carousel_images=carousel_images,
            specifications=specifications,
        )
        self._product_repo.save(product)
        logger.info("Product %s '%s' added by %s", product.id, product.name, identity.user_id)
        return product_to_dto(product)

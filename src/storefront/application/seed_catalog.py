"""Application service: Seed Catalog use case.

Loads demo products into an empty catalog. A catalog that already holds
products is left alone.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from storefront.domain.model.product import Product, Review
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class SeedCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, seed: Iterable[Mapping]) -> int:
        """Insert *seed* records; return how many products were created."""
        if self._product_repo.list_all():
            logger.info("Catalog already populated, skipping seed")
            return 0

        count = 0
        for index, record in enumerate(seed, start=1):
            product = Product.create(
                id=str(index),
                name=record["name"],
                description=record["description"],
                long_description=record.get("long_description", ""),
                price=Money.of(record["price"]),
                stock=record["stock"],
                image_url=record["image_url"],
                carousel_images=record.get("carousel_images"),
                category=record["category"],
                rating=record.get("rating", 0.0),
                num_reviews=record.get("num_reviews", 0),
                specifications=record.get("specifications"),
            )
            product.reviews = [
                Review(author=r["author"], rating=r["rating"], comment=r.get("comment", ""))
                for r in record.get("reviews", [])
            ]
            self._product_repo.save(product)
            count += 1

        logger.info("Seeded catalog with %d products", count)
        return count

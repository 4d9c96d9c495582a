"""Catalog storage port.

Products are looked up by id only; listing returns the whole catalog in
storage order, which is the order `product list` prints.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product. Returns False if it did not exist."""

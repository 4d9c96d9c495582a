"""Application service: List / Show Products use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.mapping import product_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.list_all()]


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")
        return product_to_dto(product)

"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product, Review
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_document_file import JsonDocumentFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, product: Product) -> None:
        with self._file.lock:
            records = self._file.load()
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    records[i] = self._to_raw(product)
                    break
            else:
                records.append(self._to_raw(product))
            self._file.persist(records)

    def delete(self, product_id: str) -> bool:
        with self._file.lock:
            records = self._file.load()
            remaining = [raw for raw in records if raw["id"] != product_id]
            if len(remaining) == len(records):
                return False
            self._file.persist(remaining)
            return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "long_description": product.long_description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
            "image_url": product.image_url,
            "carousel_images": list(product.carousel_images),
            "category": product.category,
            "rating": product.rating,
            "num_reviews": product.num_reviews,
            "specifications": dict(product.specifications),
            "reviews": [
                {
                    "author": r.author,
                    "rating": r.rating,
                    "comment": r.comment,
                    "date": r.date.isoformat(),
                }
                for r in product.reviews
            ],
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw["description"],
            long_description=raw.get("long_description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            stock=raw["stock"],
            image_url=raw["image_url"],
            carousel_images=list(raw.get("carousel_images", [])),
            category=raw["category"],
            rating=raw.get("rating", 0.0),
            num_reviews=raw.get("num_reviews", 0),
            specifications=dict(raw.get("specifications", {})),
            reviews=[
                Review(
                    author=r["author"],
                    rating=r["rating"],
                    comment=r.get("comment", ""),
                    date=datetime.fromisoformat(r["date"]),
                )
                for r in raw.get("reviews", [])
            ],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

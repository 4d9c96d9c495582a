"""JSON-file-backed implementation of CartRepository.

One document per user: ``{"user_id", "version", "lines": [...]}``. The
version compare and the write happen under the file lock, so two writers
in this process can never both succeed from the same starting version.
"""

from __future__ import annotations

import logging
from pathlib import Path

from storefront.domain.exceptions import ConcurrencyError, StorageError, ValidationError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_document_file import JsonDocumentFile

logger = logging.getLogger(__name__)


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path)

    # --- CartRepository interface ---------------------------------------------

    def get_for_user(self, user_id: str) -> Cart:
        for raw in self._file.load():
            if self._owner(raw) == user_id:
                return self._to_domain(raw)
        return Cart.empty(user_id)

    def save(self, cart: Cart) -> None:
        with self._file.lock:
            records = self._file.load()
            index = next(
                (i for i, raw in enumerate(records) if self._owner(raw) == cart.user_id),
                None,
            )
            stored_version = self._to_domain(records[index]).version if index is not None else 0
            if stored_version != cart.version:
                raise ConcurrencyError(
                    f"Cart of user {cart.user_id} is at version {stored_version}, "
                    f"write was based on version {cart.version}"
                )

            raw = self._to_raw(cart, cart.version + 1)
            if index is None:
                records.append(raw)
            else:
                records[index] = raw
            self._file.persist(records)
            cart.version += 1
        logger.debug("Saved cart of user %s at version %d", cart.user_id, cart.version)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart, version: int) -> dict:
        return {
            "user_id": cart.user_id,
            "version": version,
            "lines": [
                {"product_id": line.product_id, "quantity": line.quantity.value}
                for line in cart.lines
            ],
        }

    @staticmethod
    def _owner(raw: dict) -> str:
        try:
            return raw["user_id"]
        except (KeyError, TypeError) as exc:
            raise StorageError("Malformed cart document: missing user_id", exc) from exc

    @classmethod
    def _to_domain(cls, raw: dict) -> Cart:
        user_id = cls._owner(raw)
        try:
            return Cart(
                user_id=user_id,
                lines=[
                    CartLine(product_id=line["product_id"], quantity=Quantity(line["quantity"]))
                    for line in raw.get("lines", [])
                ],
                version=int(raw.get("version", 0)),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise StorageError(f"Malformed cart document for user {user_id}", exc) from exc

"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_document_file import JsonDocumentFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path)

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: str) -> User | None:
        return self._find(lambda raw: raw["id"] == user_id)

    def get_by_email(self, email: str) -> User | None:
        email = email.lower()
        return self._find(lambda raw: raw["email"].lower() == email)

    def get_by_username(self, username: str) -> User | None:
        return self._find(lambda raw: raw["username"] == username)

    def save(self, user: User) -> None:
        with self._file.lock:
            records = self._file.load()
            for i, raw in enumerate(records):
                if raw["id"] == user.id:
                    records[i] = self._to_raw(user)
                    break
            else:
                records.append(self._to_raw(user))
            self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    def _find(self, predicate) -> User | None:
        for raw in self._file.load():
            if predicate(raw):
                return self._to_domain(raw)
        return None

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "password_hash": user.password_hash,
            "is_admin": user.is_admin,
            "member_since": user.member_since.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            username=raw["username"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            is_admin=raw.get("is_admin", False),
            member_since=datetime.fromisoformat(raw["member_since"]),
        )

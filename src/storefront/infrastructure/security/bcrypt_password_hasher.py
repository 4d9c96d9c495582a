"""bcrypt implementation of PasswordHasher."""

from __future__ import annotations

import bcrypt

from storefront.domain.exceptions import ValidationError
from storefront.domain.service.identity import PasswordHasher

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):

    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError:
            # stored value is not a bcrypt hash
            return False

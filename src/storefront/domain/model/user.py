"""User aggregate.

The user owns credentials and the admin flag. The cart is kept as its own
aggregate keyed by ``user.id`` so cart writes never rewrite credentials.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6
EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")


@dataclass
class User:

    id: str
    username: str
    email: str
    password_hash: str
    is_admin: bool = False
    member_since: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        id: str,
        username: str,
        email: str,
        password_hash: str,
        is_admin: bool = False,
    ) -> User:
        """Create a new user. The password must already be hashed."""
        username = (username or "").strip()
        email = (email or "").strip().lower()

        if len(username) < MIN_USERNAME_LENGTH:
            raise ValidationError(
                f"Username must be at least {MIN_USERNAME_LENGTH} characters"
            )
        if not EMAIL_PATTERN.match(email):
            raise ValidationError(f"Invalid email address: {email!r}")
        if not password_hash:
            raise ValidationError("Password hash is required")

        return User(
            id=id,
            username=username,
            email=email,
            password_hash=password_hash,
            is_admin=is_admin,
        )

    @staticmethod
    def validate_raw_password(password: str) -> None:
        """Check a plaintext password before it is hashed."""
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

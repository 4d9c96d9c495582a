"""Identity ports.

The domain trusts whatever identity these ports assert. Concrete token and
password-hashing schemes live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.domain.model.user import User


@dataclass(frozen=True)
class Identity:
    """A verified assertion of who the caller is."""

    user_id: str
    is_admin: bool = False


class IdentityProvider(ABC):

    @abstractmethod
    def issue(self, user: User) -> str:
        """Return a signed token asserting *user*'s identity."""

    @abstractmethod
    def verify(self, token: str) -> Identity:
        """Return the identity in *token*.

        Raises AuthenticationError if the token is malformed, tampered
        with or expired.
        """


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of *password*."""

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if *password* matches *password_hash*."""

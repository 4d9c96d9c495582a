"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from datetime import timedelta

from storefront.infrastructure.config.settings import settings
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from storefront.infrastructure.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from storefront.infrastructure.security.jwt_identity_provider import (
    JwtIdentityProvider,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings.DATA_DIR / "products.json")


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(settings.DATA_DIR / "users.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings.DATA_DIR / "carts.json")


def identity_provider() -> JwtIdentityProvider:
    return JwtIdentityProvider(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_in=timedelta(minutes=settings.JWT_EXPIRES_MINUTES),
    )


def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=settings.BCRYPT_ROUNDS)


def cart_max_retries() -> int:
    return settings.CART_MAX_RETRIES

"""JWT implementation of IdentityProvider (PyJWT, HMAC-signed)."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import jwt

from storefront.domain.exceptions import AuthenticationError
from storefront.domain.model.user import User
from storefront.domain.service.identity import Identity, IdentityProvider

logger = logging.getLogger(__name__)


class JwtIdentityProvider(IdentityProvider):
    """Issues tokens with payload ``{"id", "isAdmin", "iat", "exp"}``."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(hours=1),
    ) -> None:
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "id": user.id,
            "isAdmin": user.is_admin,
            "iat": now,
            "exp": now + self._expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Not authorized, token expired") from exc
        except jwt.InvalidTokenError as exc:
            logger.warning("Token verification failed: %s", exc)
            raise AuthenticationError("Not authorized, token failed") from exc

        user_id = payload.get("id")
        if not isinstance(user_id, str) or not user_id:
            raise AuthenticationError("Not authorized, token has no user id")
        return Identity(user_id=user_id, is_admin=bool(payload.get("isAdmin", False)))

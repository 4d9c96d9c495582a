"""Application service: Authenticate a caller from a bearer token.

Every cart, checkout and catalog-management use case runs only after
this has turned the caller's token into an Identity.
"""

from __future__ import annotations

from storefront.domain.exceptions import AuthenticationError, AuthorizationError
from storefront.domain.service.identity import Identity, IdentityProvider


class AuthenticateHandler:

    def __init__(self, identity_provider: IdentityProvider) -> None:
        self._identity_provider = identity_provider

    def handle(self, token: str | None) -> Identity:
        if not token or not token.strip():
            raise AuthenticationError("Not authorized, no token provided")
        token = token.strip()
        if token.lower().startswith("bearer "):
            token = token[len("bearer "):].strip()
        return self._identity_provider.verify(token)


def require_admin(identity: Identity) -> None:
    if not identity.is_admin:
        raise AuthorizationError("Not authorized: Admin access required")

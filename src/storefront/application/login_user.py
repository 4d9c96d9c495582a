"""Application service: Login User use case."""

from __future__ import annotations

import logging

from storefront.application.dto import AuthResultDTO
from storefront.domain.exceptions import AuthenticationError
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.identity import IdentityProvider, PasswordHasher

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password.
INVALID_CREDENTIALS = "Invalid email or password. Please check your credentials."


class LoginUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        identity_provider: IdentityProvider,
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher
        self._identity_provider = identity_provider

    def handle(self, email: str, password: str) -> AuthResultDTO:
        user = self._user_repo.get_by_email((email or "").strip().lower())
        if user is None or not self._password_hasher.verify(
            password or "", user.password_hash
        ):
            logger.warning("Failed login attempt for %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("User %s logged in", user.id)
        return AuthResultDTO(
            user_id=user.id,
            username=user.username,
            email=user.email,
            is_admin=user.is_admin,
            token=self._identity_provider.issue(user),
        )

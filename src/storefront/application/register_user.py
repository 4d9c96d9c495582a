"""Application service: Register User use case."""

from __future__ import annotations

import logging
import uuid

from storefront.application.dto import AuthResultDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.identity import IdentityProvider, PasswordHasher

logger = logging.getLogger(__name__)


class RegisterUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        identity_provider: IdentityProvider,
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher
        self._identity_provider = identity_provider

    def handle(self, username: str, email: str, password: str) -> AuthResultDTO:
        """Create an account and return it together with a fresh token."""
        if not username or not email or not password:
            raise ValidationError(
                "Please enter all required fields: username, email, and password."
            )
        User.validate_raw_password(password)

        if (
            self._user_repo.get_by_email(email.strip().lower()) is not None
            or self._user_repo.get_by_username(username.strip()) is not None
        ):
            raise ValidationError(
                "User with that email or username already exists."
            )

        user = User.create(
            id=uuid.uuid4().hex,
            username=username,
            email=email,
            password_hash=self._password_hasher.hash(password),
        )
        self._user_repo.save(user)
        logger.info("Registered user %s (%s)", user.username, user.id)

        return AuthResultDTO(
            user_id=user.id,
            username=user.username,
            email=user.email,
            is_admin=user.is_admin,
            token=self._identity_provider.issue(user),
        )

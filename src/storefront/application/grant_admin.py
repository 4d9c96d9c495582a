"""Application service: Grant Admin use case.

Operator-only: run against the data directory directly, there is no token
involved. It is how the first administrator comes to exist.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class GrantAdminHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, email: str) -> None:
        user = self._user_repo.get_by_email(email.strip().lower())
        if user is None:
            raise EntityNotFoundError(f"No user with email '{email}'")
        if user.is_admin:
            return
        user.is_admin = True
        self._user_repo.save(user)
        logger.info("Granted admin rights to %s", user.id)

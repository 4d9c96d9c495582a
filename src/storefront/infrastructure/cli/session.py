"""Helpers shared by the CLI commands: token handling and error display."""

from __future__ import annotations

import logging

import click

from storefront.application.authenticate import AuthenticateHandler
from storefront.domain.exceptions import DomainException, StorageError
from storefront.domain.service.identity import Identity
from storefront.infrastructure.bootstrap import identity_provider

logger = logging.getLogger(__name__)

token_option = click.option(
    "--token",
    envvar="STOREFRONT_TOKEN",
    default=None,
    help="Bearer token from 'auth login' (or set STOREFRONT_TOKEN).",
)


def to_click_error(exc: DomainException) -> click.ClickException:
    """Turn a domain error into a message fit for the terminal.

    Storage failures are logged in full but shown generically.
    """
    if isinstance(exc, StorageError):
        logger.error("Storage failure: %s", exc)
        return click.ClickException(
            "Server error: storage is unavailable. Please try again later."
        )
    return click.ClickException(str(exc))


def authenticate(token: str | None) -> Identity:
    handler = AuthenticateHandler(identity_provider=identity_provider())
    try:
        return handler.handle(token)
    except DomainException as exc:
        raise to_click_error(exc)

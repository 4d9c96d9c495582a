"""CLI commands for registration and login."""

from __future__ import annotations

import click

from storefront.application.grant_admin import GrantAdminHandler
from storefront.application.login_user import LoginUserHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    identity_provider,
    password_hasher,
    user_repository,
)
from storefront.infrastructure.cli.session import authenticate, to_click_error, token_option


@click.command("register")
@click.option("--username", required=True, help="Unique user name (3+ characters).")
@click.option("--email", required=True, help="Email address.")
@click.password_option("--password", help="Password (6+ characters).")
def auth_register(username: str, email: str, password: str) -> None:
    """Create an account and print its token."""
    handler = RegisterUserHandler(
        user_repo=user_repository(),
        password_hasher=password_hasher(),
        identity_provider=identity_provider(),
    )

    try:
        result = handler.handle(username=username, email=email, password=password)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"User registered successfully! ({result.username}, id={result.user_id})")
    click.echo(f"Token: {result.token}")


@click.command("login")
@click.option("--email", required=True, help="Email address.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Password.")
def auth_login(email: str, password: str) -> None:
    """Log in and print a fresh token."""
    handler = LoginUserHandler(
        user_repo=user_repository(),
        password_hasher=password_hasher(),
        identity_provider=identity_provider(),
    )

    try:
        result = handler.handle(email=email, password=password)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Logged in as {result.username}")
    click.echo(f"Token: {result.token}")


@click.command("whoami")
@token_option
def auth_whoami(token: str | None) -> None:
    """Show the user the token belongs to."""
    identity = authenticate(token)
    user = user_repository().get_by_id(identity.user_id)
    if user is None:
        raise click.ClickException("User not found.")

    role = "admin" if user.is_admin else "customer"
    click.echo(f"{user.username} <{user.email}>  ({role}, member since "
               f"{user.member_since.strftime('%Y-%m-%d')})")


@click.command("grant-admin")
@click.option("--email", required=True, help="Email of the user to promote.")
def auth_grant_admin(email: str) -> None:
    """Give a user admin rights (operator command, no token needed).

    Tokens issued before the change still carry the old role; the user
    has to log in again.
    """
    handler = GrantAdminHandler(user_repo=user_repository())

    try:
        handler.handle(email)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"{email} is now an admin. Log in again to get an admin token.")

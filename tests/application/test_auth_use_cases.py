"""Integration tests for registration, login and token authentication."""

import pytest

from storefront.application.authenticate import AuthenticateHandler, require_admin
from storefront.application.grant_admin import GrantAdminHandler
from storefront.application.login_user import LoginUserHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    EntityNotFoundError,
    ValidationError,
)
from storefront.domain.service.identity import Identity
from tests.fakes import FakeIdentityProvider, FakePasswordHasher, FakeUserRepository


def _setup():
    users = FakeUserRepository()
    deps = dict(
        user_repo=users,
        password_hasher=FakePasswordHasher(),
        identity_provider=FakeIdentityProvider(),
    )
    return RegisterUserHandler(**deps), LoginUserHandler(**deps), users


class TestRegister:

    def test_register_returns_token(self):
        register, _, users = _setup()
        result = register.handle("alice", "Alice@Example.com", "secret1")
        assert result.email == "alice@example.com"
        assert result.token == f"token:{result.user_id}:user"
        assert users.get_by_id(result.user_id) is not None

    def test_password_is_stored_hashed(self):
        register, _, users = _setup()
        result = register.handle("alice", "alice@example.com", "secret1")
        assert users.get_by_id(result.user_id).password_hash == "hashed:secret1"

    def test_missing_fields_rejected(self):
        register, _, _ = _setup()
        with pytest.raises(ValidationError, match="required fields"):
            register.handle("alice", "", "secret1")

    def test_short_password_rejected(self):
        register, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least 6"):
            register.handle("alice", "alice@example.com", "123")

    def test_duplicate_email_rejected(self):
        register, _, _ = _setup()
        register.handle("alice", "alice@example.com", "secret1")
        with pytest.raises(ValidationError, match="already exists"):
            register.handle("alice2", "ALICE@example.com", "secret1")

    def test_duplicate_username_rejected(self):
        register, _, _ = _setup()
        register.handle("alice", "alice@example.com", "secret1")
        with pytest.raises(ValidationError, match="already exists"):
            register.handle("alice", "other@example.com", "secret1")


class TestLogin:

    def test_login_with_correct_password(self):
        register, login, _ = _setup()
        registered = register.handle("alice", "alice@example.com", "secret1")
        result = login.handle("alice@example.com", "secret1")
        assert result.user_id == registered.user_id

    def test_wrong_password_and_unknown_email_look_the_same(self):
        register, login, _ = _setup()
        register.handle("alice", "alice@example.com", "secret1")

        with pytest.raises(AuthenticationError) as wrong_password:
            login.handle("alice@example.com", "nope-nope")
        with pytest.raises(AuthenticationError) as unknown_email:
            login.handle("bob@example.com", "secret1")
        assert str(wrong_password.value) == str(unknown_email.value)


class TestAuthenticate:

    def test_valid_token(self):
        handler = AuthenticateHandler(FakeIdentityProvider())
        assert handler.handle("token:u1:user") == Identity(user_id="u1")

    def test_bearer_prefix_accepted(self):
        handler = AuthenticateHandler(FakeIdentityProvider())
        assert handler.handle("Bearer token:u1:admin").is_admin is True

    def test_missing_token_rejected(self):
        handler = AuthenticateHandler(FakeIdentityProvider())
        with pytest.raises(AuthenticationError, match="no token"):
            handler.handle(None)

    def test_garbage_token_rejected(self):
        handler = AuthenticateHandler(FakeIdentityProvider())
        with pytest.raises(AuthenticationError):
            handler.handle("garbage")

    def test_require_admin(self):
        require_admin(Identity(user_id="u1", is_admin=True))
        with pytest.raises(AuthorizationError, match="Admin access required"):
            require_admin(Identity(user_id="u1"))


class TestGrantAdmin:

    def test_promotes_user(self):
        register, _, users = _setup()
        result = register.handle("alice", "alice@example.com", "secret1")
        GrantAdminHandler(users).handle("Alice@example.com")
        assert users.get_by_id(result.user_id).is_admin is True

    def test_unknown_email(self):
        _, _, users = _setup()
        with pytest.raises(EntityNotFoundError):
            GrantAdminHandler(users).handle("nobody@example.com")

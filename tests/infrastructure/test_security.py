"""Tests for the JWT identity provider and bcrypt password hasher."""

from datetime import timedelta

import jwt
import pytest

from storefront.domain.exceptions import AuthenticationError
from storefront.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from storefront.infrastructure.security.jwt_identity_provider import JwtIdentityProvider
from tests.fakes import make_user

SECRET = "test-secret-with-enough-length-for-hs256"


class TestJwtIdentityProvider:

    def test_issue_then_verify(self):
        provider = JwtIdentityProvider(SECRET)
        identity = provider.verify(provider.issue(make_user(id="u1", is_admin=True)))
        assert identity.user_id == "u1"
        assert identity.is_admin is True

    def test_payload_claims(self):
        token = JwtIdentityProvider(SECRET).issue(make_user(id="u1"))
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert payload["id"] == "u1"
        assert payload["isAdmin"] is False
        assert payload["exp"] - payload["iat"] == 3600

    def test_expired_token_rejected(self):
        provider = JwtIdentityProvider(SECRET, expires_in=timedelta(seconds=-5))
        token = provider.issue(make_user())
        with pytest.raises(AuthenticationError, match="expired"):
            provider.verify(token)

    def test_wrong_secret_rejected(self):
        token = JwtIdentityProvider(SECRET).issue(make_user())
        other = JwtIdentityProvider("a-completely-different-secret-value-123")
        with pytest.raises(AuthenticationError, match="token failed"):
            other.verify(token)

    def test_malformed_token_rejected(self):
        with pytest.raises(AuthenticationError):
            JwtIdentityProvider(SECRET).verify("not-a-jwt")

    def test_empty_secret_refused(self):
        with pytest.raises(ValueError):
            JwtIdentityProvider("")


class TestBcryptPasswordHasher:

    def test_hash_and_verify(self):
        hasher = BcryptPasswordHasher(rounds=4)
        hashed = hasher.hash("secret1")
        assert hashed != "secret1"
        assert hasher.verify("secret1", hashed) is True
        assert hasher.verify("secret2", hashed) is False

    def test_salted(self):
        hasher = BcryptPasswordHasher(rounds=4)
        assert hasher.hash("secret1") != hasher.hash("secret1")

    def test_non_bcrypt_hash_does_not_match(self):
        assert BcryptPasswordHasher(rounds=4).verify("secret1", "plain-text") is False

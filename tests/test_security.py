from __future__ import annotations

import time
from datetime import timedelta

import jwt
import pytest

from backend.domain.exceptions import (
    AuthError,
    ClaimsMismatchError,
    MalformedTokenError,
    SignatureMismatchError,
    TokenExpiredError,
)
from backend.infrastructure.security import TokenAuthority

from conftest import TEST_SECRET


def sign(claims: dict, key: str = TEST_SECRET) -> str:
    return jwt.encode(claims, key, algorithm="HS256")


def test_set_signing_key(authority):
    authority.set_signing_key("another-secret-key-with-32-bytes-min")
    assert authority.signing_key == "another-secret-key-with-32-bytes-min"


def test_issue_token_contents(authority):
    token = authority.issue("test@example.com", "testuser")

    claims = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])
    assert claims["email"] == "test@example.com"
    assert claims["username"] == "testuser"
    assert claims["exp"] > time.time()
    assert claims["exp"] <= time.time() + 3600 + 1


def test_validate_round_trip(authority):
    token = authority.issue("a@b.com", "u")

    claims = authority.validate(token)
    assert claims.email == "a@b.com"
    assert claims.username == "u"


def test_validate_fails_after_key_rotation(authority):
    token = authority.issue("a@b.com", "u")
    authority.validate(token)

    authority.set_signing_key("rotated-secret-key-with-32-bytes-min")

    with pytest.raises(SignatureMismatchError):
        authority.validate(token)


def test_validate_malformed():
    authority = TokenAuthority(TEST_SECRET)
    with pytest.raises(MalformedTokenError):
        authority.validate("invalid.token.here")
    with pytest.raises(MalformedTokenError):
        authority.validate("not-a-token")


def test_validate_wrong_signature(authority):
    token = sign(
        {"email": "test@example.com", "username": "testuser", "exp": int(time.time()) + 3600},
        key="wrong-secret-key-with-at-least-32-bytes",
    )
    with pytest.raises(SignatureMismatchError):
        authority.validate(token)


def test_validate_expired(authority):
    token = sign({"email": "test@example.com", "username": "testuser", "exp": int(time.time()) - 3600})

    with pytest.raises(TokenExpiredError) as exc_info:
        authority.validate(token)
    assert "expired" in str(exc_info.value)
    assert not isinstance(exc_info.value, SignatureMismatchError)


def test_validate_expired_with_short_ttl():
    authority = TokenAuthority(TEST_SECRET, ttl=timedelta(seconds=-10))
    with pytest.raises(TokenExpiredError):
        authority.validate(authority.issue("a@b.com", "u"))


def test_validate_unrelated_claims_schema(authority):
    token = sign({"sub": "someone", "role": "admin"})

    with pytest.raises(ClaimsMismatchError):
        authority.validate(token)


def test_validate_mistyped_claims(authority):
    token = sign({"email": 42, "username": "u", "exp": int(time.time()) + 3600})

    with pytest.raises(ClaimsMismatchError):
        authority.validate(token)


def test_validate_empty_identity_fields(authority):
    token = sign({"email": "", "username": "", "exp": int(time.time()) + 3600})

    claims = authority.validate(token)
    assert claims.email == ""
    assert claims.username == ""


def test_issue_accepts_empty_identity(authority):
    assert authority.validate(authority.issue("", "")).email == ""


def test_auth_errors_share_base_class():
    for error in (MalformedTokenError, SignatureMismatchError, TokenExpiredError, ClaimsMismatchError):
        assert issubclass(error, AuthError)

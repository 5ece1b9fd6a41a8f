from types import SimpleNamespace

import pytest

from blogapi.models import User
from blogapi.security import (
    HashedCredentials,
    NoCredentials,
    PlaceholderCredentials,
    PLACEHOLDER_HASH,
    credentials_from_settings,
    get_password_hash,
    verify_password,
)


def _user() -> User:
    return User(username="reader", email="reader@example.com")


def test_hash_and_verify_roundtrip():
    hashed = get_password_hash("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("other", hashed)


def test_missing_or_placeholder_hash_never_verifies():
    assert not verify_password("anything", None)
    assert not verify_password("anything", PLACEHOLDER_HASH)


def test_issuers_set_password_hash():
    user = _user()
    PlaceholderCredentials().issue(user)
    assert user.password_hash == PLACEHOLDER_HASH

    NoCredentials().issue(user)
    assert user.password_hash is None

    HashedCredentials("pw").issue(user)
    assert verify_password("pw", user.password_hash)


def test_hashed_credentials_reject_empty_password():
    with pytest.raises(ValueError):
        HashedCredentials("")


def test_credentials_from_settings():
    assert isinstance(credentials_from_settings(SimpleNamespace(demo_password=None)), NoCredentials)
    issuer = credentials_from_settings(SimpleNamespace(demo_password="pw"))
    assert isinstance(issuer, HashedCredentials)
    assert issuer.password == "pw"

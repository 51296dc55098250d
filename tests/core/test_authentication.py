"""Tests for JWT handling and password hashing."""

from datetime import timedelta

import pytest
from fastapi import HTTPException
from jose import jwt

from geothing.core.authentication import (
    JwtChecker,
    get_current_user,
    get_password_hash,
    verify_password,
)
from geothing.core.schemas import AuthenticatedUser

SECRET = "test-secret"


@pytest.fixture
def jwt_checker() -> JwtChecker:
    return JwtChecker(secret_key=SECRET, algorithm="HS256", expire_minutes=5)


def test_password_hashing():
    """Test password hashing and verification."""
    password = "testpassword123"
    hashed = get_password_hash(password)

    assert hashed != password
    assert verify_password(password, hashed) is True
    assert verify_password("wrongpassword", hashed) is False


def test_token_round_trip_keeps_identity_and_admin_flag(jwt_checker):
    user = AuthenticatedUser(
        user_id=42, is_admin=True, login="jdoe", email="jdoe@example.org", name="J Doe"
    )

    parsed = jwt_checker.parse_token(jwt_checker.create_access_token(user))

    assert parsed.user_id == 42
    assert parsed.is_admin is True
    assert parsed.login == "jdoe"
    assert parsed.email == "jdoe@example.org"
    assert parsed.claims["sub"] == "42"


def test_expired_token_is_rejected(jwt_checker):
    user = AuthenticatedUser(user_id=1)
    token = jwt_checker.create_access_token(user, expires_delta=timedelta(minutes=-1))

    with pytest.raises(HTTPException) as exc_info:
        jwt_checker.parse_token(token)

    assert exc_info.value.status_code == 401


def test_token_signed_with_another_key_is_rejected(jwt_checker):
    token = jwt.encode({"sub": "1"}, "another-secret", algorithm="HS256")

    with pytest.raises(HTTPException) as exc_info:
        jwt_checker.parse_token(token)

    assert exc_info.value.status_code == 401


def test_token_without_subject_is_rejected(jwt_checker):
    token = jwt.encode({"login": "nobody"}, SECRET, algorithm="HS256")

    with pytest.raises(HTTPException) as exc_info:
        jwt_checker.parse_token(token)

    assert exc_info.value.detail == "Token missing required user information"


def test_token_with_non_numeric_subject_is_rejected(jwt_checker):
    token = jwt.encode({"sub": "not-a-number"}, SECRET, algorithm="HS256")

    with pytest.raises(HTTPException) as exc_info:
        jwt_checker.parse_token(token)

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_missing_credentials_are_unauthenticated(jwt_checker):
    with pytest.raises(HTTPException) as exc_info:
        await get_current_user(credentials=None, jwt_checker=jwt_checker)

    assert exc_info.value.status_code == 401

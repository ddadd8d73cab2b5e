"""
File: tests/unit/test_security.py
Description: 密码哈希与 JWT 工具单元测试

Created: 2026-03-02
"""

import uuid
from datetime import timedelta

import pytest
from jose import jwt

from inkwell.core.config import settings
from inkwell.core.security import (
    PasswordVerificationError,
    TokenError,
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
    verify_password_async,
)


@pytest.mark.parametrize("password", ["Secret12", "aB3xyz", "Zz9" * 6])
def test_password_round_trip(password: str) -> None:
    hashed = get_password_hash(password)

    assert hashed != password
    assert verify_password(password, hashed)
    assert not verify_password(password + "x", hashed)


def test_unknown_hash_raises_verification_error() -> None:
    with pytest.raises(PasswordVerificationError):
        verify_password("Secret12", "not-a-real-hash")


@pytest.mark.asyncio
async def test_verify_password_async() -> None:
    hashed = get_password_hash("Secret12")

    assert await verify_password_async("Secret12", hashed) is True
    assert await verify_password_async("Secret13", hashed) is False


def test_access_token_round_trip() -> None:
    user_id = uuid.uuid4()

    token = create_access_token(subject=user_id)

    assert decode_access_token(token) == str(user_id)


def test_expired_token_is_rejected() -> None:
    token = create_access_token(subject="someone", expires_delta=timedelta(seconds=-5))

    with pytest.raises(TokenError):
        decode_access_token(token)


def test_token_signed_with_other_key_is_rejected() -> None:
    token = jwt.encode(
        {"sub": "someone", "type": "access"},
        "another-secret-key-another-secret-key",
        algorithm=settings.ALGORITHM,
    )

    with pytest.raises(TokenError):
        decode_access_token(token)


def test_token_without_access_type_is_rejected() -> None:
    token = jwt.encode(
        {"sub": "someone", "type": "refresh"},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )

    with pytest.raises(TokenError):
        decode_access_token(token)


def test_garbage_token_is_rejected() -> None:
    with pytest.raises(TokenError):
        decode_access_token("definitely.not.a-jwt")

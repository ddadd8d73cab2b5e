"""
File: inkwell/core/security.py
Description: 安全工具模块 (Argon2id + JWT)

本模块负责：
1. 密码加密 (Hash): 使用 Argon2id 算法，参数固定 (pwdlib 推荐配置)
2. 密码验证 (Verify): 校验明文与哈希；哈希本身无法识别时抛出 PasswordVerificationError
3. JWT 签发与校验: 无状态 Access Token，sub 为用户 ID
4. 异步封装: 哈希运算放入线程池，避免阻塞事件循环

Created: 2025-12-05
Updated: 2026-03-02 (Token verification helpers for the auth gate)
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from starlette.concurrency import run_in_threadpool

from inkwell.core.config import settings

password_hash = PasswordHash.recommended()

ACCESS_TOKEN_TYPE = "access"


class PasswordVerificationError(Exception):
    """哈希库无法处理存储的哈希值 (格式损坏/算法未知)"""


class TokenError(Exception):
    """Token 签名错误、过期或载荷不完整"""


# ------------------------------------------------------------------------------
# 1. 密码处理 (Password Hashing)
# ------------------------------------------------------------------------------


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    验证明文密码与哈希值是否匹配。

    Raises:
        PasswordVerificationError: 存储的哈希值无法被识别
    """
    try:
        return password_hash.verify(plain_password, hashed_password)
    except UnknownHashError as exc:
        raise PasswordVerificationError("Stored password hash is not recognized") from exc


def get_password_hash(password: str) -> str:
    """生成密码哈希值 (Argon2id)。"""
    return password_hash.hash(password)


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    return await run_in_threadpool(verify_password, plain_password, hashed_password)


async def get_password_hash_async(password: str) -> str:
    return await run_in_threadpool(get_password_hash, password)


# ------------------------------------------------------------------------------
# 2. JWT 处理 (JSON Web Token)
# ------------------------------------------------------------------------------


def _secret_key() -> str:
    secret_key = settings.SECRET_KEY
    if secret_key is None:
        raise ValueError("SECRET_KEY configuration is missing.")
    return secret_key


def create_access_token(
    subject: str | Any, expires_delta: timedelta | None = None
) -> str:
    """
    生成 JWT Access Token。

    Args:
        subject: 主体标识 (用户 ID)
        expires_delta: 自定义有效期，默认取 ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        str: 编码后的 JWT 字符串
    """
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )

    to_encode = {"exp": expire, "sub": str(subject), "type": ACCESS_TOKEN_TYPE}
    return jwt.encode(to_encode, _secret_key(), algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> str:
    """
    校验 JWT 并返回 sub (用户 ID 字符串)。

    Raises:
        TokenError: 签名无效、已过期、类型不符或缺少 sub
    """
    try:
        payload = jwt.decode(token, _secret_key(), algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        raise TokenError(str(exc)) from exc

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise TokenError("Unexpected token type")

    subject = payload.get("sub")
    if not subject:
        raise TokenError("Token is missing sub")

    return str(subject)

"""
File: inkwell/api/deps.py
Description: 全局依赖注入定义 (DB Session + Auth Gate)

本模块负责：
1. 数据库会话管理 (get_db / DBSession)
2. Bearer Token 提取与校验，产出已认证的调用方身份 (get_current_actor / CurrentActor)

Auth Gate 只确认身份，不查库也不做授权判断；
身份以显式参数的形式传入业务层，由业务层决定调用方能做什么。

Created: 2025-12-05
Updated: 2026-03-02 (Stateless actor injection)
"""

import uuid
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Header
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.core.exceptions import ForbiddenException, UnauthorizedException
from inkwell.core.logging import logger
from inkwell.core.security import TokenError, decode_access_token
from inkwell.db.session import AsyncSessionLocal

# ------------------------------------------------------------------------------
# 1. Database Dependencies
# ------------------------------------------------------------------------------


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    获取异步数据库会话依赖。
    使用 async with 确保请求结束时自动关闭 session。
    """
    async with AsyncSessionLocal() as session:
        yield session


# 数据库会话依赖类型别名
DBSession = Annotated[AsyncSession, Depends(get_db)]


# ------------------------------------------------------------------------------
# 2. Authentication Dependencies (Auth Gate)
# ------------------------------------------------------------------------------


class Actor(BaseModel):
    """已认证的调用方"""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID


async def get_token_from_header(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """
    从 Authorization Header 提取 Bearer Token。
    格式要求: Authorization: Bearer <token>

    缺少 Header、Scheme 不是 Bearer 或 Token 为空，均视为未携带 Token (401)。
    """
    if not authorization:
        raise UnauthorizedException()

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise UnauthorizedException()

    return token


async def get_current_actor(
    token: Annotated[str, Depends(get_token_from_header)],
) -> Actor:
    """
    校验 JWT 签名与有效期，提取 sub 作为调用方身份。

    Raises:
        ForbiddenException: Token 无效、过期或 sub 不是合法的用户 ID (403)
    """
    try:
        subject = decode_access_token(token)
        actor_id = uuid.UUID(subject)
    except (TokenError, ValueError) as exc:
        logger.bind(reason=str(exc)).info("Rejected access token")
        raise ForbiddenException() from None

    return Actor(id=actor_id)


# 已认证调用方依赖
# 用法: async def endpoint(actor: CurrentActor): ...
CurrentActor = Annotated[Actor, Depends(get_current_actor)]

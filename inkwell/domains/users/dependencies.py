"""
File: inkwell/domains/users/dependencies.py
Description: 用户领域依赖注入 (DI)

依赖链：
DBSession → UserRepository → UserRepoDep

认证领域 (注册/登录) 与博客领域 (作者计数) 都复用该仓储依赖。

Created: 2025-11-26
"""

from typing import Annotated

from fastapi import Depends

from inkwell.api.deps import DBSession
from inkwell.db.models.user import User
from inkwell.domains.users.repository import UserRepository


async def get_user_repository(session: DBSession) -> UserRepository:
    """
    获取用户仓储实例 (UserRepository)。
    """
    return UserRepository(model=User, session=session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]

"""
File: inkwell/domains/auth/dependencies.py
Description: 认证领域依赖注入 (DI)

依赖链：
DBSession → UserRepository → AuthService → AuthServiceDep

Created: 2025-12-05
"""

from typing import Annotated

from fastapi import Depends

from inkwell.domains.auth.service import AuthService
from inkwell.domains.users.dependencies import UserRepoDep


async def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    """
    构造 AuthService 实例，复用 User 领域的 Repository。
    """
    return AuthService(user_repo=user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]

"""
File: inkwell/domains/blogs/dependencies.py
Description: 博客领域依赖注入 (DI)

依赖链：
DBSession → BlogRepository ┐
DBSession → UserRepository ┴→ BlogService → BlogServiceDep

同一请求内 get_db 只执行一次，两个仓储共享同一个会话。

Created: 2026-03-02
"""

from typing import Annotated

from fastapi import Depends

from inkwell.api.deps import DBSession
from inkwell.db.models.blog import Blog
from inkwell.domains.blogs.repository import BlogRepository
from inkwell.domains.blogs.service import BlogService
from inkwell.domains.users.dependencies import UserRepoDep


async def get_blog_repository(session: DBSession) -> BlogRepository:
    return BlogRepository(model=Blog, session=session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


async def get_blog_service(repo: BlogRepoDep, user_repo: UserRepoDep) -> BlogService:
    """
    获取博客服务实例 (BlogService)。
    """
    return BlogService(repo=repo, user_repo=user_repo)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]

"""
File: inkwell/domains/users/repository.py
Description: 用户领域仓储层 (Credential Store)

扩展功能：
1. get_by_email: 登录时按邮箱查询
2. email_exists / username_exists: 唯一性预检查 (仅作优化，最终以数据库约束为准)
3. increment_counters: 原子自增 total_posts / total_reads
4. list_blog_ids: 按发布时间顺序列出用户拥有的博客 slug

Created: 2025-11-25
Updated: 2026-03-02 (Author aggregate counters)
"""

import uuid

from sqlalchemy import select, update

from inkwell.db.models.blog import Blog
from inkwell.db.models.user import User
from inkwell.db.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    用户仓储类。
    """

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        return await self.exists_where(User.email == email)

    async def username_exists(self, username: str) -> bool:
        return await self.exists_where(User.username == username)

    async def increment_counters(
        self, user_id: uuid.UUID, *, total_posts: int = 0, total_reads: int = 0
    ) -> bool:
        """
        原子自增作者聚合计数 (UPDATE ... SET n = n + k)。

        Returns:
            bool: 命中用户返回 True；用户不存在返回 False
        """
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(
                total_posts=User.total_posts + total_posts,
                total_reads=User.total_reads + total_reads,
            )
            .returning(User.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_blog_ids(self, user_id: uuid.UUID) -> list[str]:
        """
        用户拥有的博客 slug 列表 (按发布时间顺序，只增不减)。

        该列表由 blogs.author_id 外键维护，发布时无需单独写入；
        当前没有接口对外暴露，此方法用于读取该引用列表。
        """
        stmt = (
            select(Blog.blog_id)
            .where(Blog.author_id == user_id)
            .order_by(Blog.published_at, Blog.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

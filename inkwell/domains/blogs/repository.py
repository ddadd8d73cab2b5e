"""
File: inkwell/domains/blogs/repository.py
Description: 博客领域仓储层 (Content Store)

扩展功能：
1. increment_reads: 按 slug 原子自增阅读数，同一条语句返回主键与作者 ID
2. get_view: 详情视图查询 (预加载作者)
3. list_latest: 非草稿博客按发布时间倒序取前 N 条

Created: 2026-03-02
"""

import uuid

from sqlalchemy import select, update
from sqlalchemy.orm import joinedload

from inkwell.db.models.blog import Blog
from inkwell.db.repositories.base import BaseRepository


class BlogRepository(BaseRepository[Blog]):
    """
    博客仓储类。
    """

    async def increment_reads(
        self, blog_id: str
    ) -> tuple[uuid.UUID, uuid.UUID] | None:
        """
        查找并自增 total_reads (单条 UPDATE ... RETURNING)。

        Returns:
            (主键, 作者 ID)；slug 不存在时返回 None
        """
        stmt = (
            update(Blog)
            .where(Blog.blog_id == blog_id)
            .values(total_reads=Blog.total_reads + 1)
            .returning(Blog.id, Blog.author_id)
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return row.id, row.author_id

    async def get_view(self, id: uuid.UUID) -> Blog | None:
        # populate_existing: 刷新 identity map 中已存在的旧对象 (计数刚被 UPDATE 修改)
        stmt = (
            select(Blog)
            .options(joinedload(Blog.author))
            .where(Blog.id == id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_latest(self, limit: int) -> list[Blog]:
        stmt = (
            select(Blog)
            .options(joinedload(Blog.author))
            .where(Blog.draft.is_(False))
            .order_by(Blog.published_at.desc(), Blog.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

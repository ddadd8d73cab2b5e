"""
File: inkwell/domains/blogs/service.py
Description: 博客领域服务 (Publisher / Reader / Listing)

本模块封装博客核心业务逻辑：
1. publish: 校验提交 → 生成 slug → 写入博客 → 更新作者 total_posts
2. fetch: 原子自增阅读数 → 更新作者 total_reads (尽力而为) → 返回详情视图
3. list_latest: 最新的非草稿博客

注意：
主写入与作者聚合计数是两次独立提交，不在同一事务内：
- 发布时计数更新失败：博客保留，调用方收到 SecondaryUpdateException (500)
- 阅读时计数更新失败：只记录 warning，详情照常返回

Created: 2026-03-02
"""

import uuid

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from inkwell.core.exceptions import (
    ConflictException,
    ForbiddenException,
    NotFoundException,
    SecondaryUpdateException,
)
from inkwell.core.logging import logger
from inkwell.db.models.blog import Blog
from inkwell.domains.blogs.constants import (
    LATEST_BLOGS_LIMIT,
    MAX_BLOG_ID_ATTEMPTS,
    BlogErrorCode,
)
from inkwell.domains.blogs.repository import BlogRepository
from inkwell.domains.blogs.schemas import BlogDetail, BlogSubmission, BlogSummary
from inkwell.domains.users.repository import UserRepository
from inkwell.utils.identifiers import generate_blog_id

# PostgreSQL 报告约束名，SQLite 报告 "表.列"
BLOG_ID_UNIQUE_MARKERS = ("uq_blogs_blog_id", "blogs.blog_id")


def is_blog_id_collision(exc: IntegrityError) -> bool:
    """
    判断写入失败是否由 blog_id 唯一约束引起 (外键/检查约束等其他失败返回 False)。
    """
    detail = str(exc.orig)
    return any(marker in detail for marker in BLOG_ID_UNIQUE_MARKERS)


class BlogService:
    """
    博客领域服务。
    """

    def __init__(self, repo: BlogRepository, user_repo: UserRepository):
        self.repo = repo
        self.user_repo = user_repo

    async def publish(self, actor_id: uuid.UUID, submission: BlogSubmission) -> str:
        """
        创建博客 (草稿或正式发布)。

        Returns:
            str: 新博客的 blog_id

        Raises:
            ValidationException: 正式发布时字段不合法
            ForbiddenException: Token 对应的用户已不存在
            ConflictException: 多次生成的 slug 均冲突
            SecondaryUpdateException: 博客已写入，作者计数更新失败
        """
        submission.check()

        if not await self.user_repo.exists(actor_id):
            raise ForbiddenException()

        session = self.repo.session
        blog: Blog | None = None
        for attempt in range(1, MAX_BLOG_ID_ATTEMPTS + 1):
            candidate = Blog(
                blog_id=generate_blog_id(submission.title),
                title=submission.title,
                des=submission.des,
                banner=submission.banner,
                content=submission.content.model_dump(),
                tags=submission.tags,
                author_id=actor_id,
                draft=submission.draft,
            )
            try:
                await self.repo.add(candidate)
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                if not is_blog_id_collision(exc):
                    raise
                logger.bind(blog_id=candidate.blog_id, attempt=attempt).warning(
                    "Blog id collision on insert, regenerating"
                )
                continue

            blog = candidate
            break

        if blog is None:
            raise ConflictException(BlogErrorCode.BLOG_ID_EXHAUSTED)

        blog_id = blog.blog_id

        # 草稿不计入 total_posts；作者的博客列表由 author_id 外键维护
        try:
            updated = await self.user_repo.increment_counters(
                actor_id, total_posts=0 if submission.draft else 1
            )
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            logger.opt(exception=True).bind(blog_id=blog_id).error(
                "Author total_posts update raised"
            )
            updated = False

        if not updated:
            logger.bind(blog_id=blog_id, author_id=str(actor_id)).warning(
                "Blog persisted but author total_posts was not updated"
            )
            raise SecondaryUpdateException(BlogErrorCode.TOTAL_POSTS_UPDATE_FAILED)

        logger.bind(
            blog_id=blog_id, author_id=str(actor_id), draft=submission.draft
        ).info("Blog created")
        return blog_id

    async def fetch(self, blog_id: str) -> BlogDetail:
        """
        读取博客详情，阅读数 +1。

        返回的是自增之后的计数。

        Raises:
            NotFoundException: slug 不存在 (404)
        """
        session = self.repo.session

        hit = await self.repo.increment_reads(blog_id)
        if hit is None:
            raise NotFoundException(BlogErrorCode.BLOG_NOT_FOUND)
        await session.commit()

        pk, author_id = hit

        try:
            updated = await self.user_repo.increment_counters(author_id, total_reads=1)
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            logger.opt(exception=True).bind(blog_id=blog_id).error(
                "Author total_reads update raised"
            )
            updated = False

        if not updated:
            logger.bind(blog_id=blog_id, author_id=str(author_id)).warning(
                "Author total_reads was not updated"
            )

        blog = await self.repo.get_view(pk)
        if blog is None:
            raise NotFoundException(BlogErrorCode.BLOG_NOT_FOUND)
        return BlogDetail.from_model(blog)

    async def list_latest(self) -> list[BlogSummary]:
        blogs = await self.repo.list_latest(LATEST_BLOGS_LIMIT)
        return [BlogSummary.from_model(blog) for blog in blogs]

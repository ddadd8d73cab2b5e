"""
File: inkwell/db/models/blog.py
Description: 博客内容模型

约束：
- blog_id (slug) 全局唯一，创建后不可变
- author_id 创建时确定，不可变
- draft=True 表示未公开 (不出现在最新列表中)，不是独立的生命周期阶段
- published_at 在创建时写入，与 draft 无关
- total_reads 非负，只通过原子自增修改

Created: 2026-03-02
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Text,
    Uuid,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkwell.db.models.base import JSONType, UUIDModel, utcnow

if TYPE_CHECKING:
    from inkwell.db.models.user import User


class Blog(UUIDModel):
    """
    博客模型 (内容域)
    """

    __tablename__ = "blogs"

    __table_args__ = (
        CheckConstraint("length(blog_id) > 0", name="blog_id_not_empty"),
        CheckConstraint("total_reads >= 0", name="total_reads_non_negative"),
        # 最新列表: WHERE draft = false ORDER BY published_at DESC LIMIT n
        Index("ix_blogs_draft_published_at", "draft", "published_at"),
    )

    blog_id: Mapped[str] = mapped_column(
        Text, unique=True, nullable=False, comment="URL slug (标题 + 随机后缀)"
    )

    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # 发布时不超过 200 字符；草稿不校验
    des: Mapped[str] = mapped_column(Text, nullable=False, default="", comment="摘要")
    banner: Mapped[str] = mapped_column(
        Text, nullable=False, default="", comment="封面图 URL"
    )

    # 结构化块序列，例如 {"blocks": [{"type": "paragraph", "data": {...}}]}
    content: Mapped[dict[str, Any]] = mapped_column(
        JSONType, nullable=False, default=dict
    )
    # 小写标签列表
    tags: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)

    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
        comment="作者 (users.id)",
    )

    draft: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=text("false"), nullable=False
    )

    total_reads: Mapped[int] = mapped_column(
        Integer,
        default=0,
        server_default=text("0"),
        nullable=False,
        comment="activity.total_reads",
    )

    published_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        comment="发布时间 (UTC)",
    )

    author: Mapped["User"] = relationship(back_populates="blogs", lazy="raise")

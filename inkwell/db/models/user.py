"""
File: inkwell/db/models/user.py
Description: 用户核心账号模型

字段分组：
1. personal_info: fullname / email / username / password_hash / profile_img
2. account_info:  total_posts / total_reads (由博客发布/阅读事件维护的聚合计数)
3. blogs:         该用户拥有的博客 (通过 blogs.author_id 外键反向关联，按发布时间排序)

约束：
- email、username 全局唯一 (数据库唯一索引是唯一事实来源)
- 计数器非负；关键字符串字段非空
- password_hash 只存哈希值，永不返回给客户端

Created: 2025-11-25
Updated: 2026-03-02 (Author counters and blog ownership)
"""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Integer, String, text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship

from inkwell.db.models.base import UUIDModel

if TYPE_CHECKING:
    from inkwell.db.models.blog import Blog


class User(UUIDModel):
    """
    用户模型 (账号域)
    """

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return "users"

    __table_args__ = (
        CheckConstraint("length(trim(email)) > 0", name="email_not_empty"),
        CheckConstraint("length(trim(username)) > 0", name="username_not_empty"),
        CheckConstraint("length(password_hash) > 0", name="password_not_empty"),
        CheckConstraint("total_posts >= 0", name="total_posts_non_negative"),
        CheckConstraint("total_reads >= 0", name="total_reads_non_negative"),
    )

    # --------------------------------------------------------------------------
    # personal_info
    # --------------------------------------------------------------------------

    fullname: Mapped[str] = mapped_column(
        String(80), nullable=False, comment="用户全名 (3-80 字符)"
    )

    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, comment="登录邮箱 (唯一)"
    )

    # 由邮箱本地部分派生，冲突时追加随机后缀
    username: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, comment="用户名 (唯一)"
    )

    password_hash: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="密码哈希值 (Argon2id)"
    )

    profile_img: Mapped[str | None] = mapped_column(
        String(500), nullable=True, comment="头像 URL"
    )

    # --------------------------------------------------------------------------
    # account_info
    # --------------------------------------------------------------------------

    total_posts: Mapped[int] = mapped_column(
        Integer,
        default=0,
        server_default=text("0"),
        nullable=False,
        comment="已发布 (非草稿) 博客数",
    )

    total_reads: Mapped[int] = mapped_column(
        Integer,
        default=0,
        server_default=text("0"),
        nullable=False,
        comment="名下博客累计阅读数",
    )

    # --------------------------------------------------------------------------
    # blogs
    # --------------------------------------------------------------------------

    # lazy="raise": 异步会话中禁止隐式加载，需要时显式 selectinload
    blogs: Mapped[list["Blog"]] = relationship(
        back_populates="author",
        order_by="Blog.published_at",
        lazy="raise",
    )

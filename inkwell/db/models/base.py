"""
File: inkwell/db/models/base.py
Description: ORM 模型基类与组件化定义

1. UUIDBase: 提供 UUID v7 主键 + 自动表名(snake_case)
2. TimestampMixin: 提供 created_at, updated_at (UTC)
3. UUIDModel: UUIDBase + TimestampMixin，所有业务表的基类

类型选择：
- 主键使用 SQLAlchemy 通用 Uuid 类型 (PostgreSQL 原生 UUID，SQLite 为 CHAR(32))
- JSON 字段使用 JSONType (PostgreSQL 下为 JSONB)

Created: 2025-11-25
Updated: 2026-03-02 (Portable column types)
"""

import re
import uuid
from datetime import UTC, datetime

from sqlalchemy import JSON, DateTime, MetaData, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column
from uuid6 import uuid7

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# PostgreSQL 使用 JSONB (可建 GIN 索引)，其余方言退化为通用 JSON
JSONType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    return datetime.now(UTC)


def resolve_table_name(name: str) -> str:
    """
    驼峰命名转蛇形命名。
    示例: BlogPost -> blog_post, APIKey -> api_key
    """
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


class Base(DeclarativeBase):
    """SQLAlchemy 声明式元类"""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class TimestampMixin:
    """
    时间戳混入类，统一存储 UTC 时间。
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        comment="创建时间 (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False,
        comment="更新时间 (UTC)",
    )


class UUIDBase(Base):
    __abstract__ = True

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return resolve_table_name(cls.__name__)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid7, comment="主键 (UUID v7)"
    )


class UUIDModel(UUIDBase, TimestampMixin):
    """
    全站通用的业务模型基类 (ID + 时间戳)。
    """

    __abstract__ = True

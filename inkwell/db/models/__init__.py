"""
File: inkwell/db/models/__init__.py
Description: ORM 模型注册表

导入所有业务模型，供 Alembic (env.py) 与测试 create_all 发现 metadata。
每当新增一个 Model 文件，必须在此处导入。

Created: 2025-11-25
"""

from inkwell.db.models.base import Base, TimestampMixin, UUIDBase, UUIDModel
from inkwell.db.models.blog import Blog
from inkwell.db.models.user import User

__all__ = [
    "Base",
    "UUIDBase",
    "UUIDModel",
    "TimestampMixin",
    "Blog",
    "User",
]

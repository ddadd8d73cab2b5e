"""
File: inkwell/db/repositories/base.py
Description: 通用异步 Repository 基类

封装各领域共用的存储操作：
- exists: 主键存在性检查
- exists_where: 任意条件的存在性检查 (只取一列，LIMIT 1)
- add: 写入新对象并 flush (触发唯一约束检查)，不 commit

事务边界 (commit / rollback) 由 Service 层控制。

Created: 2025-11-25
Updated: 2026-03-02 (Trimmed to the operations the stores need)
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.db.models.base import UUIDBase

ModelType = TypeVar("ModelType", bound=UUIDBase)


class BaseRepository(Generic[ModelType]):
    """
    通用仓储基类。

    参数:
    - ModelType: SQLAlchemy 模型类 (如 User, Blog)
    """

    def __init__(self, model: type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    async def exists(self, id: Any) -> bool:
        return await self.exists_where(self.model.id == id)

    async def exists_where(self, *criteria: ColumnElement[bool]) -> bool:
        """
        条件存在性检查，不加载整行。
        """
        stmt = select(self.model.id).where(*criteria).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def add(self, db_obj: ModelType) -> ModelType:
        """
        写入新记录。

        flush 会立即触发数据库唯一约束检查，冲突时抛出 IntegrityError，
        由调用方决定回滚与重试。
        """
        self.session.add(db_obj)
        await self.session.flush()
        await self.session.refresh(db_obj)
        return db_obj

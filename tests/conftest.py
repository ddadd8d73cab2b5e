"""
File: tests/conftest.py
Description: Pytest 全局 Fixtures 配置 (Async + 内存 SQLite)

1. 导入应用前写入测试环境变量 (SECRET_KEY、SQLite DSN)，配置对象在导入时即校验
2. 每个测试函数使用独立的内存数据库 (StaticPool 保证同一连接)，互不干扰
3. HTTP 测试覆写 get_db 与 get_object_storage，不访问真实数据库和对象存储

Created: 2025-11-26
Updated: 2026-03-02 (In-memory SQLite, storage override)
"""

import asyncio
import os
import sys
from collections.abc import AsyncGenerator

if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

# ------------------------------------------------------------------------------
# 1. 环境配置 (必须在导入 inkwell 之前)
# ------------------------------------------------------------------------------

TEST_DATABASE_URI = "sqlite+aiosqlite:///:memory:"

os.environ["SECRET_KEY"] = "test-secret-key-for-inkwell-unit-tests-0123456789"
os.environ["SQLALCHEMY_DATABASE_URI"] = TEST_DATABASE_URI
os.environ["ENVIRONMENT"] = "local"

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from inkwell.api.deps import get_db  # noqa: E402
from inkwell.core.storage import get_object_storage  # noqa: E402
from inkwell.db.models import Base  # noqa: E402
from inkwell.main import app  # noqa: E402

# ------------------------------------------------------------------------------
# 2. Test Doubles
# ------------------------------------------------------------------------------


class FakeObjectStorage:
    """
    记录调用参数并返回可预测 URL 的对象存储替身。
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []

    async def generate_upload_url(
        self, key: str, content_type: str, expires_in: int
    ) -> str:
        self.calls.append(
            {"key": key, "content_type": content_type, "expires_in": expires_in}
        )
        return f"https://uploads.test/{key}?expires={expires_in}"


# ------------------------------------------------------------------------------
# 3. 全局 Fixtures
# ------------------------------------------------------------------------------


@pytest_asyncio.fixture(scope="function")
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    创建测试专用的内存数据库引擎，并建表。
    """
    engine = create_async_engine(
        TEST_DATABASE_URI,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """
    获取测试用的数据库会话，参数与应用内 AsyncSessionLocal 一致。
    """
    async_session_factory = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def fake_storage() -> FakeObjectStorage:
    return FakeObjectStorage()


@pytest_asyncio.fixture(scope="function")
async def client(
    db_session: AsyncSession, fake_storage: FakeObjectStorage
) -> AsyncGenerator[AsyncClient, None]:
    """
    获取异步 HTTP 客户端。
    """

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    async def override_get_object_storage() -> AsyncGenerator[FakeObjectStorage, None]:
        yield fake_storage

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_object_storage] = override_get_object_storage

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"  # type: ignore
    ) as ac:
        yield ac

    app.dependency_overrides.clear()

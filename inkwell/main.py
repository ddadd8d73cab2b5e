"""
File: inkwell/main.py
Description: FastAPI 应用入口与工厂函数

本模块负责：
1. 创建 FastAPI 应用实例 (设置默认响应类为 ORJSONResponse)
2. 管理应用生命周期 (lifespan): 启动日志、关闭数据库连接池
3. 组装全局组件：中间件、异常处理器、路由
4. 提供健康检查接口 (/health)

Created: 2025-12-05
Updated: 2026-03-02 (Publishing API surface)
"""

import asyncio
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

# asyncpg 在 Windows 下需要 SelectorEventLoop，必须在事件循环启动前设置
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())


from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from inkwell.api_router import api_router
from inkwell.core.config import settings
from inkwell.core.exceptions import register_exception_handlers
from inkwell.core.logging import setup_logging
from inkwell.core.middleware import register_middlewares
from inkwell.core.response import HealthStatus
from inkwell.db.session import close_engine


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    应用生命周期管理器。
    """
    # 1. 启动时：初始化日志系统
    setup_logging()

    yield

    # 2. 关闭时：释放数据库连接池
    await close_engine()


def create_app() -> FastAPI:
    """应用工厂函数"""

    app = FastAPI(
        title=settings.PROJECT_NAME,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
        # 生产环境不暴露交互式文档
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if settings.is_production else "/openapi.json",
    )

    # 1. 注册中间件 (CORS, RequestID, Logging)
    register_middlewares(app)

    # 2. 注册异常处理器
    register_exception_handlers(app)

    # 3. 挂载 API 路由
    app.include_router(api_router, prefix=settings.API_PREFIX)

    # 4. 挂载健康检查
    @app.get(
        "/health",
        tags=["health"],
        summary="健康检查",
        response_model=HealthStatus,
    )
    async def health_check() -> HealthStatus:
        """
        用于 K8s Liveness/Readiness Probe 或负载均衡器检查。
        """
        return HealthStatus()

    return app


# 暴露给 Uvicorn 运行的应用实例
app = create_app()

if __name__ == "__main__":
    # 本地调试入口
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=3000)

"""
File: inkwell/core/middleware.py
Description: 中间件配置与实现

本模块负责：
1. RequestLogMiddleware：
   - 生成 UUID v7 request_id (若上游网关已传入 X-Request-ID 则沿用)
   - 绑定 Loguru 上下文，请求链路内所有日志自动携带 request_id
   - 记录访问日志 (Access Log)
   - 回写 X-Request-ID 响应头
2. register_middlewares：统一注册 CORS 与请求日志中间件

Created: 2025-11-24
"""

import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from uuid6 import uuid7

from inkwell.core.config import settings
from inkwell.core.logging import logger

REQUEST_ID_HEADER = "X-Request-ID"

# 高频低价值请求不写访问日志
SKIP_LOG_PATHS: set[str] = {"/health", "/health/", "/favicon.ico"}

# 过长的外部 ID 视为不可信，重新生成
MAX_INBOUND_REQUEST_ID_LENGTH = 64


def _resolve_request_id(request: Request) -> str:
    inbound = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if inbound and len(inbound) <= MAX_INBOUND_REQUEST_ID_LENGTH:
        return inbound
    return str(uuid7())


class RequestLogMiddleware(BaseHTTPMiddleware):
    """
    全局请求日志中间件
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = _resolve_request_id(request)
        request.state.request_id = request_id

        skip_log = request.url.path in SKIP_LOG_PATHS

        with logger.contextualize(request_id=request_id):
            start_time = time.perf_counter()

            try:
                response = await call_next(request)
            except Exception as exc:
                # 正常情况下异常处理器已返回 Response，走到这里说明是中间件层面的故障
                logger.bind(
                    method=request.method,
                    path=request.url.path,
                    duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                ).opt(exception=exc).error("Request failed with unhandled exception")
                raise

            response.headers[REQUEST_ID_HEADER] = request_id

            if not skip_log:
                logger.bind(
                    method=request.method,
                    path=request.url.path,
                    status_code=response.status_code,
                    duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                    client_ip=request.client.host if request.client else "unknown",
                ).info("Request finished")

            return response


def register_middlewares(app: FastAPI) -> None:
    """
    统一注册所有中间件。
    Starlette 为洋葱模型：后注册的先执行。
    """
    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[
                str(origin).rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS
            ],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=[REQUEST_ID_HEADER],
        )

    app.add_middleware(RequestLogMiddleware)

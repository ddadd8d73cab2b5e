"""
File: inkwell/core/error_code.py
Description: 全局错误码基类与系统级错误定义

定义结构 Tuple(http_status, code, message):
1. http_status: HTTP 响应状态码 (4xx/5xx)
2. code: 字符串业务码 (格式: domain.reason)，只用于日志，不返回给客户端
3. message: 默认的人类可读错误消息，即响应体中的 {"error": ...}

Created: 2026-01-15
"""

from enum import Enum

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class BaseErrorCode(Enum):
    """
    错误码枚举基类
    所有业务领域的错误码 Enum 必须继承此类。
    """

    @property
    def http_status(self) -> int:
        return self.value[0]

    @property
    def code(self) -> str:
        return self.value[1]

    @property
    def msg(self) -> str:
        return self.value[2]


class SystemErrorCode(BaseErrorCode):
    """
    系统通用错误定义 (System Domain)
    """

    INVALID_PARAMS = (HTTP_400_BAD_REQUEST, "system.invalid_params", "Invalid request")

    # 业务字段校验失败 (前端约定为 403)
    VALIDATION_FAILED = (
        HTTP_403_FORBIDDEN,
        "system.validation_failed",
        "Invalid input",
    )

    UNAUTHORIZED = (HTTP_401_UNAUTHORIZED, "system.unauthorized", "No access token")
    INVALID_TOKEN = (
        HTTP_403_FORBIDDEN,
        "system.invalid_token",
        "Access token is invalid",
    )

    NOT_FOUND = (HTTP_404_NOT_FOUND, "system.not_found", "Resource not found")
    CONFLICT = (HTTP_409_CONFLICT, "system.conflict", "Resource already exists")

    INTERNAL_ERROR = (
        HTTP_500_INTERNAL_SERVER_ERROR,
        "system.internal_error",
        "Internal server error",
    )
    DB_ERROR = (
        HTTP_500_INTERNAL_SERVER_ERROR,
        "system.db_error",
        "Database operation failed",
    )
    UPSTREAM_ERROR = (
        HTTP_500_INTERNAL_SERVER_ERROR,
        "system.upstream_error",
        "Upstream service failed",
    )
    PARTIAL_UPDATE = (
        HTTP_500_INTERNAL_SERVER_ERROR,
        "system.partial_update",
        "Secondary update failed",
    )

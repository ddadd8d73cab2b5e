"""
File: inkwell/core/exceptions.py
Description: 业务异常类与全局异常处理器

本模块负责：
1. 业务异常基类（AppException）接受 BaseErrorCode 枚举
2. 按错误语义派生子类 (校验/冲突/鉴权/不存在/上游/部分更新失败)
3. 全局异常处理器统一输出 {"error": message}，并按错误码映射 HTTP 状态

Created: 2025-11-24
Updated: 2026-03-02 (Error taxonomy subclasses, flat error body)
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from inkwell.core.error_code import BaseErrorCode, SystemErrorCode
from inkwell.core.logging import logger
from inkwell.core.response import ErrorResponse
from inkwell.utils.masking import mask_sensitive_data

# ------------------------------------------------------------------------------
# 1. 自定义业务异常类
# ------------------------------------------------------------------------------


class AppException(Exception):
    """
    应用基础异常类。

    用法示例:
        raise AppException(AuthErrorCode.EMAIL_NOT_FOUND)
        raise NotFoundException(BlogErrorCode.BLOG_NOT_FOUND)
        raise UnauthorizedException(message="No access token")
    """

    default_error: BaseErrorCode = SystemErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        error: BaseErrorCode | None = None,
        message: str = "",
        data: Any = None,
    ):
        error = error or self.default_error
        self.error = error
        self.http_status = error.http_status
        self.code = error.code
        self.message = message or error.msg
        self.data = data
        super().__init__(self.message)


class ValidationException(AppException):
    """输入不合法 (调用方可自行修正)"""

    default_error = SystemErrorCode.VALIDATION_FAILED


class ConflictException(AppException):
    """唯一性约束冲突 (邮箱/用户名/slug)"""

    default_error = SystemErrorCode.CONFLICT


class UnauthorizedException(AppException):
    """缺少凭证 (401)"""

    default_error = SystemErrorCode.UNAUTHORIZED


class ForbiddenException(AppException):
    """凭证无效/过期，或密码错误 (403)"""

    default_error = SystemErrorCode.INVALID_TOKEN


class NotFoundException(AppException):
    default_error = SystemErrorCode.NOT_FOUND


class VerificationException(AppException):
    """密码哈希库本身校验失败 (哈希格式无法识别等)，区别于密码不匹配"""

    default_error = SystemErrorCode.INTERNAL_ERROR


class UpstreamException(AppException):
    """对象存储等外部依赖失败"""

    default_error = SystemErrorCode.UPSTREAM_ERROR


class SecondaryUpdateException(AppException):
    """
    主写入已成功，但随后的聚合计数更新失败。
    主写入不会回滚，调用方会收到失败响应。
    """

    default_error = SystemErrorCode.PARTIAL_UPDATE


# ------------------------------------------------------------------------------
# 2. 辅助函数
# ------------------------------------------------------------------------------


def _get_request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def _error_response(status_code: int, message: str) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=status_code,
        content=ErrorResponse.of(message).model_dump(),
    )


# ------------------------------------------------------------------------------
# 3. 全局异常处理器 (Handlers)
# ------------------------------------------------------------------------------


async def app_exception_handler(request: Request, exc: AppException) -> ORJSONResponse:
    """
    处理自定义业务异常 (AppException)
    """
    logger.bind(
        request_id=_get_request_id(request),
        code=exc.code,
        http_status=exc.http_status,
        message=exc.message,
    ).warning("Business exception occurred")

    return _error_response(exc.http_status, exc.message)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> ORJSONResponse:
    """
    处理 Pydantic 请求体校验异常 (类型错误、非法 JSON 等)
    映射目标: HTTP 400 / "<field>: <reason>"
    """
    errors = exc.errors()
    first_error = errors[0] if errors else {}

    loc = first_error.get("loc", [])
    field_name = str(loc[-1]) if loc else "unknown"
    msg = first_error.get("msg", "Invalid parameter")
    readable_message = f"{field_name}: {msg}"

    # errors 中的 input 可能包含明文密码，写日志前先脱敏
    logger.bind(
        request_id=_get_request_id(request),
        detail=readable_message,
        raw_errors=mask_sensitive_data(
            [{k: v for k, v in err.items() if k != "ctx"} for err in errors]
        ),
    ).warning("Request validation failed")

    return _error_response(SystemErrorCode.INVALID_PARAMS.http_status, readable_message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> ORJSONResponse:
    """
    处理框架层面的 HTTP 异常 (404 路由不存在, 405 方法不允许等)
    """
    logger.bind(
        request_id=_get_request_id(request),
        status_code=exc.status_code,
        detail=str(exc.detail),
    ).warning("Framework HTTP exception occurred")

    return _error_response(exc.status_code, str(exc.detail))


async def database_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> ORJSONResponse:
    """
    处理未被 Service 层识别的数据库异常
    """
    logger.opt(exception=exc).bind(request_id=_get_request_id(request)).error(
        "Unhandled database exception occurred"
    )

    return _error_response(
        SystemErrorCode.DB_ERROR.http_status, SystemErrorCode.DB_ERROR.msg
    )


async def general_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """
    最后的防线：屏蔽内部细节，返回通用系统错误 (500)
    """
    logger.opt(exception=exc).bind(request_id=_get_request_id(request)).error(
        "Unhandled system exception occurred"
    )

    return _error_response(
        SystemErrorCode.INTERNAL_ERROR.http_status, SystemErrorCode.INTERNAL_ERROR.msg
    )


# ------------------------------------------------------------------------------
# 4. 异常处理器注册函数
# ------------------------------------------------------------------------------


def register_exception_handlers(app: FastAPI) -> None:
    """
    统一注册所有异常处理器。
    """
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)  # type: ignore
    app.add_exception_handler(Exception, general_exception_handler)

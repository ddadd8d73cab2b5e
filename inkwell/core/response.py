"""
File: inkwell/core/response.py
Description: 错误响应体模型

前端只读取一个人类可读的 error 字段，不暴露结构化错误码：
    {"error": "Email not found"}

成功响应由各领域 schemas 定义各自的形状 (如 {"access_token": ...}, {"blog": {...}})。

Created: 2025-11-24
Updated: 2026-03-02 (Flat error body for the web client)
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    统一失败响应
    """

    error: str = Field(..., description="错误描述")

    @classmethod
    def of(cls, message: str) -> "ErrorResponse":
        return cls(error=message)


class HealthStatus(BaseModel):
    """健康检查响应"""

    status: str = Field(default="ok")

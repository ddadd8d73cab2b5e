"""
File: inkwell/domains/auth/schemas.py
Description: 认证领域 Pydantic 模型 (Schema)

本模块定义了认证相关的输入/输出数据结构：
1. SignupRequest: 注册请求参数
2. SigninRequest: 登录请求参数
3. AuthSession: 注册/登录成功后的统一响应 (Token + 公开资料)

注意：
请求模型只约束类型，字段缺省为空串。业务规则 (长度、格式、强度) 由 AuthService
按固定顺序校验，第一条失败的规则决定返回的错误文案。

Created: 2025-12-05
Updated: 2026-03-02 (Email/password session flow)
"""

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    fullname: str = Field(default="", examples=["Ada L"])
    email: str = Field(default="", examples=["ada@example.com"])
    password: str = Field(default="", examples=["Secret12"])


class SigninRequest(BaseModel):
    email: str = Field(default="", examples=["ada@example.com"])
    password: str = Field(default="")


class AuthSession(BaseModel):
    """
    会话建立响应。

    注册与登录返回完全相同的结构，前端统一视为"已登录"。
    """

    model_config = ConfigDict(from_attributes=True)

    access_token: str = Field(..., description="访问令牌 (JWT)")
    profile_img: str | None = Field(default=None, description="头像 URL")
    username: str = Field(..., description="用户名")
    fullname: str = Field(..., description="用户全名")

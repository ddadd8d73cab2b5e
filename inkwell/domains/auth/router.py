"""
File: inkwell/domains/auth/router.py
Description: 认证领域 HTTP 路由层

本模块定义认证相关的 API 端点：
1. POST /signup: 注册 (返回 Token + 公开资料)
2. POST /signin: 登录 (返回结构与注册一致)

Created: 2025-12-05
Updated: 2026-03-02 (Signup/signin endpoints)
"""

from fastapi import APIRouter

from inkwell.core.response import ErrorResponse
from inkwell.domains.auth.dependencies import AuthServiceDep
from inkwell.domains.auth.schemas import AuthSession, SigninRequest, SignupRequest

router = APIRouter()


@router.post(
    "/signup",
    response_model=AuthSession,
    summary="用户注册",
    description="邮箱密码注册，用户名由邮箱前缀派生，成功后直接返回 Access Token。",
    responses={403: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def signup(data: SignupRequest, service: AuthServiceDep) -> AuthSession:
    return await service.signup(data)


@router.post(
    "/signin",
    response_model=AuthSession,
    summary="用户登录",
    description="邮箱密码登录，成功后返回 Access Token。",
    responses={403: {"model": ErrorResponse}},
)
async def signin(data: SigninRequest, service: AuthServiceDep) -> AuthSession:
    return await service.signin(data)

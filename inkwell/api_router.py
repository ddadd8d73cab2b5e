"""
File: inkwell/api_router.py
Description: 根 API 路由聚合层

本模块负责：
1. 聚合所有业务领域的 Router (auth, blogs, media)
2. 统一设置标签 (Tags) 用于 OpenAPI 文档分组

各领域路由不加前缀：前端按 /signup、/create-blog、/get-upload-url 等根路径调用。

Created: 2025-12-05
Updated: 2026-03-02 (Blogs & media domains)
"""

from fastapi import APIRouter

from inkwell.domains.auth.router import router as auth_router
from inkwell.domains.blogs.router import router as blogs_router
from inkwell.domains.media.router import router as media_router

api_router = APIRouter()

# 1. 认证模块 (Auth Domain)
api_router.include_router(auth_router, tags=["auth"])

# 2. 博客模块 (Blogs Domain)
api_router.include_router(blogs_router, tags=["blogs"])

# 3. 媒体上传模块 (Media Domain)
api_router.include_router(media_router, tags=["media"])

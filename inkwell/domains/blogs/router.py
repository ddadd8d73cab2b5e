"""
File: inkwell/domains/blogs/router.py
Description: 博客领域 HTTP 路由层

本模块定义博客相关的 API 端点：
1. POST /create-blog: 创建博客 (需要 Bearer Token)
2. GET /latest-blogs: 最新的 5 篇公开博客
3. POST /get-blog: 读取博客详情 (阅读数 +1)

Created: 2026-03-02
"""

from fastapi import APIRouter

from inkwell.api.deps import CurrentActor
from inkwell.core.response import ErrorResponse
from inkwell.domains.blogs.dependencies import BlogServiceDep
from inkwell.domains.blogs.schemas import (
    BlogCreateRequest,
    BlogDetailResponse,
    CreateBlogResponse,
    GetBlogRequest,
    LatestBlogsResponse,
)

router = APIRouter()


@router.post(
    "/create-blog",
    response_model=CreateBlogResponse,
    summary="创建博客",
    description="draft=true 时保存为草稿，跳过全部发布校验且不出现在最新列表中。",
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_blog(
    payload: BlogCreateRequest,
    actor: CurrentActor,
    service: BlogServiceDep,
) -> CreateBlogResponse:
    blog_id = await service.publish(actor.id, payload.to_submission())
    return CreateBlogResponse(id=blog_id)


@router.get(
    "/latest-blogs",
    response_model=LatestBlogsResponse,
    summary="最新博客",
)
async def latest_blogs(service: BlogServiceDep) -> LatestBlogsResponse:
    return LatestBlogsResponse(blogs=await service.list_latest())


@router.post(
    "/get-blog",
    response_model=BlogDetailResponse,
    summary="博客详情",
    description="返回的 activity.total_reads 已包含本次阅读。",
    responses={404: {"model": ErrorResponse}},
)
async def get_blog(payload: GetBlogRequest, service: BlogServiceDep) -> BlogDetailResponse:
    return BlogDetailResponse(blog=await service.fetch(payload.blog_id))

"""
File: inkwell/domains/media/router.py
Description: 媒体上传领域 HTTP 路由层

1. GET /get-upload-url: 获取图片上传用的预签名 URL

Created: 2026-03-02
"""

from fastapi import APIRouter

from inkwell.core.response import ErrorResponse
from inkwell.domains.media.dependencies import MediaServiceDep
from inkwell.domains.media.schemas import UploadURLResponse

router = APIRouter()


@router.get(
    "/get-upload-url",
    response_model=UploadURLResponse,
    summary="获取上传地址",
    responses={500: {"model": ErrorResponse}},
)
async def get_upload_url(service: MediaServiceDep) -> UploadURLResponse:
    return UploadURLResponse(uploadURL=await service.issue_upload_url())

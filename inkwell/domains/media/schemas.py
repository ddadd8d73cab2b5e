"""
File: inkwell/domains/media/schemas.py
Description: 媒体上传领域 Pydantic 模型 (Schema)

Created: 2026-03-02
"""

from pydantic import BaseModel, Field


class UploadURLResponse(BaseModel):
    """
    预签名上传地址。客户端直接对该 URL 发起 PUT，Content-Type 必须为 image/jpeg。
    """

    uploadURL: str = Field(..., description="限时有效的预签名 PUT URL")

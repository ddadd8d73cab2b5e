"""
File: inkwell/domains/media/constants.py
Description: 媒体上传领域常量定义
Namespace: media.*

Created: 2026-03-02
"""

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from inkwell.core.error_code import BaseErrorCode


class MediaErrorCode(BaseErrorCode):
    UPLOAD_URL_FAILED = (
        HTTP_500_INTERNAL_SERVER_ERROR,
        "media.upload_url_failed",
        "Failed to generate upload URL",
    )

"""
File: inkwell/domains/media/service.py
Description: 媒体上传领域服务 (Upload URL Issuer)

生成唯一对象 Key，向对象存储申请限时、限定 Content-Type 的写入 URL 并原样返回。
无本地状态；存储侧的任何失败都转换为 UpstreamException。

Created: 2026-03-02
"""

from botocore.exceptions import BotoCoreError, ClientError

from inkwell.core.config import settings
from inkwell.core.exceptions import UpstreamException
from inkwell.core.logging import logger
from inkwell.core.storage import ObjectStorage
from inkwell.domains.media.constants import MediaErrorCode
from inkwell.utils.identifiers import generate_upload_key


class MediaService:
    def __init__(self, storage: ObjectStorage):
        self.storage = storage

    async def issue_upload_url(self) -> str:
        """
        Raises:
            UpstreamException: 凭证缺失、签名失败等存储侧错误 (500)
        """
        key = generate_upload_key()
        try:
            url = await self.storage.generate_upload_url(
                key,
                content_type=settings.UPLOAD_CONTENT_TYPE,
                expires_in=settings.UPLOAD_URL_EXPIRE_SECONDS,
            )
        except (BotoCoreError, ClientError) as exc:
            logger.bind(key=key, reason=str(exc)).error("Failed to issue upload URL")
            raise UpstreamException(MediaErrorCode.UPLOAD_URL_FAILED) from exc

        logger.bind(key=key).debug("Upload URL issued")
        return url

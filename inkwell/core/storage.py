"""
File: inkwell/core/storage.py
Description: 对象存储客户端管理 (S3, aioboto3)

本模块负责：
1. 创建全局 aioboto3 Session (凭证来自配置，留空时走 AWS 默认凭证链)
2. 封装预签名 PUT URL 的生成 (限定 Content-Type 与有效期)
3. 提供依赖注入所需的生成器，测试时可 override 为假实现

注意：
aioboto3 的 client 是异步上下文管理器，每次调用按需创建，
凭证与签名计算均在本地完成，不会向存储服务发起网络请求。

Created: 2026-03-02
"""

from collections.abc import AsyncGenerator

import aioboto3
from botocore.config import Config

from inkwell.core.config import settings


class ObjectStorage:
    """
    S3 兼容对象存储的最小封装。
    """

    def __init__(
        self,
        session: aioboto3.Session,
        bucket: str,
        region: str,
        endpoint_url: str | None = None,
    ):
        self.session = session
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url

    async def generate_upload_url(
        self, key: str, content_type: str, expires_in: int
    ) -> str:
        """
        生成一次性写入 (PUT) 的预签名 URL。

        Raises:
            botocore.exceptions.BotoCoreError / ClientError: 凭证缺失或签名失败
        """
        async with self.session.client(
            "s3",
            region_name=self.region,
            endpoint_url=self.endpoint_url,
            config=Config(signature_version="s3v4"),
        ) as s3:
            return await s3.generate_presigned_url(
                "put_object",
                Params={
                    "Bucket": self.bucket,
                    "Key": key,
                    "ContentType": content_type,
                },
                ExpiresIn=expires_in,
            )


object_storage = ObjectStorage(
    session=aioboto3.Session(
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        region_name=settings.AWS_REGION,
    ),
    bucket=settings.S3_BUCKET_NAME,
    region=settings.AWS_REGION,
    endpoint_url=settings.AWS_S3_ENDPOINT_URL,
)


async def get_object_storage() -> AsyncGenerator[ObjectStorage, None]:
    """
    获取对象存储依赖。

    全局单例封装为依赖，便于在测试中 override。
    """
    yield object_storage

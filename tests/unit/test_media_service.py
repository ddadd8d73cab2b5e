"""
File: tests/unit/test_media_service.py
Description: 上传地址签发服务单元测试

预签名在本地完成，使用假凭证即可生成 URL，不访问网络。

Created: 2026-03-02
"""

import re
from urllib.parse import parse_qs, urlparse

import aioboto3
import pytest
from botocore.exceptions import NoCredentialsError

from inkwell.core.config import settings
from inkwell.core.exceptions import UpstreamException
from inkwell.core.storage import ObjectStorage
from inkwell.domains.media.service import MediaService


class BrokenStorage:
    async def generate_upload_url(
        self, key: str, content_type: str, expires_in: int
    ) -> str:
        raise NoCredentialsError()


@pytest.fixture
def storage() -> ObjectStorage:
    session = aioboto3.Session(
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name="ap-south-1",
    )
    return ObjectStorage(session=session, bucket="inkwell-test", region="ap-south-1")


@pytest.mark.asyncio
async def test_issue_upload_url_presigns_put(storage: ObjectStorage) -> None:
    url = await MediaService(storage).issue_upload_url()

    parsed = urlparse(url)
    query = parse_qs(parsed.query)

    assert "inkwell-test" in url
    assert re.search(r"/[a-z0-9]{21}-\d+\.jpeg$", parsed.path)
    assert query["X-Amz-Expires"] == [str(settings.UPLOAD_URL_EXPIRE_SECONDS)]
    assert "X-Amz-Signature" in query


@pytest.mark.asyncio
async def test_issue_upload_url_uses_distinct_keys(storage: ObjectStorage) -> None:
    service = MediaService(storage)

    first = await service.issue_upload_url()
    second = await service.issue_upload_url()

    assert urlparse(first).path != urlparse(second).path


@pytest.mark.asyncio
async def test_storage_failure_becomes_upstream_error() -> None:
    service = MediaService(BrokenStorage())  # type: ignore[arg-type]

    with pytest.raises(UpstreamException) as exc_info:
        await service.issue_upload_url()

    assert exc_info.value.http_status == 500
    assert exc_info.value.message == "Failed to generate upload URL"

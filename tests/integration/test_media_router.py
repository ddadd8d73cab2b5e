"""
File: tests/integration/test_media_router.py
Description: 上传地址接口集成测试 (对象存储已替换为假实现)

Created: 2026-03-02
"""

import pytest
from botocore.exceptions import EndpointConnectionError
from httpx import AsyncClient

from inkwell.core.config import settings


@pytest.mark.asyncio
async def test_get_upload_url(client: AsyncClient, fake_storage) -> None:
    response = await client.get("/get-upload-url")

    assert response.status_code == 200
    url = response.json()["uploadURL"]
    assert url.startswith("https://uploads.test/")

    assert len(fake_storage.calls) == 1
    call = fake_storage.calls[0]
    assert call["key"].endswith(".jpeg")
    assert call["content_type"] == settings.UPLOAD_CONTENT_TYPE
    assert call["expires_in"] == settings.UPLOAD_URL_EXPIRE_SECONDS


@pytest.mark.asyncio
async def test_get_upload_url_storage_failure(
    client: AsyncClient, fake_storage, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def unreachable(key: str, content_type: str, expires_in: int) -> str:
        raise EndpointConnectionError(endpoint_url="https://s3.invalid")

    monkeypatch.setattr(fake_storage, "generate_upload_url", unreachable)

    response = await client.get("/get-upload-url")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate upload URL"}

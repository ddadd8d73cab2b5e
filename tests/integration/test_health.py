"""
File: tests/integration/test_health.py
Description: 健康检查接口集成测试

Created: 2025-11-26
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """
    测试：GET /health
    验证：
    1. 状态码 200，返回 {"status": "ok"}
    2. 中间件仍然生效：响应头中存在 X-Request-ID
    """
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

    request_id_header = response.headers.get("X-Request-ID")
    assert request_id_header


@pytest.mark.asyncio
async def test_inbound_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "trace-abc-123"})

    assert response.headers.get("X-Request-ID") == "trace-abc-123"


@pytest.mark.asyncio
async def test_unknown_route_uses_error_body(client: AsyncClient) -> None:
    response = await client.get("/no-such-route")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}

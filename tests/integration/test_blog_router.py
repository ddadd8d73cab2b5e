"""
File: tests/integration/test_blog_router.py
Description: 博客领域 HTTP 接口集成测试

验证：
1. 完整流程：注册 → 登录 → 创建博客 → 读取详情 (阅读数 1)
2. Auth Gate：缺少 Token 401，无效 Token 403
3. 最新列表排除草稿
4. 发布校验失败 403，未知博客 404

Created: 2026-03-02
"""

import re
import uuid

import pytest
from httpx import AsyncClient

from inkwell.core.security import create_access_token

ADA = {"fullname": "Ada L", "email": "ada@x.com", "password": "Secret12"}

HELLO_WORLD = {
    "title": "Hello World",
    "des": "d",
    "banner": "b",
    "tags": ["x"],
    "content": {"blocks": [{}]},
    "draft": False,
}


async def signup_token(client: AsyncClient, payload: dict[str, str] = ADA) -> str:
    response = await client.post("/signup", json=payload)
    assert response.status_code == 200
    return response.json()["access_token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_end_to_end_publish_and_read(client: AsyncClient) -> None:
    await signup_token(client)

    signin = await client.post(
        "/signin", json={"email": ADA["email"], "password": ADA["password"]}
    )
    assert signin.status_code == 200
    token = signin.json()["access_token"]

    created = await client.post("/create-blog", json=HELLO_WORLD, headers=bearer(token))
    assert created.status_code == 200
    blog_id = created.json()["id"]
    assert re.fullmatch(r"hello-world[a-z0-9]+", blog_id)

    fetched = await client.post("/get-blog", json={"blog_id": blog_id})
    assert fetched.status_code == 200
    blog = fetched.json()["blog"]

    assert blog["blog_id"] == blog_id
    assert blog["activity"]["total_reads"] == 1
    assert blog["title"] == "Hello World"
    assert blog["tags"] == ["x"]
    assert blog["content"] == {"blocks": [{}]}
    assert "publishedAt" in blog
    assert blog["author"] == {
        "personal_info": {"fullname": "Ada L", "username": "ada", "profile_img": None}
    }

    again = await client.post("/get-blog", json={"blog_id": blog_id})
    assert again.json()["blog"]["activity"]["total_reads"] == 2


@pytest.mark.asyncio
async def test_create_blog_without_token(client: AsyncClient) -> None:
    response = await client.post("/create-blog", json=HELLO_WORLD)

    assert response.status_code == 401
    assert response.json() == {"error": "No access token"}


@pytest.mark.asyncio
async def test_create_blog_with_non_bearer_scheme(client: AsyncClient) -> None:
    response = await client.post(
        "/create-blog", json=HELLO_WORLD, headers={"Authorization": "Basic abc"}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_blog_with_invalid_token(client: AsyncClient) -> None:
    response = await client.post(
        "/create-blog", json=HELLO_WORLD, headers=bearer("not-a-valid-token")
    )

    assert response.status_code == 403
    assert response.json() == {"error": "Access token is invalid"}


@pytest.mark.asyncio
async def test_create_blog_with_non_uuid_subject(client: AsyncClient) -> None:
    token = create_access_token(subject="not-a-uuid")

    response = await client.post("/create-blog", json=HELLO_WORLD, headers=bearer(token))

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_blog_for_deleted_author(client: AsyncClient) -> None:
    token = create_access_token(subject=uuid.uuid4())

    response = await client.post("/create-blog", json=HELLO_WORLD, headers=bearer(token))

    assert response.status_code == 403
    assert response.json() == {"error": "Access token is invalid"}


@pytest.mark.asyncio
async def test_create_blog_validation_error(client: AsyncClient) -> None:
    token = await signup_token(client)

    response = await client.post(
        "/create-blog", json={**HELLO_WORLD, "tags": []}, headers=bearer(token)
    )

    assert response.status_code == 403
    assert response.json() == {
        "error": "Provide tags in order to publish the blog, max limit is 30 !"
    }


@pytest.mark.asyncio
async def test_latest_blogs_excludes_drafts(client: AsyncClient) -> None:
    token = await signup_token(client)

    published = await client.post("/create-blog", json=HELLO_WORLD, headers=bearer(token))
    draft = await client.post(
        "/create-blog",
        json={"title": "", "tags": [], "content": {"blocks": []}, "draft": True},
        headers=bearer(token),
    )
    assert draft.status_code == 200

    response = await client.get("/latest-blogs")

    assert response.status_code == 200
    blogs = response.json()["blogs"]
    assert [blog["blog_id"] for blog in blogs] == [published.json()["id"]]
    assert set(blogs[0]) == {
        "blog_id",
        "title",
        "des",
        "banner",
        "activity",
        "tags",
        "publishedAt",
        "author",
    }


@pytest.mark.asyncio
async def test_get_unknown_blog(client: AsyncClient) -> None:
    response = await client.post("/get-blog", json={"blog_id": "missing"})

    assert response.status_code == 404
    assert response.json() == {"error": "Blog not found"}

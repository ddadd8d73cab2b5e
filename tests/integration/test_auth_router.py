"""
File: tests/integration/test_auth_router.py
Description: 认证领域 HTTP 接口集成测试

验证：
1. /signup、/signin 成功响应结构一致
2. 业务校验失败 → 403 {"error": ...}
3. 邮箱重复 → 409
4. 请求体类型错误 → 400 "<field>: <reason>"

Created: 2025-11-26
Updated: 2026-03-02 (Signup/signin endpoints)
"""

import pytest
from httpx import AsyncClient

SESSION_KEYS = {"access_token", "profile_img", "username", "fullname"}

ADA = {"fullname": "Ada L", "email": "ada@x.com", "password": "Secret12"}


@pytest.mark.asyncio
async def test_signup_and_signin(client: AsyncClient) -> None:
    signup = await client.post("/signup", json=ADA)

    assert signup.status_code == 200
    body = signup.json()
    assert set(body) == SESSION_KEYS
    assert body["username"] == "ada"
    assert body["fullname"] == "Ada L"
    assert body["access_token"]
    assert "password" not in body
    assert "email" not in body

    signin = await client.post(
        "/signin", json={"email": ADA["email"], "password": ADA["password"]}
    )

    assert signin.status_code == 200
    assert set(signin.json()) == SESSION_KEYS
    assert signin.json()["username"] == "ada"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({**ADA, "fullname": "Al"}, "Fullname must be at least 3 letters long"),
        ({**ADA, "email": ""}, "Enter email"),
        ({"fullname": "Ada L", "password": "Secret12"}, "Enter email"),
        ({**ADA, "email": "ada-at-x.com"}, "Invalid email"),
        (
            {**ADA, "password": "secret"},
            "Password must be 6 to 20 characters long with at least 1 numeric, "
            "1 lowercase and 1 uppercase letter.",
        ),
    ],
)
async def test_signup_validation_errors(
    client: AsyncClient, payload: dict[str, str], message: str
) -> None:
    response = await client.post("/signup", json=payload)

    assert response.status_code == 403
    assert response.json() == {"error": message}


@pytest.mark.asyncio
async def test_signup_duplicate_email(client: AsyncClient) -> None:
    assert (await client.post("/signup", json=ADA)).status_code == 200

    response = await client.post("/signup", json={**ADA, "fullname": "Other Ada"})

    assert response.status_code == 409
    assert response.json() == {"error": "Email already exists !"}


@pytest.mark.asyncio
async def test_signup_rejects_email_with_trailing_newline(client: AsyncClient) -> None:
    assert (await client.post("/signup", json=ADA)).status_code == 200

    response = await client.post("/signup", json={**ADA, "email": "ada@x.com\n"})

    assert response.status_code == 403
    assert response.json() == {"error": "Invalid email"}


@pytest.mark.asyncio
async def test_signup_wrong_field_type(client: AsyncClient) -> None:
    response = await client.post("/signup", json={**ADA, "fullname": ["Ada"]})

    assert response.status_code == 400
    assert response.json()["error"].startswith("fullname: ")


@pytest.mark.asyncio
async def test_signin_unknown_email(client: AsyncClient) -> None:
    response = await client.post(
        "/signin", json={"email": "ghost@x.com", "password": "Secret12"}
    )

    assert response.status_code == 403
    assert response.json() == {"error": "Email not found"}


@pytest.mark.asyncio
async def test_signin_wrong_password(client: AsyncClient) -> None:
    await client.post("/signup", json=ADA)

    response = await client.post(
        "/signin", json={"email": ADA["email"], "password": "Secret13"}
    )

    assert response.status_code == 403
    assert response.json() == {"error": "Incorrect password"}

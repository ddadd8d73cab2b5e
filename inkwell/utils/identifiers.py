"""
File: inkwell/utils/identifiers.py
Description: 标识符生成工具

1. random_token: 密码学安全的随机串 (小写字母 + 数字，URL 安全)
2. slugify_title / generate_blog_id: 由标题派生博客 slug，并追加随机后缀
3. derive_username / disambiguate_username: 由邮箱派生用户名，冲突时追加短后缀
4. generate_upload_key: 对象存储上传 Key (随机串 + 毫秒时间戳 + 固定扩展名)

Created: 2026-03-02
"""

import re
import secrets
import string
from datetime import UTC, datetime

TOKEN_ALPHABET = string.ascii_lowercase + string.digits

# 36^16 ≈ 7.9e24，碰撞概率可忽略
BLOG_ID_SUFFIX_LENGTH = 16
USERNAME_SUFFIX_LENGTH = 5
UPLOAD_KEY_TOKEN_LENGTH = 21
UPLOAD_KEY_EXTENSION = ".jpeg"

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_WHITESPACE_RUN = re.compile(r"\s+")


def random_token(length: int) -> str:
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


def slugify_title(title: str) -> str:
    """
    非字母数字字符替换为空格，连续空白折叠为单个 "-"，统一小写。

    示例: "Hello, World!" -> "hello-world"
    """
    cleaned = _NON_ALNUM.sub(" ", title).strip()
    return _WHITESPACE_RUN.sub("-", cleaned).lower()


def generate_blog_id(title: str) -> str:
    """
    标题 slug + 随机后缀。标题为空 (草稿) 时只有随机后缀。
    """
    return slugify_title(title) + random_token(BLOG_ID_SUFFIX_LENGTH)


def derive_username(email: str) -> str:
    """取邮箱 @ 之前的部分"""
    return email.split("@", 1)[0]


def disambiguate_username(username: str) -> str:
    return username + random_token(USERNAME_SUFFIX_LENGTH)


def generate_upload_key(now: datetime | None = None) -> str:
    """
    示例: "k3j9x...-1767225600000.jpeg"
    """
    moment = now or datetime.now(UTC)
    timestamp_ms = int(moment.timestamp() * 1000)
    return f"{random_token(UPLOAD_KEY_TOKEN_LENGTH)}-{timestamp_ms}{UPLOAD_KEY_EXTENSION}"

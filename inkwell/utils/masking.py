"""
File: inkwell/utils/masking.py
Description: PII 数据脱敏工具 (Data Masking)

用于日志记录时的隐私保护，确保日志中不出现明文密码、Token、完整邮箱。

1. mask_email: 邮箱脱敏，用于注册/登录日志
2. mask_sensitive_data: 递归遍历字典/列表，掩盖敏感 Key (password, token ...)，
   用于请求体校验失败时记录原始错误

Created: 2025-11-26
"""

from typing import Any

# 敏感字段黑名单 (大小写不敏感)
SENSITIVE_KEYS = {
    "password",
    "password_hash",
    "secret",
    "token",
    "access_token",
    "authorization",
    "api_key",
    "aws_secret_access_key",
}

MASK = "******"


def mask_email(email: str | None) -> str:
    """
    邮箱脱敏，保留用户名首位和域名。
    示例: ada@example.com -> a***@example.com
    """
    if not email or "@" not in email:
        return MASK

    user_part, domain_part = email.split("@", 1)
    masked_user = f"{user_part[0]}***" if len(user_part) > 1 else "****"
    return f"{masked_user}@{domain_part}"


def mask_secret(value: Any) -> str:
    if value is None:
        return ""
    return MASK


def mask_sensitive_data(data: Any) -> Any:
    """
    递归脱敏，返回新的副本，不修改原数据。

    pydantic 校验错误的 loc 中，敏感字段名出现在路径里 (如 ("body", "password"))，
    此时同级的 input 一并掩盖。
    """
    if isinstance(data, dict):
        loc = data.get("loc")
        loc_is_sensitive = isinstance(loc, (list, tuple)) and any(
            isinstance(part, str) and part.lower() in SENSITIVE_KEYS for part in loc
        )

        masked: dict[Any, Any] = {}
        for key, value in data.items():
            if isinstance(key, str) and key.lower() in SENSITIVE_KEYS:
                masked[key] = mask_secret(value)
            elif loc_is_sensitive and key == "input":
                masked[key] = mask_secret(value)
            else:
                masked[key] = mask_sensitive_data(value)
        return masked

    if isinstance(data, list):
        return [mask_sensitive_data(item) for item in data]

    if isinstance(data, tuple):
        return tuple(mask_sensitive_data(item) for item in data)

    return data

"""
File: tests/unit/test_masking.py
Description: 日志脱敏工具单元测试

Created: 2026-03-02
"""

from inkwell.utils.masking import MASK, mask_email, mask_sensitive_data


def test_mask_email_keeps_first_letter_and_domain() -> None:
    assert mask_email("ada@example.com") == "a***@example.com"
    assert mask_email("a@example.com") == "****@example.com"
    assert mask_email("not-an-email") == MASK
    assert mask_email(None) == MASK


def test_mask_sensitive_keys_recursively() -> None:
    data = {
        "email": "ada@x.com",
        "password": "Secret12",
        "nested": [{"access_token": "abc.def.ghi", "title": "ok"}],
    }

    masked = mask_sensitive_data(data)

    assert masked["email"] == "ada@x.com"
    assert masked["password"] == MASK
    assert masked["nested"][0]["access_token"] == MASK
    assert masked["nested"][0]["title"] == "ok"
    # 原数据不被修改
    assert data["password"] == "Secret12"


def test_mask_validation_error_input_for_sensitive_loc() -> None:
    errors = [
        {"loc": ("body", "password"), "msg": "Input should be a valid string", "input": 123456},
        {"loc": ("body", "fullname"), "msg": "Input should be a valid string", "input": ["x"]},
    ]

    masked = mask_sensitive_data(errors)

    assert masked[0]["input"] == MASK
    assert masked[1]["input"] == ["x"]

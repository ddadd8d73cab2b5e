"""
File: inkwell/domains/auth/constants.py
Description: 认证领域常量定义 (错误码 + 校验规则)
Namespace: auth.*

1. Error 定义: 继承 BaseErrorCode，包含 (HTTP状态, 业务码, 默认文案)
2. 校验规则: 邮箱/密码正则与姓名长度限制，注册时按顺序检查

Created: 2026-01-15
Updated: 2026-03-02 (Signup/signin rules for the web client)
"""

import re

from starlette.status import HTTP_403_FORBIDDEN, HTTP_409_CONFLICT

from inkwell.core.error_code import BaseErrorCode

# ==============================================================================
# 1. 校验规则 (Validation Rules)
# ==============================================================================

FULLNAME_MIN_LENGTH = 3
FULLNAME_MAX_LENGTH = 80

# 以下两条规则须配合 fullmatch 使用 (不接受结尾换行)；\w 限定为 ASCII
EMAIL_PATTERN = re.compile(r"\w+([\.-]?\w+)*@\w+([\.-]?\w+)*(\.\w{2,3})+", re.ASCII)

# 6-20 位，至少包含 1 个数字、1 个小写字母、1 个大写字母
PASSWORD_PATTERN = re.compile(r"(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{6,20}", re.ASCII)

# 用户名冲突时的最大重试次数 (含首次写入)
MAX_USERNAME_ATTEMPTS = 3


# ==============================================================================
# 2. 错误码定义 (Error Codes)
# 用于 Service 层抛出异常: raise ValidationException(AuthErrorCode.EMAIL_INVALID)
# ==============================================================================


class AuthErrorCode(BaseErrorCode):
    """
    认证领域错误定义
    Tuple Structure: (HTTP_Status, Code_String, Default_Message)
    """

    # HTTP 403: 输入校验失败
    FULLNAME_TOO_SHORT = (
        HTTP_403_FORBIDDEN,
        "auth.fullname_too_short",
        "Fullname must be at least 3 letters long",
    )
    FULLNAME_TOO_LONG = (
        HTTP_403_FORBIDDEN,
        "auth.fullname_too_long",
        "Fullname must be at most 80 letters long",
    )
    EMAIL_REQUIRED = (HTTP_403_FORBIDDEN, "auth.email_required", "Enter email")
    EMAIL_INVALID = (HTTP_403_FORBIDDEN, "auth.email_invalid", "Invalid email")
    PASSWORD_WEAK = (
        HTTP_403_FORBIDDEN,
        "auth.password_weak",
        "Password must be 6 to 20 characters long with at least 1 numeric, "
        "1 lowercase and 1 uppercase letter.",
    )

    # HTTP 409: 唯一性冲突
    EMAIL_EXIST = (HTTP_409_CONFLICT, "auth.email_exist", "Email already exists !")
    USERNAME_EXHAUSTED = (
        HTTP_409_CONFLICT,
        "auth.username_exhausted",
        "Could not allocate a unique username, please try again",
    )

    # HTTP 403: 登录失败
    EMAIL_NOT_FOUND = (HTTP_403_FORBIDDEN, "auth.email_not_found", "Email not found")
    PASSWORD_INCORRECT = (
        HTTP_403_FORBIDDEN,
        "auth.password_incorrect",
        "Incorrect password",
    )
    VERIFICATION_FAILED = (
        HTTP_403_FORBIDDEN,
        "auth.verification_failed",
        "Error occurred while logging in, please try again",
    )

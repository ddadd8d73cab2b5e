"""
File: inkwell/domains/auth/service.py
Description: 认证领域服务 (Identity Manager)

本模块封装认证核心业务逻辑：
1. 注册: 按顺序校验输入 → 哈希密码 → 由邮箱派生唯一用户名 → 写入用户 → 签发 Token
2. 登录: 按邮箱查找用户 → 校验密码 → 签发 Token
3. 依赖注入: 依赖 UserRepository (Credential Store)

注意：
- 用户名预检查 (username_exists) 只是优化，唯一性以数据库约束为准；
  写入时发生用户名冲突会重新生成后缀并重试，最多 MAX_USERNAME_ATTEMPTS 次。
- 邮箱冲突不重试，直接抛出 ConflictException。

Created: 2025-12-05
Updated: 2026-03-02 (Email signup with derived usernames)
"""

from sqlalchemy.exc import IntegrityError

from inkwell.core.exceptions import (
    ConflictException,
    ForbiddenException,
    NotFoundException,
    ValidationException,
    VerificationException,
)
from inkwell.core.logging import logger
from inkwell.core.security import (
    PasswordVerificationError,
    create_access_token,
    get_password_hash_async,
    verify_password_async,
)
from inkwell.db.models.user import User
from inkwell.domains.auth.constants import (
    EMAIL_PATTERN,
    FULLNAME_MAX_LENGTH,
    FULLNAME_MIN_LENGTH,
    MAX_USERNAME_ATTEMPTS,
    PASSWORD_PATTERN,
    AuthErrorCode,
)
from inkwell.domains.auth.schemas import AuthSession, SigninRequest, SignupRequest
from inkwell.domains.users.repository import UserRepository
from inkwell.utils.identifiers import derive_username, disambiguate_username
from inkwell.utils.masking import mask_email


def validate_signup(data: SignupRequest) -> None:
    """
    注册参数校验，按顺序检查，第一条失败的规则生效。

    Raises:
        ValidationException: 姓名过短/过长、邮箱为空/格式错误、密码强度不足
    """
    if len(data.fullname) < FULLNAME_MIN_LENGTH:
        raise ValidationException(AuthErrorCode.FULLNAME_TOO_SHORT)
    if len(data.fullname) > FULLNAME_MAX_LENGTH:
        raise ValidationException(AuthErrorCode.FULLNAME_TOO_LONG)
    if not data.email:
        raise ValidationException(AuthErrorCode.EMAIL_REQUIRED)
    if not EMAIL_PATTERN.fullmatch(data.email):
        raise ValidationException(AuthErrorCode.EMAIL_INVALID)
    if not PASSWORD_PATTERN.fullmatch(data.password):
        raise ValidationException(AuthErrorCode.PASSWORD_WEAK)


class AuthService:
    """
    认证服务类。
    """

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def signup(self, data: SignupRequest) -> AuthSession:
        """
        用户注册流程。

        流程:
        1. 参数校验 (不访问数据库)
        2. 哈希密码 (线程池)
        3. 派生用户名，已存在时追加随机后缀
        4. 写入并提交；唯一约束冲突时区分邮箱/用户名处理
        5. 签发 Token
        """
        validate_signup(data)

        password_hash = await get_password_hash_async(data.password)

        base_username = derive_username(data.email)
        username = base_username
        if await self.user_repo.username_exists(username):
            username = disambiguate_username(base_username)

        session = self.user_repo.session
        for attempt in range(1, MAX_USERNAME_ATTEMPTS + 1):
            user = User(
                fullname=data.fullname,
                email=data.email,
                username=username,
                password_hash=password_hash,
            )
            try:
                await self.user_repo.add(user)
                await session.commit()
            except IntegrityError:
                await session.rollback()

                if await self.user_repo.email_exists(data.email):
                    raise ConflictException(AuthErrorCode.EMAIL_EXIST) from None

                logger.bind(username=username, attempt=attempt).warning(
                    "Username collision on insert, regenerating"
                )
                username = disambiguate_username(base_username)
                continue

            logger.bind(
                user_id=str(user.id),
                email=mask_email(user.email),
                username=user.username,
            ).info("User created successfully")
            return self._issue_session(user)

        raise ConflictException(AuthErrorCode.USERNAME_EXHAUSTED)

    async def signin(self, data: SigninRequest) -> AuthSession:
        """
        用户登录流程。

        Raises:
            NotFoundException: 邮箱未注册 (403)
            VerificationException: 存储的哈希无法校验 (403)
            ForbiddenException: 密码错误 (403)
        """
        user = await self.user_repo.get_by_email(data.email)
        if not user:
            raise NotFoundException(AuthErrorCode.EMAIL_NOT_FOUND)

        try:
            matched = await verify_password_async(data.password, user.password_hash)
        except PasswordVerificationError:
            logger.bind(user_id=str(user.id)).error("Stored password hash is unusable")
            raise VerificationException(AuthErrorCode.VERIFICATION_FAILED) from None

        if not matched:
            raise ForbiddenException(AuthErrorCode.PASSWORD_INCORRECT)

        logger.bind(user_id=str(user.id), email=mask_email(user.email)).info(
            "User signed in"
        )
        return self._issue_session(user)

    @staticmethod
    def _issue_session(user: User) -> AuthSession:
        """
        [内部方法] 签发 Access Token 并组装公开资料。
        """
        return AuthSession(
            access_token=create_access_token(subject=user.id),
            profile_img=user.profile_img,
            username=user.username,
            fullname=user.fullname,
        )

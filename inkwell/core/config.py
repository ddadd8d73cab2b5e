"""
File: inkwell/core/config.py
Description: 全局应用配置管理（使用 pydantic-settings）

所有配置值通过环境变量或 .env 文件加载。
本模块负责：
1. 校验环境变量类型
2. 解析复杂类型（如 CORS 列表）
3. 组装数据库 DSN（默认 postgresql+asyncpg，本地/测试可直接给 sqlite+aiosqlite）
4. 定义 JWT 安全参数与对象存储 (S3) 参数
5. 运行时强制校验必填项，确保应用在配置缺失时快速失败

Created: 2025-11-24
Updated: 2026-03-02 (Add S3 upload settings)
"""

from typing import Literal

from pydantic import AnyHttpUrl, model_validator
from pydantic_core import MultiHostUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """全局配置对象（唯一真实来源）"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=True,
    )

    # --------------------------------------------------------------------------
    # 1. General (通用)
    # --------------------------------------------------------------------------
    PROJECT_NAME: str = "Inkwell API"
    # 公开接口直接挂在根路径 (/signup, /get-blog ...)，前端按此约定调用
    API_PREFIX: str = ""
    ENVIRONMENT: Literal["local", "dev", "prod"] = "local"
    DEBUG: bool = False

    # JWT 签名密钥 (生产环境强制要求高强度随机串)
    SECRET_KEY: str | None = None

    BACKEND_CORS_ORIGINS: list[AnyHttpUrl] = []

    # --------------------------------------------------------------------------
    # 2. Database (PostgreSQL)
    # --------------------------------------------------------------------------
    POSTGRES_SERVER: str | None = None
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str | None = None
    POSTGRES_PASSWORD: str | None = None
    POSTGRES_DB: str | None = None

    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_PRE_PING: bool = True
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800

    # 完整 DSN 覆盖（可选，优先级最高）
    SQLALCHEMY_DATABASE_URI: str | None = None

    # --------------------------------------------------------------------------
    # 3. Logging (Loguru)
    # --------------------------------------------------------------------------
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_JSON_FORMAT: bool = False
    LOG_FILE_ENABLED: bool = False
    LOG_DIR: str = "logs"
    LOG_ROTATION: str = "1 day"
    LOG_RETENTION: str = "7 days"
    LOG_COMPRESSION: str = "zip"
    LOG_DIAGNOSE: bool = True  # 生产环境建议 False，避免变量值进入日志

    # --------------------------------------------------------------------------
    # 4. Security & Authentication (JWT)
    # --------------------------------------------------------------------------
    # Access Token 有效期 (分钟)，无刷新令牌，默认 7 天
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    ALGORITHM: str = "HS256"

    # --------------------------------------------------------------------------
    # 5. Object Storage (S3 预签名上传)
    # --------------------------------------------------------------------------
    AWS_REGION: str = "ap-south-1"
    AWS_ACCESS_KEY_ID: str | None = None
    AWS_SECRET_ACCESS_KEY: str | None = None
    # 兼容 MinIO 等 S3 协议存储，留空则使用 AWS 官方端点
    AWS_S3_ENDPOINT_URL: str | None = None
    S3_BUCKET_NAME: str = "inkwell-uploads"
    UPLOAD_URL_EXPIRE_SECONDS: int = 1000
    UPLOAD_CONTENT_TYPE: str = "image/jpeg"

    # --------------------------------------------------------------------------
    # Properties (便捷属性)
    # --------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """是否为生产环境"""
        return self.ENVIRONMENT == "prod"

    @property
    def is_sqlite(self) -> bool:
        """当前 DSN 是否为 SQLite (本地开发/测试)"""
        return str(self.SQLALCHEMY_DATABASE_URI).startswith("sqlite")

    # --------------------------------------------------------------------------
    # Validators
    # --------------------------------------------------------------------------
    @model_validator(mode="after")
    def _validate_and_build_db_uri(self) -> "Settings":
        """验证必填项并构建数据库连接串。"""
        if not self.SECRET_KEY:
            raise ValueError("SECRET_KEY must be set in the environment or .env")

        if self.is_production and len(self.SECRET_KEY) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters in prod")

        if self.UPLOAD_URL_EXPIRE_SECONDS <= 0:
            raise ValueError("UPLOAD_URL_EXPIRE_SECONDS must be positive")

        if self.SQLALCHEMY_DATABASE_URI:
            return self

        missing_fields = [
            field
            for field in (
                "POSTGRES_SERVER",
                "POSTGRES_USER",
                "POSTGRES_PASSWORD",
                "POSTGRES_DB",
            )
            if not getattr(self, field)
        ]
        if missing_fields:
            raise ValueError(
                f"Cannot build database DSN, missing: {', '.join(missing_fields)}"
            )

        self.SQLALCHEMY_DATABASE_URI = str(
            MultiHostUrl.build(
                scheme="postgresql+asyncpg",
                username=self.POSTGRES_USER,  # type: ignore[arg-type]
                password=self.POSTGRES_PASSWORD,  # type: ignore[arg-type]
                host=self.POSTGRES_SERVER,  # type: ignore[arg-type]
                port=self.POSTGRES_PORT,
                path=self.POSTGRES_DB,  # type: ignore[arg-type]
            )
        )

        return self


# 单例配置对象
settings = Settings()

"""
File: inkwell/core/logging.py
Description: 全局日志配置模块 (Loguru)

本模块负责：
1. 拦截标准库 logging (Uvicorn / SQLAlchemy / botocore)，统一转发到 Loguru
2. 配置输出格式（开发环境彩色文本，生产环境 JSON）
3. 可选的文件 Sink：轮转 (Rotation) 与保留 (Retention)
4. 日志行自动带上 request_id（由 RequestLogMiddleware 通过 contextualize 注入）

Created: 2025-11-24
Updated: 2026-03-02 (Quiet botocore / sqlalchemy loggers)
"""

import logging
import sys
from pathlib import Path
from typing import Any

from loguru import logger

from inkwell.core.config import settings

# 第三方库中噪音较大的 logger，最低只放行 WARNING
NOISY_LOGGERS: tuple[str, ...] = (
    "botocore",
    "aiobotocore",
    "boto3",
    "urllib3",
    "sqlalchemy.engine",
)


class InterceptHandler(logging.Handler):
    """
    将标准库 logging 记录转发到 Loguru 的 Handler。
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # 回溯到真正的调用方栈帧，保证日志中的行号正确
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            if frame.f_back:
                frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def format_record(record: dict[str, Any]) -> str:
    """
    文本格式。存在 request_id 时追加到行尾。
    """
    format_string = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )

    if record["extra"].get("request_id"):
        format_string += " | <magenta>req_id={extra[request_id]}</magenta>"

    format_string += "\n{exception}"
    return format_string


def _intercept_stdlib_logging() -> None:
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(settings.LOG_LEVEL)

    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith(("uvicorn.", "fastapi.")):
            logging.getLogger(name).handlers = []
            logging.getLogger(name).propagate = True

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _sink_options(*, colorize: bool) -> dict[str, Any]:
    options: dict[str, Any] = {
        "level": settings.LOG_LEVEL,
        "enqueue": True,
        "backtrace": True,
        "diagnose": settings.LOG_DIAGNOSE,
    }
    if settings.LOG_JSON_FORMAT:
        options["serialize"] = True
    else:
        options["format"] = format_record
        options["colorize"] = colorize
    return options


def setup_logging() -> None:
    """
    初始化日志配置。
    在应用 lifespan 启动阶段调用。
    """
    _intercept_stdlib_logging()

    logger.remove()
    logger.add(sys.stdout, **_sink_options(colorize=True))

    if settings.LOG_FILE_ENABLED:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_options = _sink_options(colorize=False)
        file_options.update(
            rotation=settings.LOG_ROTATION,
            retention=settings.LOG_RETENTION,
            compression=settings.LOG_COMPRESSION,
        )
        logger.add(str(log_dir / "inkwell_{time:YYYY-MM-DD}.log"), **file_options)

    logger.bind(environment=settings.ENVIRONMENT, level=settings.LOG_LEVEL).info(
        "Logging configured"
    )

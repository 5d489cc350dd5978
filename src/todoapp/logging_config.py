"""structlog 配置模块

dev 模式：pretty print 可读输出
json 模式：结构化 JSON 输出

日志统一写 stderr，stdout 只留给 CLI 命令输出。
"""

import logging
import sys

import structlog

from .config import get_log_format, get_log_level

# aiosqlite 在 DEBUG 级别为每条 SQL 打日志，单独压低
_NOISY_LOGGERS: tuple[str, ...] = ("aiosqlite", "asyncio")


def setup_logging(log_format: str | None = None, log_level: str | None = None) -> None:
    """初始化 structlog 配置

    Args:
        log_format: "json" 或 "dev"，默认读取 TODOAPP_LOG_FORMAT
        log_level: 日志级别名，默认读取 TODOAPP_LOG_LEVEL
    """
    log_format = log_format or get_log_format()
    log_level = log_level or get_log_level()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def bind_command_context(command: str) -> None:
    """为本次 CLI 命令绑定日志上下文"""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(command=command)

"""配置常量模块 -- 可通过环境变量覆盖

包含数据库路径、远端模拟延迟、日志格式等可配置项。
"""

import os
from pathlib import Path

import structlog

log = structlog.get_logger()


def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("TODOAPP_DATA_DIR", "data"))


def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return os.environ.get(
        "TODOAPP_DB_PATH",
        str(_get_base_dir() / "sqlite" / "todoapp.db"),
    )


def _get_int(env_var: str, default: int) -> int:
    """读取整数型环境变量，非法值降级为默认值"""
    val = os.environ.get(env_var)
    if val is None or val == "":
        return default
    try:
        return int(val)
    except ValueError:
        log.warning(
            "invalid_int_config",
            env_var=env_var,
            value=val,
            fallback=default,
        )
        return default


def get_remote_latency_ms() -> int:
    """获取远端数据源的模拟延迟（毫秒）"""
    return max(0, _get_int("TODOAPP_REMOTE_LATENCY_MS", 0))


def get_log_format() -> str:
    """日志渲染模式：dev / json"""
    return os.environ.get("TODOAPP_LOG_FORMAT", "dev")


def get_log_level() -> str:
    return os.environ.get("TODOAPP_LOG_LEVEL", "INFO")


# CLI 列表中标题的最大显示长度
TITLE_PREVIEW_LENGTH: int = 60

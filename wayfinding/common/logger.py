"""
日志配置

控制台总是输出；给出 log_dir 时额外写按天轮转的日志文件。
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from wayfinding.common.exceptions import ConfigurationError

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"
LOG_FILE_PATTERN = "wayfinding_{time:YYYY-MM-DD}.log"


def SetupLogger(
    log_dir: Optional[str] = None,
    level: str = "INFO",
    rotation: str = "00:00",
    retention: str = "7 days",
):
    """
    重新配置 loguru 的输出目标

    Args:
        log_dir: 日志目录，None 表示只输出到控制台
        level: 日志级别名称
        rotation: 文件轮转时机
        retention: 旧日志保留时长

    Returns:
        loguru logger

    Raises:
        ConfigurationError: 未知的日志级别
    """
    try:
        logger.level(level)
    except ValueError as e:
        raise ConfigurationError(f"未知的日志级别: {level}") from e

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_dir is None:
        return logger

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / LOG_FILE_PATTERN,
        format=FILE_FORMAT,
        level=level,
        rotation=rotation,
        retention=retention,
        encoding="utf-8",
    )
    logger.debug(f"日志文件目录: {log_path}")

    return logger

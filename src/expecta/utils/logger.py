"""日志配置模块"""

import logging
import sys

from ..config import LOG_LEVEL


def setup_logger(level: str | None = None) -> logging.Logger:
    """配置 expecta 的日志系统（由调用方显式启用）

    - 输出到 stderr
    - 通过环境变量 EXPECTA_LOG_LEVEL 控制级别（默认 WARNING）
    - 格式：时间戳 | 级别 | 模块 | 消息
    - 只配置 "expecta" logger，不动 root logger
    """
    package_logger = logging.getLogger("expecta")

    level = (level or LOG_LEVEL).upper()
    package_logger.setLevel(getattr(logging, level, logging.WARNING))

    # 避免重复配置
    if any(isinstance(h, logging.StreamHandler) for h in package_logger.handlers):
        return package_logger

    handler = logging.StreamHandler(sys.stderr)

    # 日志格式
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    package_logger.addHandler(handler)
    return package_logger


# 导入时只挂 NullHandler，输出由 setup_logger() 决定
logger = logging.getLogger("expecta")
logger.addHandler(logging.NullHandler())

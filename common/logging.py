"""
日志配置

使用标准 logging，各服务通过 logging.getLogger(__name__) 获取记录器。
进程入口调用 configure_logging() 安装处理器。
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    配置根日志记录器

    Args:
        level: 日志级别名称或数值
        log_file: 可选的日志文件路径（目录不存在时自动创建）

    Returns:
        根日志记录器

    Raises:
        ValueError: 未知的日志级别
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

    # imapclient 在 DEBUG 级别会输出完整协议流量
    logging.getLogger("imapclient").setLevel(max(level, logging.INFO))
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

    return logging.getLogger()


def get_logger(name: str) -> logging.Logger:
    """获取日志记录器"""
    return logging.getLogger(name)

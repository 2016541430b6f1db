"""
日志配置模块

工具库自身只通过 logging.getLogger(__name__) 记录日志，不安装处理器；
嵌入工具库的应用可调用 setup_logging 统一配置输出。
"""

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    设置日志

    Args:
        log_level: 日志级别名称，如 "DEBUG"、"INFO"
        log_file: 可选的日志文件路径，目录不存在时自动创建
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"未知的日志级别: {log_level}")

    handlers = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def setup_logging_from_config(config: "Config") -> None:
    """按配置中的 system 段设置日志"""
    setup_logging(config.system.log_level, config.system.log_file)

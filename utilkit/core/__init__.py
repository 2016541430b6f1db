"""
核心模块

包含错误类型、配置管理和日志配置
"""

from .config import Config, DateConfig, FileConfig, MathConfig, SystemConfig
from .exceptions import DateParseError, DomainError, FileIOError, UtilsError
from .logging_setup import setup_logging, setup_logging_from_config

__all__ = [
    "Config",
    "MathConfig",
    "DateConfig",
    "FileConfig",
    "SystemConfig",
    "UtilsError",
    "DomainError",
    "DateParseError",
    "FileIOError",
    "setup_logging",
    "setup_logging_from_config",
]

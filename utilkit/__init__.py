"""
通用工具函数库

提供数学、字符串、日期和文件I/O四类相互独立的工具函数，
以及统一的错误类型、配置管理和日志配置。
"""

import logging

__version__ = "0.1.0"
__author__ = "Utilkit Team"
__email__ = "team@example.com"

from .core.config import Config
from .core.exceptions import DateParseError, DomainError, FileIOError, UtilsError
from .core.logging_setup import setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "UtilsError",
    "DomainError",
    "DateParseError",
    "FileIOError",
    "setup_logging",
]

"""
配置管理模块

负责加载、验证和管理工具库的默认参数
"""

import codecs
import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

import yaml

# 工具函数使用的默认值
MAX_FACTORIAL_INPUT = 20  # 21! 超出64位无符号整数范围
DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LINE_SEPARATOR = "\n"


@dataclass
class MathConfig:
    """数学工具配置"""

    factorial_limit: int = MAX_FACTORIAL_INPUT


@dataclass
class DateConfig:
    """日期工具配置"""

    default_format: str = DEFAULT_DATE_FORMAT
    display_format: str = DISPLAY_DATE_FORMAT


@dataclass
class FileConfig:
    """文件工具配置"""

    encoding: str = DEFAULT_ENCODING
    line_separator: str = DEFAULT_LINE_SEPARATOR


@dataclass
class SystemConfig:
    """系统配置"""

    log_level: str = "INFO"
    log_file: Optional[str] = None


class Config:
    """配置管理器"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.logger = logging.getLogger(__name__)

        # 默认配置
        self.math = MathConfig()
        self.date = DateConfig()
        self.file = FileConfig()
        self.system = SystemConfig()

        if self.config_path and os.path.exists(self.config_path):
            self.load_config()

    def load_config(self) -> None:
        """
        加载配置文件

        未出现在文件中的键保持默认值。

        Raises:
            yaml.YAMLError: 文件不是合法的YAML
            OSError: 文件无法读取
        """
        with open(self.config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)

        if not config_data:
            self.logger.warning("配置文件为空，使用默认配置")
            return

        if not isinstance(config_data, dict):
            self.logger.error(f"配置文件顶层必须是映射，使用默认配置: {self.config_path}")
            return

        math_data = self._section(config_data, "math")
        if math_data is not None:
            self.math.factorial_limit = math_data.get(
                "factorial_limit", self.math.factorial_limit
            )

        date_data = self._section(config_data, "date")
        if date_data is not None:
            self.date.default_format = date_data.get(
                "default_format", self.date.default_format
            )
            self.date.display_format = date_data.get(
                "display_format", self.date.display_format
            )

        file_data = self._section(config_data, "file")
        if file_data is not None:
            self.file.encoding = file_data.get("encoding", self.file.encoding)
            self.file.line_separator = file_data.get(
                "line_separator", self.file.line_separator
            )

        system_data = self._section(config_data, "system")
        if system_data is not None:
            self.system.log_level = system_data.get(
                "log_level", self.system.log_level
            )
            self.system.log_file = system_data.get("log_file", self.system.log_file)

        self.logger.info(f"配置加载成功: {self.config_path}")

    def _section(self, config_data: Dict[str, Any], name: str) -> Optional[Dict[str, Any]]:
        """取出配置段，缺失时返回 None，不是映射时记录错误并返回 None"""
        if name not in config_data:
            return None

        section = config_data[name]
        if section is None:
            return {}
        if not isinstance(section, dict):
            self.logger.error(f"配置段 {name} 必须是映射，保留默认值: {section!r}")
            return None
        return section

    def get_config_dict(self) -> Dict[str, Any]:
        """获取配置字典"""
        return {
            "math": dict(self.math.__dict__),
            "date": dict(self.date.__dict__),
            "file": dict(self.file.__dict__),
            "system": dict(self.system.__dict__),
        }

    def validate(self) -> bool:
        """验证配置有效性"""
        errors = []

        limit = self.math.factorial_limit
        # bool 是 int 的子类，需单独排除
        if (
            isinstance(limit, bool)
            or not isinstance(limit, int)
            or not 0 <= limit <= MAX_FACTORIAL_INPUT
        ):
            errors.append(
                f"factorial_limit 必须在 0 到 {MAX_FACTORIAL_INPUT} 之间: {limit}"
            )

        from ..utils.date_utils import render_date, translate_format

        sample = date(2000, 12, 31)
        for name in ("default_format", "display_format"):
            fmt = getattr(self.date, name)
            try:
                fmt = translate_format(fmt)
                rendered = render_date(sample, fmt)
                if datetime.strptime(rendered, fmt).date() != sample:
                    errors.append(f"日期格式无法往返解析: {name}={fmt!r}")
            except (TypeError, ValueError):
                errors.append(f"日期格式无效: {name}={fmt!r}")

        try:
            codecs.lookup(self.file.encoding)
        except (LookupError, TypeError):
            errors.append(f"未知的文件编码: {self.file.encoding}")

        if not self.file.line_separator:
            errors.append("行分隔符不能为空")

        if not isinstance(logging.getLevelName(str(self.system.log_level).upper()), int):
            errors.append(f"未知的日志级别: {self.system.log_level}")

        if errors:
            for error in errors:
                self.logger.error(error)
            return False

        return True

    def save(self, config_path: Optional[str] = None) -> None:
        """
        保存配置到文件

        Args:
            config_path: 目标路径，默认使用加载时的路径
        """
        target = config_path or self.config_path
        if not target:
            raise ValueError("未指定配置文件路径")

        config_dir = os.path.dirname(target)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(target, "w", encoding="utf-8") as f:
            yaml.dump(
                self.get_config_dict(),
                f,
                default_flow_style=False,
                allow_unicode=True,
                indent=2,
            )

        self.config_path = target
        self.logger.info(f"配置已保存: {target}")

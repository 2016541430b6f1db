"""
日期工具函数

提供日期解析、格式转换、日期差计算、日期加减和星期计算。

格式参数既可以是 strftime 格式（如 "%Y-%m-%d"），也可以是标记格式
（如 "YYYY-MM-DD"、"DD/MM/YYYY"），后者会先转换为 strftime 格式。
"""

import logging
import re
from datetime import date, datetime, timedelta

from ..core.config import DEFAULT_DATE_FORMAT, DISPLAY_DATE_FORMAT
from ..core.exceptions import DateParseError, DomainError

logger = logging.getLogger(__name__)

# 标记 -> strftime 指令，长标记在前
_FORMAT_TOKENS = {
    "YYYY": "%Y",
    "YY": "%y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "DD": "%d",
    "dddd": "%A",
    "ddd": "%a",
}
_TOKEN_PATTERN = re.compile("|".join(_FORMAT_TOKENS))
# "%%" 先匹配，避免把字面量 "%%Y" 当作年份指令
_YEAR_DIRECTIVE = re.compile(r"%[%Y]")

# 不依赖进程 locale 的星期名称，索引与 date.weekday() 对应
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def translate_format(pattern: str) -> str:
    """将标记格式转换为 strftime 格式，已含 % 的格式原样返回"""
    if "%" in pattern:
        return pattern
    return _TOKEN_PATTERN.sub(lambda m: _FORMAT_TOKENS[m.group(0)], pattern)


def render_date(value: date, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """
    按格式输出日期

    %Y 始终输出4位年份（不足补零），保证输出能按同一格式重新解析。
    """
    fmt = _YEAR_DIRECTIVE.sub(
        lambda m: f"{value.year:04d}" if m.group(0) == "%Y" else "%%",
        translate_format(fmt),
    )
    return value.strftime(fmt)


def _today() -> date:
    return date.today()


def parse_date(date_str: str, fmt: str = DEFAULT_DATE_FORMAT) -> date:
    """
    严格解析日期字符串

    Args:
        date_str: 日期字符串
        fmt: 日期格式

    Returns:
        解析得到的 date

    Raises:
        DateParseError: 字符串与格式不匹配，或日期在日历中不存在（如2月30日）
    """
    if not isinstance(date_str, str):
        raise DateParseError(str(date_str), fmt, "日期必须是字符串")

    try:
        return datetime.strptime(date_str, translate_format(fmt)).date()
    except ValueError as e:
        logger.debug(f"日期解析失败: {date_str!r} ({fmt!r}): {e}")
        raise DateParseError(date_str, fmt, str(e)) from e


def validate_date_format(date_str: str, fmt: str) -> bool:
    """检查日期字符串是否符合指定格式，不会抛出异常"""
    try:
        parse_date(date_str, fmt)
        return True
    except DateParseError:
        return False


def date_difference_days(date1: str, date2: str) -> int:
    """
    计算两个 YYYY-MM-DD 日期相差的天数

    Returns:
        date1 - date2 的天数，date1 较早时为负数
    """
    d1 = parse_date(date1, DEFAULT_DATE_FORMAT)
    d2 = parse_date(date2, DEFAULT_DATE_FORMAT)
    return (d1 - d2).days


def format_date(date_str: str, input_format: str, output_format: str) -> str:
    """按 input_format 解析日期，再按 output_format 输出"""
    parsed = parse_date(date_str, input_format)
    return render_date(parsed, output_format)


def to_dd_mm_yyyy(date_str: str) -> str:
    """YYYY-MM-DD -> DD/MM/YYYY"""
    return format_date(date_str, DEFAULT_DATE_FORMAT, DISPLAY_DATE_FORMAT)


def to_yyyy_mm_dd(date_str: str) -> str:
    """DD/MM/YYYY -> YYYY-MM-DD"""
    return format_date(date_str, DISPLAY_DATE_FORMAT, DEFAULT_DATE_FORMAT)


def current_date(fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """按格式返回本地系统时钟的当前日期（本地时区，不做 UTC 转换）"""
    return render_date(_today(), fmt)


def add_days(date_str: str, days: int, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """
    日期加减天数

    Args:
        date_str: 日期字符串
        days: 天数，可为负数
        fmt: 输入和输出使用的格式

    Returns:
        相同格式的新日期，跨月跨年自动进位

    Raises:
        DateParseError: 日期无法解析
        DomainError: 结果超出 1 到 9999 年的范围
    """
    parsed = parse_date(date_str, fmt)
    try:
        shifted = parsed + timedelta(days=days)
    except OverflowError as e:
        raise DomainError(f"日期超出范围: {date_str} + {days} 天") from e
    return render_date(shifted, fmt)


def is_leap_year(year: int) -> bool:
    """公历闰年：能被4整除且不能被100整除，或能被400整除"""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def day_of_week(date_str: str, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """返回英文星期名称，如 "Monday" """
    return WEEKDAY_NAMES[parse_date(date_str, fmt).weekday()]

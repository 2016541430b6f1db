"""
字符串工具函数

提供回文判断、字符统计、反转、大小写转换等字符串处理功能。
所有函数按 Unicode 码点处理，不会拆分多字节字符。
"""

from ..core.exceptions import DomainError


def is_palindrome(text: str, normalize: bool = False) -> bool:
    """
    判断字符串是否为回文

    Args:
        text: 输入字符串
        normalize: 为 False 时原样比较（大小写、空白、标点均有效）；
            为 True 时只保留字母和数字并统一为小写后比较

    Returns:
        空字符串视为回文
    """
    if normalize:
        text = "".join(ch.lower() for ch in text if ch.isalnum())
    return text == text[::-1]


def count_char(text: str, target: str) -> int:
    """统计单个字符出现的次数"""
    if len(target) != 1:
        raise DomainError(f"target 必须是单个字符: {target!r}")
    if not text:
        return 0
    return text.count(target)


def reverse_string(text: str) -> str:
    """反转字符串"""
    return text[::-1]


def to_title_case(text: str) -> str:
    """
    转换为标题格式

    按空白分词，每个词首字母大写、其余小写，再用单个空格连接。
    连续空白会被合并，首尾空白会被去掉。
    """
    if not text:
        return ""

    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split())


def remove_whitespace(text: str) -> str:
    """移除所有空白字符（空格、制表符、换行等）"""
    if not text:
        return ""
    return "".join(ch for ch in text if not ch.isspace())


def word_count(text: str) -> int:
    """统计以空白分隔的非空词数"""
    if not text:
        return 0
    return len(text.split())


def is_alphabetic(text: str) -> bool:
    """非空且每个字符都是 Unicode 字母时返回 True，空字符串返回 False"""
    return bool(text) and all(ch.isalpha() for ch in text)

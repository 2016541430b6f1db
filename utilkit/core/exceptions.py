"""
异常定义模块

工具库中所有可预期错误的类型层次
"""

import errno
from typing import Optional


class UtilsError(Exception):
    """工具库错误基类"""


class DomainError(UtilsError, ValueError):
    """输入违反了函数的前置条件（如阶乘参数过大、行数为负）"""


class DateParseError(UtilsError, ValueError):
    """日期字符串与格式不匹配，或不是合法的日历日期"""

    def __init__(self, date_str: str, fmt: str, reason: Optional[str] = None):
        self.date_str = date_str
        self.fmt = fmt
        self.reason = reason
        message = f"无法按格式 {fmt!r} 解析日期 {date_str!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# errno -> kind
_ERRNO_KINDS = {
    errno.ENOENT: "not_found",
    errno.EACCES: "permission_denied",
    errno.EPERM: "permission_denied",
    errno.EEXIST: "already_exists",
    errno.EISDIR: "is_a_directory",
    errno.ENOTDIR: "not_a_directory",
}


class FileIOError(UtilsError, OSError):
    """
    文件系统操作失败

    包装底层的 OSError，保留 errno / strerror / filename，
    并提供 kind 与 operation 便于调用方判断失败原因。
    """

    def __init__(self, operation: str, cause: OSError):
        super().__init__(cause.errno, cause.strerror or str(cause), cause.filename)
        self.operation = operation
        self.cause = cause

    @property
    def kind(self) -> str:
        """失败类型"""
        return _ERRNO_KINDS.get(self.errno, "other")

    def __str__(self) -> str:
        return f"{self.operation} 失败 ({self.kind}): {super().__str__()}"

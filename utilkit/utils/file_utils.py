"""
文件工具函数

提供文件读写、追加、按行读写、复制、删除等操作。
每个函数在一次调用内完成打开、读写和关闭；底层 OSError 统一包装为 FileIOError。
"""

import logging
import os
import shutil
from contextlib import contextmanager
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from ..core.config import DEFAULT_ENCODING, DEFAULT_LINE_SEPARATOR
from ..core.exceptions import DomainError, FileIOError

logger = logging.getLogger(__name__)

_COPY_CHUNK_SIZE = 64 * 1024

PathLike = Union[str, "os.PathLike[str]"]


@contextmanager
def _wrap_os_error(operation: str, path: PathLike) -> Iterator[None]:
    """将 OSError 包装为 FileIOError 并记录日志"""
    try:
        yield
    except OSError as e:
        logger.error(f"{operation} 失败: {path}: {e}")
        raise FileIOError(operation, e) from e


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_file_to_string(file_path: PathLike, encoding: str = DEFAULT_ENCODING) -> str:
    """
    读取整个文件内容

    换行符不做转换，内容与文件中的字节一致。

    Raises:
        FileIOError: 文件不存在或无权限读取
    """
    logger.debug(f"读取文件: {file_path}")
    with _wrap_os_error("读取文件", file_path):
        with open(file_path, "r", encoding=encoding, newline="") as f:
            return f.read()


def write_string_to_file(
    file_path: PathLike, content: str, encoding: str = DEFAULT_ENCODING
) -> None:
    """写入文件，文件已存在时覆盖"""
    logger.debug(f"写入文件: {file_path}")
    with _wrap_os_error("写入文件", file_path):
        with open(file_path, "w", encoding=encoding, newline="") as f:
            f.write(content)


def append_to_file(
    file_path: PathLike, content: str, encoding: str = DEFAULT_ENCODING
) -> None:
    """追加内容到文件末尾，文件不存在时创建"""
    logger.debug(f"追加文件: {file_path}")
    with _wrap_os_error("追加文件", file_path):
        with open(file_path, "a", encoding=encoding, newline="") as f:
            f.write(content)


def read_lines(file_path: PathLike, encoding: str = DEFAULT_ENCODING) -> List[str]:
    """
    按行读取文件

    Returns:
        不含行尾 "\\n" 或 "\\r\\n" 的行列表；末尾换行不会产生空行
    """
    logger.debug(f"按行读取文件: {file_path}")
    with _wrap_os_error("按行读取文件", file_path):
        with open(file_path, "r", encoding=encoding, newline="\n") as f:
            return [_strip_line_ending(line) for line in f]


def write_lines(
    file_path: PathLike,
    lines: Iterable[str],
    encoding: str = DEFAULT_ENCODING,
    separator: str = DEFAULT_LINE_SEPARATOR,
) -> None:
    """
    用换行符连接各行后写入文件

    最后一行之后不追加换行；最后一行为空字符串时追加一个分隔符，
    使该空行在 read_lines 中保留。各行本身不应包含换行符，
    在此前提下使用默认分隔符时 read_lines 读回的列表与写入的一致。
    """
    lines = list(lines)
    content = separator.join(lines)
    if lines and lines[-1] == "":
        content += separator
    write_string_to_file(file_path, content, encoding=encoding)


def file_exists(file_path: PathLike) -> bool:
    """路径存在且是普通文件时返回 True"""
    return os.path.isfile(file_path)


def file_size(file_path: PathLike) -> int:
    """获取文件大小（字节）"""
    with _wrap_os_error("获取文件大小", file_path):
        return os.stat(file_path).st_size


def create_dir_all(directory_path: PathLike) -> None:
    """递归创建目录，目录已存在时直接返回"""
    logger.debug(f"创建目录: {directory_path}")
    with _wrap_os_error("创建目录", directory_path):
        Path(directory_path).mkdir(parents=True, exist_ok=True)


def copy_file(source: PathLike, destination: PathLike) -> int:
    """
    复制文件内容和权限位

    Args:
        source: 源文件路径
        destination: 目标文件路径，已存在时覆盖

    Returns:
        实际写入目标文件的字节数

    Raises:
        FileIOError: 源文件不存在或目标不可写
    """
    logger.debug(f"复制文件: {source} -> {destination}")
    with _wrap_os_error("复制文件", source):
        if os.path.exists(destination) and os.path.samefile(source, destination):
            raise shutil.SameFileError(f"源文件与目标文件相同: {source}")

        copied = 0
        with open(source, "rb") as src, open(destination, "wb") as dst:
            for chunk in iter(lambda: src.read(_COPY_CHUNK_SIZE), b""):
                dst.write(chunk)
                copied += len(chunk)

        shutil.copymode(source, destination)
        return copied


def delete_file(file_path: PathLike) -> None:
    """删除文件，文件不存在或无法删除时抛出 FileIOError"""
    logger.debug(f"删除文件: {file_path}")
    with _wrap_os_error("删除文件", file_path):
        os.remove(file_path)


def read_first_n_lines(
    file_path: PathLike, n: int, encoding: str = DEFAULT_ENCODING
) -> List[str]:
    """读取前 n 行，文件行数不足时返回全部行"""
    if n < 0:
        raise DomainError(f"行数不能为负数: {n}")

    logger.debug(f"读取前 {n} 行: {file_path}")
    with _wrap_os_error("读取文件", file_path):
        with open(file_path, "r", encoding=encoding, newline="\n") as f:
            return [_strip_line_ending(line) for line in islice(f, n)]

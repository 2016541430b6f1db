"""
工具函数模块

提供数学、字符串、日期和文件四类相互独立的工具函数
"""

from .math_utils import (
    factorial,
    gcd,
    lcm,
    is_prime,
)

from .string_utils import (
    is_palindrome,
    count_char,
    reverse_string,
    to_title_case,
    remove_whitespace,
    word_count,
    is_alphabetic,
)

from .date_utils import (
    translate_format,
    render_date,
    parse_date,
    validate_date_format,
    date_difference_days,
    format_date,
    to_dd_mm_yyyy,
    to_yyyy_mm_dd,
    current_date,
    add_days,
    is_leap_year,
    day_of_week,
)

from .file_utils import (
    read_file_to_string,
    write_string_to_file,
    append_to_file,
    read_lines,
    write_lines,
    file_exists,
    file_size,
    create_dir_all,
    copy_file,
    delete_file,
    read_first_n_lines,
)

__all__ = [
    # 数学工具
    "factorial",
    "gcd",
    "lcm",
    "is_prime",
    # 字符串工具
    "is_palindrome",
    "count_char",
    "reverse_string",
    "to_title_case",
    "remove_whitespace",
    "word_count",
    "is_alphabetic",
    # 日期工具
    "translate_format",
    "render_date",
    "parse_date",
    "validate_date_format",
    "date_difference_days",
    "format_date",
    "to_dd_mm_yyyy",
    "to_yyyy_mm_dd",
    "current_date",
    "add_days",
    "is_leap_year",
    "day_of_week",
    # 文件工具
    "read_file_to_string",
    "write_string_to_file",
    "append_to_file",
    "read_lines",
    "write_lines",
    "file_exists",
    "file_size",
    "create_dir_all",
    "copy_file",
    "delete_file",
    "read_first_n_lines",
]

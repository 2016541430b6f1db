"""
数学工具函数

提供阶乘、最大公约数、最小公倍数和素数判断
"""

from math import isqrt

from ..core.config import MAX_FACTORIAL_INPUT
from ..core.exceptions import DomainError


def factorial(n: int, limit: int = MAX_FACTORIAL_INPUT) -> int:
    """
    计算 n!

    Args:
        n: 非负整数
        limit: 允许的最大输入，默认20（21! 超出64位无符号整数范围）

    Returns:
        1 * 2 * ... * n，factorial(0) == 1

    Raises:
        DomainError: n 为负数或大于 limit
    """
    if n < 0:
        raise DomainError(f"阶乘参数不能为负数: {n}")
    if n > limit:
        raise DomainError(f"阶乘参数过大: {n} (最大 {limit})")

    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def gcd(a: int, b: int) -> int:
    """最大公约数（欧几里得算法），结果非负，gcd(0, 0) == 0"""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """最小公倍数，任一参数为0时返回0"""
    if a == 0 or b == 0:
        return 0
    # 先除后乘
    return abs(a) // gcd(a, b) * abs(b)


def is_prime(n: int) -> bool:
    """试除法判断素数，只检查到 sqrt(n) 的奇数因子"""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    for i in range(3, isqrt(n) + 1, 2):
        if n % i == 0:
            return False
    return True

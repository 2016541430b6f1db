"""
数学工具函数测试
"""

import pytest

from utilkit.core.exceptions import DomainError
from utilkit.utils.math_utils import factorial, gcd, is_prime, lcm


def _naive_is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d for d in range(2, n))


class TestFactorial:
    """阶乘测试"""

    def test_small_values(self):
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(5) == 120
        assert factorial(6) == 720
        assert factorial(10) == 3628800

    def test_upper_limit(self):
        assert factorial(20) == 2432902008176640000
        # 仍在64位无符号整数范围内
        assert factorial(20) < 2**64

    def test_full_range(self):
        expected = 1
        for n in range(0, 21):
            if n:
                expected *= n
            assert factorial(n) == expected

    @pytest.mark.parametrize("n", [21, 25, 100])
    def test_too_large(self, n):
        with pytest.raises(DomainError):
            factorial(n)

    def test_negative(self):
        with pytest.raises(DomainError):
            factorial(-1)

    def test_domain_error_is_value_error(self):
        with pytest.raises(ValueError):
            factorial(21)

    def test_custom_limit(self):
        assert factorial(5, limit=5) == 120
        with pytest.raises(DomainError):
            factorial(6, limit=5)


class TestGcdLcm:
    """最大公约数与最小公倍数测试"""

    def test_gcd(self):
        assert gcd(48, 18) == 6
        assert gcd(17, 19) == 1
        assert gcd(100, 25) == 25
        assert gcd(100, 50) == 50

    def test_gcd_zero(self):
        assert gcd(0, 5) == 5
        assert gcd(5, 0) == 5
        assert gcd(0, 0) == 0

    def test_gcd_negative(self):
        assert gcd(-48, 18) == 6
        assert gcd(48, -18) == 6
        assert gcd(-48, -18) == 6

    def test_gcd_symmetric(self):
        for a in range(0, 60):
            for b in range(0, 60):
                assert gcd(a, b) == gcd(b, a)
                assert gcd(a, b) >= 0

    def test_lcm(self):
        assert lcm(4, 6) == 12
        assert lcm(7, 9) == 63
        assert lcm(12, 18) == 36
        assert lcm(12, 15) == 60

    def test_lcm_zero(self):
        assert lcm(0, 5) == 0
        assert lcm(5, 0) == 0
        assert lcm(0, 0) == 0

    def test_lcm_negative(self):
        assert lcm(-4, 6) == 12

    def test_gcd_times_lcm(self):
        for a in range(1, 60):
            for b in range(1, 60):
                assert gcd(a, b) * lcm(a, b) == a * b

    def test_lcm_large_values(self):
        a = 2**61 - 1
        b = 2**31 - 1
        assert lcm(a, b) == a * b


class TestIsPrime:
    """素数判断测试"""

    def test_known_values(self):
        assert is_prime(2) is True
        assert is_prime(3) is True
        assert is_prime(17) is True
        assert is_prime(97) is True
        assert is_prime(1) is False
        assert is_prime(4) is False
        assert is_prime(25) is False
        assert is_prime(100) is False

    def test_below_two(self):
        assert is_prime(0) is False
        assert is_prime(-7) is False

    def test_perfect_squares_of_primes(self):
        for p in (3, 5, 7, 11, 101):
            assert is_prime(p * p) is False

    def test_agrees_with_trial_division(self):
        # 朴素筛法生成对照表
        limit = 10000
        sieve = [True] * (limit + 1)
        sieve[0] = sieve[1] = False
        for i in range(2, int(limit**0.5) + 1):
            if sieve[i]:
                for j in range(i * i, limit + 1, i):
                    sieve[j] = False

        for n in range(0, limit + 1):
            assert is_prime(n) == sieve[n], n

    def test_agrees_with_naive_check(self):
        for n in range(0, 500):
            assert is_prime(n) == _naive_is_prime(n)

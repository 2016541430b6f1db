"""
字符串工具函数测试
"""

import pytest

from utilkit.core.exceptions import DomainError
from utilkit.utils.string_utils import (
    count_char,
    is_alphabetic,
    is_palindrome,
    remove_whitespace,
    reverse_string,
    to_title_case,
    word_count,
)

SAMPLES = [
    "",
    "a",
    "racecar",
    "hello",
    "rust programming",
    "12345",
    "A man a plan a canal Panama",
    "héllo wörld",
    "中文字符串",
    "emoji 🎉 test",
]


class TestPalindrome:
    """回文判断测试"""

    def test_exact(self):
        assert is_palindrome("racecar") is True
        assert is_palindrome("hello") is False
        assert is_palindrome("") is True
        assert is_palindrome("a") is True

    def test_exact_is_case_and_space_sensitive(self):
        assert is_palindrome("Racecar") is False
        assert is_palindrome("A man a plan a canal Panama") is False

    def test_normalized(self):
        assert is_palindrome("A man a plan a canal Panama", normalize=True) is True
        assert is_palindrome("Was it a car or a cat I saw", normalize=True) is True
        assert is_palindrome("race a car", normalize=True) is False

    def test_matches_reverse(self):
        for s in SAMPLES:
            assert is_palindrome(s) == (s == reverse_string(s))


class TestStringUtils:
    """字符串工具函数测试"""

    def test_count_char(self):
        assert count_char("hello world", "l") == 3
        assert count_char("rust programming", "r") == 3
        assert count_char("programming", "m") == 2
        assert count_char("hello", "x") == 0
        assert count_char("", "a") == 0

    def test_count_char_unicode(self):
        assert count_char("日本日本日", "日") == 3

    @pytest.mark.parametrize("target", ["", "ab"])
    def test_count_char_requires_single_character(self, target):
        with pytest.raises(DomainError):
            count_char("abc", target)

    def test_reverse_string(self):
        assert reverse_string("hello") == "olleh"
        assert reverse_string("rust programming") == "gnimmargorp tsur"
        assert reverse_string("12345") == "54321"
        assert reverse_string("") == ""
        assert reverse_string("a") == "a"

    def test_reverse_string_keeps_multibyte_characters(self):
        assert reverse_string("héllo") == "olléh"
        assert reverse_string("中文") == "文中"

    def test_reverse_involution(self):
        for s in SAMPLES:
            assert reverse_string(reverse_string(s)) == s

    def test_to_title_case(self):
        assert to_title_case("hello world") == "Hello World"
        assert to_title_case("rust programming language") == "Rust Programming Language"
        assert to_title_case("HELLO WORLD") == "Hello World"
        assert to_title_case("") == ""

    def test_to_title_case_collapses_whitespace(self):
        assert to_title_case("  hello   world  ") == "Hello World"
        assert to_title_case("hello\tworld\nagain") == "Hello World Again"
        assert to_title_case("   ") == ""

    def test_remove_whitespace(self):
        assert remove_whitespace("hello world") == "helloworld"
        assert remove_whitespace("  rust  programming  ") == "rustprogramming"
        assert remove_whitespace("hello world test") == "helloworldtest"
        assert remove_whitespace("a\tb\nc\r\nd") == "abcd"
        assert remove_whitespace("") == ""
        assert remove_whitespace("   ") == ""

    def test_word_count(self):
        assert word_count("hello world") == 2
        assert word_count("hello world programming") == 3
        assert word_count("  rust  programming  language  ") == 3
        assert word_count("") == 0
        assert word_count("   ") == 0
        assert word_count("single") == 1

    def test_is_alphabetic(self):
        assert is_alphabetic("hello") is True
        assert is_alphabetic("HelloWorld") is True
        assert is_alphabetic("hello123") is False
        assert is_alphabetic("hello world") is False
        assert is_alphabetic("") is False

    def test_is_alphabetic_unicode(self):
        assert is_alphabetic("héllo") is True
        assert is_alphabetic("中文") is True

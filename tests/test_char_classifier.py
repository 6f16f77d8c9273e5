"""Tests for character predicates."""

import pytest
from json_linter.utils import CharClassifier


class TestCharClassifier:
    """Tests for CharClassifier class."""

    @pytest.mark.parametrize("c", [" ", "\t", "\n", "\r"])
    def test_whitespace(self, c):
        """Test the four JSON whitespace characters."""
        assert CharClassifier.is_whitespace(c)

    @pytest.mark.parametrize("c", ["\x0b", "\x0c", "\xa0", "a", ""])
    def test_not_whitespace(self, c):
        """Test that other blank-looking characters are not whitespace."""
        assert not CharClassifier.is_whitespace(c)

    @pytest.mark.parametrize("c", [" ", "!", "#", "[", "]", "a", "~", "\x7f", "é", "日"])
    def test_unescaped(self, c):
        """Test characters allowed literally inside strings."""
        assert CharClassifier.is_unescaped(c)

    @pytest.mark.parametrize("c", ['"', "\\", "\x00", "\x1f", "\n", "\t"])
    def test_not_unescaped(self, c):
        """Test quote, backslash and control characters are rejected."""
        assert not CharClassifier.is_unescaped(c)

    def test_escape_targets(self):
        """Test the decoded value of every escape target."""
        expected = {
            '"': '"',
            '\\': '\\',
            '/': '/',
            'b': '\b',
            'f': '\f',
            'n': '\n',
            'r': '\r',
            't': '\t',
        }
        for target, decoded in expected.items():
            assert CharClassifier.is_escape_target(target)
            assert CharClassifier.escape(target) == decoded

    @pytest.mark.parametrize("c", ["u", "x", "a", "0", "'"])
    def test_not_escape_targets(self, c):
        """Test unsupported escape targets, including \\u."""
        assert not CharClassifier.is_escape_target(c)
        assert CharClassifier.escape(c) is None

    def test_reescape(self):
        """Test decoded control characters and quotes are escaped again."""
        assert CharClassifier.reescape('a"b\\c\b\f\n\r\t') == r'a\"b\\c\b\f\n\r\t'
        assert CharClassifier.reescape("http://x '日本'") == "http://x '日本'"

    def test_ascii_digits_only(self):
        """Test that only ASCII digits count as digits."""
        assert all(CharClassifier.is_digit(c) for c in "0123456789")
        assert not CharClassifier.is_digit("٣")
        assert not CharClassifier.is_digit("a")

    def test_number_start(self):
        """Test minus sign and digits start a number."""
        assert CharClassifier.is_number_start("-")
        assert CharClassifier.is_number_start("7")
        assert not CharClassifier.is_number_start("+")
        assert not CharClassifier.is_number_start(".")

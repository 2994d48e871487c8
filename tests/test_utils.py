"""Tests for Huellas utility modules."""

import pytest

from huellas.utils import (
    count_leading_spaces,
    get_logger,
    is_blank,
    lstrip_inline,
    normalize_line_ending,
    strip_indent_level,
    strip_line_ending,
)


class TestIndentation:
    """Tests for indentation helpers."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [("", 0), ("a", 0), ("  a", 2), ("\ta", 4), ("\t  - item", 6), ("    ", 4)],
    )
    def test_count_leading_spaces(self, line: str, expected: int) -> None:
        assert count_leading_spaces(line) == expected

    def test_strip_indent_level_tab(self) -> None:
        assert strip_indent_level("\t\tx") == "\tx"

    def test_strip_indent_level_spaces(self) -> None:
        assert strip_indent_level("      x") == "  x"

    def test_strip_indent_level_short_indent_unchanged(self) -> None:
        assert strip_indent_level("  x") == "  x"

    def test_lstrip_inline_keeps_newlines(self) -> None:
        assert lstrip_inline(" \t x") == "x"
        assert lstrip_inline("  \n") == "\n"


class TestLineEndings:
    """Tests for line-ending helpers."""

    @pytest.mark.parametrize(
        ("line", "expected"), [("a\n", "a"), ("a\r\n", "a"), ("a", "a"), ("\n", "")]
    )
    def test_strip_line_ending(self, line: str, expected: str) -> None:
        assert strip_line_ending(line) == expected

    def test_normalize_crlf(self) -> None:
        assert normalize_line_ending("a\r\n") == "a\n"

    def test_normalize_leaves_lf(self) -> None:
        assert normalize_line_ending("a\n") == "a\n"
        assert normalize_line_ending("a") == "a"

    def test_is_blank(self) -> None:
        assert is_blank(" \t\n")
        assert is_blank("")
        assert not is_blank(" a ")


class TestLogger:
    """Tests for get_logger."""

    def test_prefix_added(self) -> None:
        assert get_logger("walker").name == "huellas.walker"

    def test_module_name_kept(self) -> None:
        assert get_logger("huellas.parser").name == "huellas.parser"
        assert get_logger("huellas").name == "huellas"

"""Error-path and malformed input tests.

Malformed markup never raises; it degrades to literal text. The exceptions
that do exist signal API misuse or internal inconsistencies.
"""

import logging

import pytest

from huellas import (
    EventRecorder,
    HuellasError,
    MarkdownParser,
    ParseConfig,
    ParseError,
    TagStackError,
    parse,
)
from huellas.records import LineCategory, LineRecord

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected input")
        assert str(err) == "unexpected input"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = ParseError("missing bracket", lineno=10, col_offset=5)
        assert "10:5" in str(err)

    def test_with_source_file(self) -> None:
        err = ParseError("oops", lineno=3, source_file="doc.md")
        assert str(err).startswith("doc.md:3")

    def test_hierarchy(self) -> None:
        assert issubclass(ParseError, HuellasError)
        assert issubclass(TagStackError, HuellasError)


class TestTagStackErrorFormatting:
    """TagStackError lists the open elements."""

    def test_with_stack(self) -> None:
        err = TagStackError("cannot close <li>", ("ul", "p"))
        assert str(err) == "cannot close <li> (open: ul, p)"
        assert err.stack == ("ul", "p")

    def test_empty_stack(self) -> None:
        assert str(TagStackError("pop from empty tag stack")).endswith("(stack empty)")


class TestListLineDefect:
    """A list record without a list prefix is an internal error."""

    def test_missing_prefix_raises(self) -> None:
        parser = MarkdownParser("plain", EventRecorder())
        parser.parse()
        record = LineRecord(index=0, start=0, end=5, category=LineCategory.LIST)
        with pytest.raises(ParseError, match="no list prefix"):
            parser._process_list_line(record)


# =========================================================================
# Graceful degradation
# =========================================================================


class TestMalformedInput:
    """Malformed markup becomes text."""

    @pytest.mark.parametrize(
        "source",
        [
            "[unclosed link",
            "[text](unclosed",
            "![img](",
            "**",
            "<not closed",
            "`",
            "[a]: ",
            "](",
            "#",
            ">",
            "- ",
            "1.",
        ],
    )
    def test_never_raises(self, source: str) -> None:
        recorder = EventRecorder()
        assert parse(source, recorder) is True
        assert recorder.events[0].kind == "start_document"
        assert recorder.events[-1].kind == "end_document"

    def test_unterminated_link_target_is_text(self) -> None:
        recorder = EventRecorder()
        parse("[text](unclosed", recorder)
        assert recorder.compact() == ["p", "[text](unclosed", "/p"]

    def test_deep_nesting_is_bounded(self) -> None:
        source = "[" * 50 + "x" + "](/u)" * 50
        recorder = EventRecorder()
        parse(source, recorder, config=ParseConfig(max_nesting_depth=5))
        assert recorder.tags().count("a") <= 6


class TestLogging:
    """Debug logging goes through the huellas logger namespace."""

    def test_empty_input_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="huellas"):
            parse("", EventRecorder())
        assert any("Empty source" in r.message for r in caplog.records)
        assert all(r.name.startswith("huellas.") for r in caplog.records)

    def test_classification_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="huellas"):
            parse("a\n\nb", EventRecorder())
        assert any("Classified 3 lines into 2 paragraphs" in r.message for r in caplog.records)

    def test_depth_limit_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="huellas"):
            parse("**x**", EventRecorder(), config=ParseConfig(max_nesting_depth=0))
        assert any("nesting" in r.message for r in caplog.records)

"""Property-based tests for classifier invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from huellas.lexer import classify, split_lines

markdown_text = st.lists(
    st.sampled_from(list("ab #*_-=`>[]:\n\t") + ["    ", "```", "- ", "1. ", "[r]: /u"]),
    max_size=60,
).map("".join)


class TestLineCoverage:
    """Line records tile the document."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_lines_are_contiguous(self, source: str) -> None:
        """Records cover the source with no gaps or overlaps."""
        lines = classify(source).lines
        position = 0
        for index, line in enumerate(lines):
            assert line.index == index
            assert line.start == position
            assert line.end > line.start
            position = line.end
        assert position == len(source)

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_split_lines_round_trips(self, source: str) -> None:
        assert "".join(source[start:end] for start, end in split_lines(source)) == source


class TestDeterminism:
    """Classification is a pure function of its input."""

    @given(markdown_text)
    @settings(max_examples=200)
    def test_same_input_same_result(self, source: str) -> None:
        assert classify(source) == classify(source)


class TestParagraphRanges:
    """Paragraph ranges never overlap and only cover walked lines."""

    @given(markdown_text)
    @settings(max_examples=200)
    def test_ranges_are_ordered_and_disjoint(self, source: str) -> None:
        result = classify(source)
        previous_last = -1
        for paragraph in result.paragraphs:
            assert paragraph.first <= paragraph.last
            assert paragraph.first > previous_last
            previous_last = paragraph.last

    @given(markdown_text)
    @settings(max_examples=200)
    def test_every_walked_line_has_a_paragraph(self, source: str) -> None:
        result = classify(source)
        for line in result.lines:
            if not line.ignored:
                assert result.paragraph_of(line.index) is not None

    @given(markdown_text)
    @settings(max_examples=200)
    def test_ignored_lines_are_outside_paragraphs(self, source: str) -> None:
        result = classify(source)
        for index in result.ignored:
            assert result.paragraph_of(index) is None

    @given(markdown_text)
    @settings(max_examples=100)
    def test_ignored_flag_matches_set(self, source: str) -> None:
        result = classify(source)
        assert {line.index for line in result.lines if line.ignored} == set(result.ignored)

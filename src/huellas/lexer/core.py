"""Single-pass line classifier.

Scans the document once, left to right, and records for every line its
category, indentation and whether the walker should skip it. Paragraph
ranges and the reference table are built along the way.

Classification priority (first match wins):
1. Setext underline (rewrites the line above into H1/H2)
2. Horizontal rule
3. Reference definition
4. Indented code
5. Code fence
6. ATX heading
7. List item

Blank lines are always ignored and separate paragraphs. Lines inside an
open fence are claimed as code before any other rule runs.

Thread Safety:
LineClassifier instances are single-use. Create one per source string.
All state is instance-local; the Classification result is immutable.

"""

from __future__ import annotations

from collections.abc import Iterator

from huellas.lexer.classifiers import (
    CodeClassifierMixin,
    HeadingClassifierMixin,
    LinkRefClassifierMixin,
    ListClassifierMixin,
    SetextClassifierMixin,
    ThematicClassifierMixin,
)
from huellas.records import (
    Classification,
    LineCategory,
    LineRecord,
    ParagraphRange,
    ReferenceEntry,
)
from huellas.utils.logger import get_logger
from huellas.utils.text import count_leading_spaces, is_blank

logger = get_logger(__name__)

# Categories that always form a paragraph of their own
_STANDALONE = frozenset({LineCategory.HR, LineCategory.HEADING})


def split_lines(source: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` for each line, terminator included.

    A trailing newline does not open an extra empty line.

    Example:
        >>> list(split_lines("a\\r\\nbc"))
        [(0, 3), (3, 5)]
    """
    pos = 0
    length = len(source)
    while pos < length:
        newline = source.find("\n", pos)
        end = length if newline == -1 else newline + 1
        yield pos, end
        pos = end


class LineClassifier(
    SetextClassifierMixin,
    ThematicClassifierMixin,
    LinkRefClassifierMixin,
    CodeClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
):
    """Classify every line of a document in one forward pass.

    Usage:
        >>> result = LineClassifier("Title\\n=====\\n\\n- item").classify()
        >>> [line.category.name for line in result.lines]
        ['H1', 'NONE', 'NONE', 'LIST']
        >>> sorted(result.ignored)
        [1, 2]

    Thread Safety:
        LineClassifier instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_spans",
        "_categories",
        "_indents",
        "_ignored",
        "_references",
        "_paragraphs",
        "_paragraph_first",
    )

    def __init__(self, source: str) -> None:
        self._source = source
        self._spans: list[tuple[int, int]] = []
        self._categories: list[LineCategory] = []
        self._indents: list[int] = []
        self._ignored: set[int] = set()
        self._references: dict[str, ReferenceEntry] = {}
        self._paragraphs: list[ParagraphRange] = []
        self._paragraph_first: int | None = None

    def classify(self) -> Classification:
        """Run the pass and freeze the result."""
        for index, (start, end) in enumerate(split_lines(self._source)):
            line = self._source[start:end]
            self._spans.append((start, end))
            self._categories.append(LineCategory.NONE)
            self._indents.append(count_leading_spaces(line))

            self._classify_line(index, line)
            self._track_paragraph(index)

        if self._spans:
            self._close_paragraph(len(self._spans) - 1)

        lines = tuple(
            LineRecord(
                index=index,
                start=start,
                end=end,
                category=self._categories[index],
                indent=self._indents[index],
                ignored=index in self._ignored,
            )
            for index, (start, end) in enumerate(self._spans)
        )
        logger.debug(
            "Classified %d lines into %d paragraphs (%d references)",
            len(lines),
            len(self._paragraphs),
            len(self._references),
        )
        return Classification(
            lines=lines,
            paragraphs=tuple(self._paragraphs),
            references=dict(self._references),
            ignored=frozenset(self._ignored),
        )

    def _classify_line(self, index: int, line: str) -> None:
        if is_blank(line):
            # Blank lines inside a fence keep the fence open
            if self._previous_category(index).in_fence:
                self._categories[index] = LineCategory.FENCED_CODE
            self._ignored.add(index)
            return

        if self._try_classify_fence_content(index, line):
            return
        if self._try_classify_setext(index, line):
            return
        if self._try_classify_rule(index, line):
            return
        if self._try_classify_reference(index, line):
            return
        if self._try_classify_indented_code(index, line):
            return
        if self._try_classify_fence(index, line):
            return
        if self._try_classify_atx_heading(index, line):
            return
        self._try_classify_list_item(index, line)

    def _previous_category(self, index: int) -> LineCategory:
        if index == 0:
            return LineCategory.NONE
        return self._categories[index - 1]

    # =========================================================================
    # Paragraph ranges
    # =========================================================================

    def _track_paragraph(self, index: int) -> None:
        """Extend or close the running paragraph after classifying a line."""
        category = self._categories[index]

        if index in self._ignored:
            self._close_paragraph(index - 1)
        elif category in _STANDALONE:
            self._close_paragraph(index - 1)
            self._add_paragraph(index, index)
        elif category is LineCategory.LIST:
            # A list item ends the running paragraph and starts its own
            self._close_paragraph(index - 1)
            self._paragraph_first = index
        elif self._paragraph_first is None:
            self._paragraph_first = index

    def _close_paragraph(self, last: int) -> None:
        first = self._paragraph_first
        self._paragraph_first = None
        if first is not None and last >= first:
            self._add_paragraph(first, last)

    def _add_paragraph(self, first: int, last: int) -> None:
        self._paragraphs.append(
            ParagraphRange(
                first=first,
                last=last,
                start=self._spans[first][0],
                end=self._spans[last][1],
            )
        )

    def _mark_setext_heading(self, heading_index: int) -> None:
        """Give a line turned into a setext heading a paragraph of its own."""
        if self._paragraph_first is not None:
            self._close_paragraph(heading_index - 1)
        elif self._paragraphs and self._paragraphs[-1].last == heading_index:
            # The line already stood alone (a rule or an ATX heading)
            self._paragraphs.pop()
        self._add_paragraph(heading_index, heading_index)


def classify(source: str) -> Classification:
    """Classify ``source`` line by line.

    Classification is a pure function of the text: the same input always
    yields equal results.

    Example:
        >>> classify("# Title").lines[0].category
        <LineCategory.HEADING: 4>
    """
    return LineClassifier(source).classify()

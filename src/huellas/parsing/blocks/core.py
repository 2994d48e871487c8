"""Block walking for Huellas parser.

Second parsing stage: visits every classified line once and turns it into
element events. Block tags (paragraphs, headings, quotes, code blocks, rules)
are opened and closed here; list lines are handed to the list engine and
line content to the inline parser.

Thread Safety:
All methods use instance-local state only.
Safe for concurrent use when each parser instance is used by one thread.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from huellas.lexer.charsets import BLOCKQUOTE_MARKER, HEADING_MARKER
from huellas.records import LineCategory, LineRecord
from huellas.utils.text import (
    lstrip_inline,
    normalize_line_ending,
    strip_indent_level,
    strip_line_ending,
)

if TYPE_CHECKING:
    from huellas.config import ParseConfig
    from huellas.parsing.tag_stack import TagStack
    from huellas.records import Classification

# h1 through h6
MAX_HEADING_LEVEL = 6

# Lines followed by one of these close the block they are in
_CLOSING_FOLLOWERS = frozenset({LineCategory.LIST, LineCategory.HR})

# Categories whose text loses its leading indentation
_STRIPPED_CATEGORIES = frozenset({LineCategory.NONE, LineCategory.H1, LineCategory.H2})


def split_atx_heading(line: str) -> tuple[int, str]:
    """Split an ATX heading line into its level and text.

    Any trailing ``#`` run is removed along with the spaces around it.

    Example:
        >>> split_atx_heading("## Setup ##\\n")
        (2, 'Setup')
        >>> split_atx_heading("####### Deep")
        (6, 'Deep')
    """
    text = strip_line_ending(line)
    run = len(text) - len(text.lstrip(HEADING_MARKER))
    text = text[run:].strip(" ").rstrip(HEADING_MARKER).rstrip(" ")
    return min(run, MAX_HEADING_LEVEL), text


class BlockWalkerMixin:
    """Walk classified lines and emit block-level element events.

    Required Host Attributes:
        - _source: str
        - _classification: Classification
        - _tags: TagStack
        - _config: ParseConfig

    Required Host Methods:
        - _process_list_line(record) -> None
        - _close_lists() -> None
        - _parse_inline(text, allow_autodetect, depth=0) -> None
        - _characters(text) -> None

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _source: str
    # _classification: Classification
    # _tags: TagStack
    # _config: ParseConfig

    def _walk(self) -> None:
        """Visit every non-ignored line, then close whatever is still open."""
        for record in self._classification.lines:
            if record.ignored or record.end == record.start:
                continue
            self._walk_line(record)
        self._tags.close_all()

    def _walk_line(self, record: LineRecord) -> None:
        category = record.category

        if category is LineCategory.HR:
            self._tags.push("hr")
            self._tags.pop()
            return
        if category.is_list:
            self._process_list_line(record)
            return
        if category.is_code:
            self._walk_code_line(record)
            return

        line = record.text(self._source)
        index = record.index
        paragraph = self._classification.paragraph_of(index)
        is_first = paragraph is None or paragraph.first == index
        is_last = paragraph is None or paragraph.last == index

        needs_push = is_first
        if self._tags.current == "code":
            # Text directly after indented code ends the code block
            self._tags.pop_through("pre")
            needs_push = True
        tag = "p"
        heading_level = 0

        if category is LineCategory.HEADING:
            heading_level, line = split_atx_heading(line)
        elif category is LineCategory.H1:
            heading_level = 1
        elif category is LineCategory.H2:
            heading_level = 2
        elif line.startswith(BLOCKQUOTE_MARKER):
            tag = "blockquote"
            if self._tags.current != "blockquote":
                needs_push = True
            line = line[1:]
            if line.startswith(" "):
                line = line[1:]

        if heading_level:
            tag = f"h{heading_level}"

        following = self._classification.category(index + 1)
        will_close = (
            is_last
            or bool(heading_level)
            or self._classification.is_ignored(index + 1)
            or following in _CLOSING_FOLLOWERS
        )

        if needs_push:
            # A paragraph may still be open further down the stack
            while "p" in self._tags:
                self._tags.pop_through("p")
            # Unindented blocks end any list still open
            if record.indent == 0:
                self._close_lists()
            self._tags.push(tag)

        text, needs_br = self._prepare_line(line, record)
        self._parse_inline(text, self._config.autodetect_links)
        if needs_br:
            self._tags.push("br")
            self._tags.pop()

        if will_close and self._tags:
            self._tags.pop()

    def _walk_code_line(self, record: LineRecord) -> None:
        """Emit one line of an indented or fenced code block."""
        line = record.text(self._source)
        if record.category is LineCategory.PRE:
            line = strip_indent_level(line)

        if self._tags.current != "code":
            self._tags.push("pre")
            self._tags.push("code")

        self._characters(normalize_line_ending(line))

        index = record.index
        paragraph = self._classification.paragraph_of(index)
        is_last = paragraph is None or paragraph.last == index
        if is_last or self._classification.category(index + 1) is LineCategory.FENCED_END:
            self._tags.pop_through("pre")

    # =========================================================================
    # Line endings
    # =========================================================================

    def _may_break_after(self, index: int) -> bool:
        """True when the line ending after ``index`` stays inside the block."""
        paragraph = self._classification.paragraph_of(index)
        if paragraph is None or paragraph.last == index:
            return False
        following = index + 1
        return not (
            self._classification.is_ignored(following)
            or self._classification.is_special(following)
        )

    def _prepare_line(self, line: str, record: LineRecord) -> tuple[str, bool]:
        """Resolve the line ending of ``line`` before inline parsing.

        Returns:
            The text to parse and whether a ``br`` element follows it.
        """
        needs_br = False
        if self._may_break_after(record.index):
            line = normalize_line_ending(line)
            if line.endswith("\n") and self._config.github_line_breaks:
                line = line[:-1]
                needs_br = True
            elif line.endswith("  \n"):
                line = line[:-1].rstrip(" ")
                needs_br = True
            elif line.endswith("\\\n"):
                line = line[:-2]
                needs_br = True
        else:
            line = strip_line_ending(line)

        if record.category in _STRIPPED_CATEGORIES:
            line = lstrip_inline(line)
        return line, needs_br

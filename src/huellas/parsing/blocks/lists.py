"""List handling for Huellas parser.

Nesting is driven by indentation measured in quarters (``indent // 4``).
A deeper sub-list line opens one level; a shallower line closes every level
that was opened deeper than it. Each opened level remembers its quarter, so
closing never pops more lists than were opened.

Hanging paragraphs:
An item whose text is followed by blank lines and then an indented plain
line keeps its ``li`` open and wraps its text in ``p``; the indented lines
continue the same item.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from huellas.errors import ParseError
from huellas.lexer.scanners import scan_list_prefix
from huellas.parsing.tag_stack import LIST_TAGS
from huellas.records import LineCategory, LineRecord
from huellas.utils.text import TAB_WIDTH, lstrip_inline

if TYPE_CHECKING:
    from huellas.parsing.tag_stack import TagStack
    from huellas.records import Classification


class ListEngineMixin:
    """Open and close nested ``ul``/``ol`` levels and their items.

    Required Host Attributes:
        - _source: str
        - _classification: Classification
        - _tags: TagStack
        - _list_quarters: list[int]
        - _config: ParseConfig

    Required Host Methods:
        - _prepare_line(line, record) -> tuple[str, bool]
        - _parse_inline(text, allow_autodetect, depth=0) -> None

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _source: str
    # _classification: Classification
    # _tags: TagStack
    # _list_quarters: list[int]

    def _process_list_line(self, record: LineRecord) -> None:
        line = record.text(self._source)
        if record.category is LineCategory.SUB_LIST:
            line = lstrip_inline(line)

        prefix = scan_list_prefix(line)
        if prefix is None:
            raise ParseError(
                f"list line has no list prefix: {line.rstrip()!r}",
                lineno=record.index + 1,
            )

        self._sync_list_levels()
        if self._tags.current == "p":
            self._tags.pop()

        quarter = record.indent // TAB_WIDTH
        previous_quarter = self._previous_quarter(record.index)

        if quarter < previous_quarter:
            self._close_list_levels(quarter)

        if record.category is LineCategory.LIST:
            open_level = not self._list_quarters
        else:
            open_level = not self._list_quarters or quarter > previous_quarter

        if open_level:
            self._tags.push("ol" if prefix.ordered else "ul")
            self._list_quarters.append(quarter)

        if self._tags.current == "li":
            self._tags.pop()
        self._tags.push("li")

        hanging = self._has_hanging_paragraph(record.index)
        if hanging:
            self._tags.push("p")

        text, needs_br = self._prepare_line(line[prefix.content_start :], record)
        self._parse_inline(text, self._config.autodetect_links)
        if needs_br:
            self._tags.push("br")
            self._tags.pop()

        if hanging:
            return

        if self._should_close_list_item(record.index):
            if self._tags.current == "p":
                self._tags.pop()
            if self._tags.current == "li":
                self._tags.pop()
            if self._classification.is_ignored(record.index + 1) and not self._list_resumes(
                record.index
            ):
                self._close_lists()

    def _previous_quarter(self, index: int) -> int:
        previous = self._classification.previous_unignored(index)
        if previous is None:
            return 0
        return self._classification.lines[previous].indent // TAB_WIDTH

    def _sync_list_levels(self) -> None:
        """Forget levels whose list element was closed by someone else."""
        del self._list_quarters[self._tags.count(LIST_TAGS) :]

    def _close_list_levels(self, quarter: int) -> None:
        """Close every open level that was opened deeper than ``quarter``."""
        while self._list_quarters and self._list_quarters[-1] > quarter:
            self._tags.pop_through_any(LIST_TAGS)
            self._list_quarters.pop()

    def _close_lists(self) -> None:
        """Close every open list, outermost included."""
        while self._tags.contains_any(LIST_TAGS):
            self._tags.pop_through_any(LIST_TAGS)
        self._list_quarters.clear()

    def _should_close_list_item(self, index: int) -> bool:
        """An item stays open for a following sub-list or continuation line."""
        following = index + 1
        if self._classification.category(following) is LineCategory.SUB_LIST:
            return False
        if following >= len(self._classification):
            return True
        return self._classification.is_ignored(following) or self._classification.is_special(
            following
        )

    def _list_resumes(self, index: int) -> bool:
        """True when the next non-ignored line after a gap is another item."""
        following = self._classification.next_unignored(index)
        return following is not None and self._classification.category(following).is_list

    def _has_hanging_paragraph(self, index: int) -> bool:
        """True when blank lines and then an indented plain line follow."""
        gap = 0
        for following in range(index + 1, len(self._classification)):
            if self._classification.is_ignored(following):
                gap += 1
                continue
            record = self._classification.lines[following]
            return gap > 0 and record.category is LineCategory.NONE and record.indent > 0
        return False

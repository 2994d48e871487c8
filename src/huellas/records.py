"""Line records and classification results.

The classifier produces one LineRecord per physical line, a list of
paragraph ranges and a reference-definition table. The walker consumes
them read-only.

Thread Safety:
All records are frozen (immutable) and safe to share across threads.
LineCategory is an enum (inherently immutable).

"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto


class LineCategory(Enum):
    """Structural category assigned to a line by the classifier.

    NONE covers plain text, blockquote lines and blank lines.

    """

    NONE = auto()
    H1 = auto()  # Text line above a === underline
    H2 = auto()  # Text line above a --- underline
    HEADING = auto()  # # Heading
    HR = auto()  # ---, * * *, ___
    PRE = auto()  # 4-space or tab indented code
    FENCED_START = auto()  # ``` opening fence
    FENCED_CODE = auto()  # Line between fences
    FENCED_END = auto()  # ``` closing fence
    LIST = auto()  # - item, 1. item
    SUB_LIST = auto()  # Indented item following a list line

    @property
    def is_heading(self) -> bool:
        return self in _HEADING_CATEGORIES

    @property
    def is_list(self) -> bool:
        return self is LineCategory.LIST or self is LineCategory.SUB_LIST

    @property
    def is_code(self) -> bool:
        return self is LineCategory.PRE or self is LineCategory.FENCED_CODE

    @property
    def in_fence(self) -> bool:
        """True for a category after which a fence is still open."""
        return self is LineCategory.FENCED_START or self is LineCategory.FENCED_CODE


_HEADING_CATEGORIES = frozenset({LineCategory.H1, LineCategory.H2, LineCategory.HEADING})


@dataclass(frozen=True, slots=True)
class LineRecord:
    """One physical line of the document.

    Attributes:
        index: Zero-based line number
        start: Offset of the first character
        end: Offset past the line terminator (exclusive)
        category: Structural category
        indent: Leading indentation in spaces (a tab counts as 4)
        ignored: Never walked (blank lines, fences, underlines, definitions)

    """

    index: int
    start: int
    end: int
    category: LineCategory = LineCategory.NONE
    indent: int = 0
    ignored: bool = False

    def text(self, source: str) -> str:
        """The line's text, terminator included."""
        return source[self.start : self.end]

    def has_newline(self, source: str) -> bool:
        return self.end > self.start and source[self.end - 1] == "\n"

    def __repr__(self) -> str:
        flag = " ignored" if self.ignored else ""
        return f"LineRecord({self.index}, {self.category.name}, {self.start}:{self.end}{flag})"


@dataclass(frozen=True, slots=True)
class ParagraphRange:
    """A contiguous run of lines walked as one block.

    Attributes:
        first: Index of the first line
        last: Index of the last line (inclusive)
        start: Offset of the first character
        end: Offset past the last line (exclusive)

    """

    first: int
    last: int
    start: int
    end: int

    def __contains__(self, line_index: object) -> bool:
        return isinstance(line_index, int) and self.first <= line_index <= self.last

    def __len__(self) -> int:
        return self.last - self.first + 1


@dataclass(frozen=True, slots=True)
class ReferenceEntry:
    """A ``[label]: href "title"`` definition."""

    label: str
    href: str
    title: str | None = None

    def attributes(self) -> dict[str, str]:
        """Anchor attributes in emission order: href, then title."""
        attrs = {"href": self.href}
        if self.title is not None:
            attrs["title"] = self.title
        return attrs


@dataclass(frozen=True, slots=True)
class Classification:
    """Everything the first pass learned about a document.

    Lookups past the last line answer as a plain, non-ignored line so the
    walker can probe ``index + 1`` without bounds checks.

    """

    lines: tuple[LineRecord, ...]
    paragraphs: tuple[ParagraphRange, ...]
    references: Mapping[str, ReferenceEntry] = field(default_factory=dict)
    ignored: frozenset[int] = frozenset()
    _paragraph_index: Mapping[int, ParagraphRange] = field(
        default_factory=dict, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self._paragraph_index and self.paragraphs:
            index = {i: p for p in self.paragraphs for i in range(p.first, p.last + 1)}
            object.__setattr__(self, "_paragraph_index", index)

    def __len__(self) -> int:
        return len(self.lines)

    def category(self, line_index: int) -> LineCategory:
        if 0 <= line_index < len(self.lines):
            return self.lines[line_index].category
        return LineCategory.NONE

    def is_ignored(self, line_index: int) -> bool:
        return line_index in self.ignored

    def is_special(self, line_index: int) -> bool:
        """True when the line carries any category besides NONE."""
        return self.category(line_index) is not LineCategory.NONE

    def paragraph_of(self, line_index: int) -> ParagraphRange | None:
        return self._paragraph_index.get(line_index)

    def next_unignored(self, line_index: int) -> int | None:
        """Index of the first non-ignored line after ``line_index``."""
        for index in range(line_index + 1, len(self.lines)):
            if index not in self.ignored:
                return index
        return None

    def previous_unignored(self, line_index: int) -> int | None:
        """Index of the last non-ignored line before ``line_index``."""
        for index in range(line_index - 1, -1, -1):
            if index not in self.ignored:
                return index
        return None

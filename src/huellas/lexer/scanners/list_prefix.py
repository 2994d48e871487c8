"""List item prefix scanner.

Recognises ``-``, ``*`` and ``+`` bullets and ``1.`` style numbers at the very
start of a line, followed by at least one space or tab.
"""

from typing import NamedTuple

from huellas.lexer.charsets import DIGITS, INLINE_WHITESPACE, UNORDERED_LIST_MARKERS

# Longer numbers are treated as text, not as list items
MAX_ORDINAL_DIGITS = 9


class ListPrefix(NamedTuple):
    """A matched list prefix.

    Attributes:
        marker: The bullet or number token (``-``, ``*``, ``+``, ``12.``)
        content_start: Offset where the item text begins
    """

    marker: str
    content_start: int

    @property
    def ordered(self) -> bool:
        """Numbered items open ``ol``; every other marker opens ``ul``."""
        return self.marker.endswith(".")


def scan_list_prefix(line: str) -> ListPrefix | None:
    """Match a list prefix at offset 0 of ``line``.

    Example:
        >>> scan_list_prefix("2. second")
        ListPrefix(marker='2.', content_start=3)
        >>> scan_list_prefix("-not a list") is None
        True
    """
    if not line:
        return None

    first = line[0]
    if first in UNORDERED_LIST_MARKERS:
        pos = 1
    elif first in DIGITS:
        pos = 0
        while pos < len(line) and line[pos] in DIGITS:
            pos += 1
        if pos > MAX_ORDINAL_DIGITS or pos >= len(line) or line[pos] != ".":
            return None
        pos += 1
    else:
        return None

    # The marker must be separated from the item text
    if pos >= len(line) or line[pos] not in INLINE_WHITESPACE:
        return None

    marker = line[:pos]
    while pos < len(line) and line[pos] in INLINE_WHITESPACE:
        pos += 1
    return ListPrefix(marker, pos)

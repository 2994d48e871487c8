"""Emphasis, strong, strikethrough and code span handling.

A marker pairs with the next identical marker on the same line; there is no
flanking analysis. Longer markers are tried first, so ``**`` opens ``strong``
rather than two ``em``.

"""

from __future__ import annotations

from huellas.lexer.charsets import LITERAL_MARKERS, MARKER_TAGS
from huellas.lexer.scanners import find_closing_marker, scan_begin_marker


class EmphasisMixin:
    """Emphasis-family markers.

    Required Host Attributes:
        - _tags: TagStack

    Required Host Methods:
        - _characters(text) -> None
        - _parse_inline(text, allow_autodetect, depth) -> None

    """

    def _try_emphasis(self, text: str, pos: int, allow_autodetect: bool, depth: int) -> int | None:
        """Emit a marked span starting at ``pos``.

        A marker that never closes, or closes with nothing inside, is emitted
        as literal text and scanning resumes right after it.

        Returns:
            Offset past the consumed text, or None if no marker starts here.
        """
        marker = scan_begin_marker(text, pos)
        if marker is None:
            return None

        content_start = pos + len(marker)
        close = find_closing_marker(text, marker, content_start)
        if close == -1:
            self._characters(marker)
            return content_start

        self._tags.push(MARKER_TAGS[marker])
        enclosed = text[content_start:close]
        if marker in LITERAL_MARKERS:
            self._characters(enclosed)
        else:
            self._parse_inline(enclosed, allow_autodetect, depth + 1)
        self._tags.pop()
        return close + len(marker)

"""Core inline scanning for Huellas parser.

Walks a line left to right. Literal runs between marker characters go out
as characters (through the link detector when autodetection is allowed);
at each marker the image, link, emphasis and autolink rules are tried in
that order. A marker no rule claims is emitted as a single character.

Thread Safety:
All methods use instance-local state only.
Safe for concurrent use when each parser instance is used by one thread.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from huellas.lexer.charsets import INLINE_MARKERS
from huellas.utils.logger import get_logger

if TYPE_CHECKING:
    from huellas.autolinks import AutoLinkDetector
    from huellas.config import ParseConfig
    from huellas.parsing.tag_stack import TagStack

logger = get_logger(__name__)


def scan_literal_run(text: str, pos: int) -> int:
    """Offset of the first marker character at or after ``pos``."""
    length = len(text)
    while pos < length and text[pos] not in INLINE_MARKERS:
        pos += 1
    return pos


class InlineParsingCoreMixin:
    """Inline scan loop and literal text emission.

    Required Host Attributes:
        - _tags: TagStack
        - _config: ParseConfig
        - _link_detector: AutoLinkDetector

    Required Host Methods:
        - _characters(text) -> None
        - _try_image(text, pos, allow_autodetect, depth) -> int | None
        - _try_link(text, pos, allow_autodetect, depth) -> int | None
        - _try_emphasis(text, pos, allow_autodetect, depth) -> int | None
        - _try_autolink(text, pos, allow_autodetect, depth) -> int | None

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _tags: TagStack
    # _config: ParseConfig
    # _link_detector: AutoLinkDetector

    def _parse_inline(self, text: str, allow_autodetect: bool, depth: int = 0) -> None:
        """Emit events for one line (or enclosed span) of inline content.

        Args:
            text: Content with block syntax already removed
            allow_autodetect: Whether bare URLs in literal runs become links
            depth: Recursion depth; past the configured limit the text is
                emitted literally
        """
        if depth > self._config.max_nesting_depth:
            logger.debug("Inline nesting deeper than %d, emitting literally", depth - 1)
            self._characters(text)
            return

        rules = self._inline_rules()
        line_allowance = allow_autodetect
        length = len(text)
        pos = 0

        while pos < length:
            run_end = scan_literal_run(text, pos)
            if run_end > pos:
                self._emit_text(text[pos:run_end], allow_autodetect)
                # A failed marker may have split a URL; try again on the next run
                allow_autodetect = line_allowance
                pos = run_end
            if pos >= length:
                break

            for rule in rules:
                end = rule(text, pos, line_allowance, depth)
                if end is not None:
                    pos = end
                    break
            else:
                self._characters(text[pos])
                pos += 1
                run_end = scan_literal_run(text, pos)
                if run_end > pos:
                    self._emit_text(text[pos:run_end], False)
                    pos = run_end

    def _inline_rules(self) -> tuple[Callable[[str, int, bool, int], int | None], ...]:
        return (self._try_image, self._try_link, self._try_emphasis, self._try_autolink)

    def _emit_text(self, text: str, allow_autodetect: bool) -> None:
        """Emit a literal run, wrapping detected links in ``a`` elements."""
        if not allow_autodetect:
            self._characters(text)
            return

        emitted = 0
        for span in self._link_detector.find_links(text):
            if span.start > emitted:
                self._characters(text[emitted : span.start])
            self._tags.push("a", {"href": span.href})
            self._characters(text[span.start : span.end])
            self._tags.pop()
            emitted = span.end
        if emitted < len(text):
            self._characters(text[emitted:])

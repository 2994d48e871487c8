"""Link, image and explicit autolink handling.

References are looked up in the table collected by the classifier. A
reference form whose label is not defined is emitted exactly as written.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from huellas.lexer.scanners import scan_autolink, scan_image, scan_link

if TYPE_CHECKING:
    from huellas.records import Classification


class LinkParsingMixin:
    """Links (``a``), images (``img``) and ``<...>`` autolinks.

    Required Host Attributes:
        - _tags: TagStack
        - _classification: Classification

    Required Host Methods:
        - _characters(text) -> None
        - _parse_inline(text, allow_autodetect, depth) -> None

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _classification: Classification

    def _try_image(self, text: str, pos: int, allow_autodetect: bool, depth: int) -> int | None:
        if text[pos] != "!":
            return None
        match = scan_image(text, pos, self._classification.references)
        if match is None:
            return None
        if match.attributes is None:
            self._characters(text[pos : match.end])
        else:
            self._tags.push("img", match.attributes)
            self._tags.pop()
        return match.end

    def _try_link(self, text: str, pos: int, allow_autodetect: bool, depth: int) -> int | None:
        """Emit a link starting at ``pos``.

        Link text may hold emphasis and images but is never autodetected,
        so a URL used as link text does not produce a second anchor.
        """
        if text[pos] != "[":
            return None
        match = scan_link(text, pos, self._classification.references)
        if match is None:
            return None
        if match.attributes is None:
            self._characters(text[pos : match.end])
            return match.end

        self._tags.push("a", match.attributes)
        self._parse_inline(match.content, False, depth + 1)
        self._tags.pop()
        return match.end

    def _try_autolink(self, text: str, pos: int, allow_autodetect: bool, depth: int) -> int | None:
        match = scan_autolink(text, pos)
        if match is None:
            return None
        self._tags.push("a", match.attributes)
        self._characters(match.content)
        self._tags.pop()
        return match.end

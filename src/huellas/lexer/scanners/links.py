"""Link, image, autolink and reference-definition scanners.

Pure functions over a string and an offset. Each returns None when the
syntax does not match, so callers can fall through to the next rule.

Forms recognised:
- ``[text](url "title")`` and ``[text](<url with spaces>)``
- ``[text][label]``, ``[text][]`` and bare ``[text]`` via the reference table
- ``![alt](src "title")`` and ``![alt][label]``
- ``<scheme:rest>`` and ``<user@host>``
- ``[label]: url "title"`` definition lines

"""

import re
from bisect import bisect_left
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import NamedTuple

from huellas.lexer.charsets import INLINE_WHITESPACE, TITLE_DELIMITERS
from huellas.records import ReferenceEntry
from huellas.utils.text import strip_line_ending

_WHITESPACE_PATTERN = re.compile(r"[ \t\n]+")

_URI_AUTOLINK_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]{1,31}):([^\s<>]*)$")

_EMAIL_AUTOLINK_RE = re.compile(
    r"^([a-zA-Z0-9.!#$%&'*+/=?^_`{|}~\-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?)*)$"
)

# Definitions may be indented by up to three spaces
MAX_DEFINITION_INDENT = 3

# Unbalanced parens allowed inside a bare destination
MAX_DESTINATION_PARENS = 32

# Characters that end the inside of <...> forms
_ANGLE_STOP = frozenset("<>\n")
_AUTOLINK_STOP = frozenset("<> \t\n")


class LinkMatch(NamedTuple):
    """A syntactically complete link or image.

    Attributes:
        attributes: Element attributes, or None when the form was a
            reference whose label is not defined
        content: Link text or image alt text, unparsed
        end: Offset just past the matched syntax
    """

    attributes: dict[str, str] | None
    content: str
    end: int

    @property
    def resolved(self) -> bool:
        return self.attributes is not None


def normalize_label(label: str) -> str:
    """Normalize a reference label for matching.

    Matching is case-insensitive; runs of whitespace count as one space.

    Example:
        >>> normalize_label("  Foo\\tBAR ")
        'foo bar'
    """
    return _WHITESPACE_PATTERN.sub(" ", label.strip()).casefold()


@lru_cache(maxsize=64)
def match_brackets(text: str) -> Mapping[int, int]:
    """Map the offset of every balanced ``[`` to its ``]``.

    One pass with a stack, cached per text, so probing each ``[`` of a line
    costs a lookup instead of a rescan to the end of the line.

    Example:
        >>> dict(match_brackets("[a [b]] ["))
        {3: 5, 0: 6}
    """
    matches: dict[int, int] = {}
    opened: list[int] = []
    for index, char in enumerate(text):
        if char == "[":
            opened.append(index)
        elif char == "]" and opened:
            matches[opened.pop()] = index
    return MappingProxyType(matches)


def find_closing_bracket(text: str, pos: int) -> int:
    """Offset of the ``]`` balancing the ``[`` at ``pos``, or -1."""
    return match_brackets(text).get(pos, -1)


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in INLINE_WHITESPACE:
        pos += 1
    return pos


def _scan_until(text: str, pos: int, stops: frozenset[str]) -> int:
    while pos < len(text) and text[pos] not in stops:
        pos += 1
    return pos


def _scan_destination(text: str, pos: int) -> tuple[str, int] | None:
    """Scan a link destination, either ``<...>`` or a bare run."""
    if pos < len(text) and text[pos] == "<":
        close = _scan_until(text, pos + 1, _ANGLE_STOP)
        if close >= len(text) or text[close] != ">":
            return None
        return text[pos + 1 : close], close + 1

    start = pos
    depth = 0
    while pos < len(text):
        char = text[pos]
        if char in " \t\n":
            break
        if char == "(":
            depth += 1
            if depth > MAX_DESTINATION_PARENS:
                return None
        elif char == ")":
            if depth == 0:
                break
            depth -= 1
        pos += 1
    return text[start:pos], pos


@lru_cache(maxsize=64)
def _title_ends(text: str, closer: str) -> tuple[int, ...]:
    """Offsets of every ``closer`` that is followed by whitespace and ``)``."""
    pattern = re.compile(re.escape(closer) + r"[ \t]*\)")
    return tuple(match.start() for match in pattern.finditer(text))


def _scan_inline_title(text: str, pos: int) -> tuple[str, int] | None:
    """Scan a quoted title that must be followed by the closing ``)``.

    The title ends at the first matching quote that is followed by optional
    whitespace and ``)``, so titles may themselves contain quotes.
    """
    ends = _title_ends(text, TITLE_DELIMITERS[text[pos]])
    found = bisect_left(ends, pos + 1)
    if found == len(ends):
        return None
    close = ends[found]
    return text[pos + 1 : close], _skip_whitespace(text, close + 1)


def scan_inline_target(text: str, pos: int) -> tuple[str, str | None, int] | None:
    """Scan ``(url "title")`` starting at the ``(`` at ``pos``.

    Returns:
        (href, title or None, offset past the closing paren), or None.
    """
    pos = _skip_whitespace(text, pos + 1)
    destination = _scan_destination(text, pos)
    if destination is None:
        return None
    href, pos = destination

    pos = _skip_whitespace(text, pos)
    title: str | None = None
    if pos < len(text) and text[pos] in TITLE_DELIMITERS and text[pos] != "(":
        scanned = _scan_inline_title(text, pos)
        if scanned is None:
            return None
        title, pos = scanned

    if pos < len(text) and text[pos] == ")":
        return href, title, pos + 1
    return None


def scan_link(text: str, pos: int, references: Mapping[str, ReferenceEntry]) -> LinkMatch | None:
    """Scan a hyperlink starting at the ``[`` at ``pos``.

    Inline form beats reference form. A ``[text][label]`` whose label is
    unknown still matches, with ``attributes=None``, so the caller can emit
    the source syntax as text. A bare ``[text]`` only matches when its text
    is a defined label.
    """
    close = find_closing_bracket(text, pos)
    if close == -1:
        return None

    content = text[pos + 1 : close]
    after = close + 1

    if after < len(text) and text[after] == "(":
        target = scan_inline_target(text, after)
        if target is not None:
            href, title, end = target
            attributes = {"href": href}
            if title is not None:
                attributes["title"] = title
            return LinkMatch(attributes, content, end)

    if after < len(text) and text[after] == "[":
        label_close = text.find("]", after + 1)
        if label_close != -1:
            label = text[after + 1 : label_close] or content
            entry = references.get(normalize_label(label))
            return LinkMatch(entry.attributes() if entry else None, content, label_close + 1)

    if content.strip():
        entry = references.get(normalize_label(content))
        if entry is not None:
            return LinkMatch(entry.attributes(), content, after)
    return None


def scan_image(text: str, pos: int, references: Mapping[str, ReferenceEntry]) -> LinkMatch | None:
    """Scan an image starting at the ``!`` at ``pos``.

    Attributes are emitted as ``src``, ``alt`` and, when present, ``title``.
    """
    if not text.startswith("![", pos):
        return None
    link = scan_link(text, pos + 1, references)
    if link is None:
        return None
    if link.attributes is None:
        return link

    attributes = {"src": link.attributes["href"], "alt": link.content}
    if "title" in link.attributes:
        attributes["title"] = link.attributes["title"]
    return LinkMatch(attributes, link.content, link.end)


def scan_autolink(text: str, pos: int) -> LinkMatch | None:
    """Scan ``<scheme:...>`` or ``<user@host>`` starting at ``pos``."""
    if not text.startswith("<", pos):
        return None
    # A second "<" ends the scan
    close = _scan_until(text, pos + 1, _AUTOLINK_STOP)
    if close >= len(text) or text[close] != ">":
        return None

    inner = text[pos + 1 : close]
    if not inner:
        return None

    if _URI_AUTOLINK_RE.match(inner):
        return LinkMatch({"href": inner}, inner, close + 1)
    if "\\" not in inner and _EMAIL_AUTOLINK_RE.match(inner):
        return LinkMatch({"href": f"mailto:{inner}"}, inner, close + 1)
    return None


def scan_reference_definition(line: str) -> ReferenceEntry | None:
    """Recognise a whole line as ``[label]: url "optional title"``.

    Example:
        >>> scan_reference_definition('[Home]: http://e.com "Start"')
        ReferenceEntry(label='home', href='http://e.com', title='Start')
    """
    line = strip_line_ending(line)
    pos = 0
    while pos < len(line) and line[pos] == " ":
        pos += 1
    if pos > MAX_DEFINITION_INDENT or not line.startswith("[", pos):
        return None

    close = line.find("]", pos + 1)
    if close == -1 or not line.startswith(":", close + 1):
        return None
    label = line[pos + 1 : close]
    if not label.strip() or "[" in label:
        return None

    pos = _skip_whitespace(line, close + 2)
    destination = _scan_destination(line, pos)
    if destination is None:
        return None
    href, pos = destination
    if not href:
        return None

    rest = line[pos:].strip()
    title: str | None = None
    if rest:
        closer = TITLE_DELIMITERS.get(rest[0])
        if closer is None or len(rest) < 2 or rest[-1] != closer:
            return None
        # The destination must be separated from the title
        if pos < len(line) and line[pos] not in INLINE_WHITESPACE:
            return None
        title = rest[1:-1]

    return ReferenceEntry(normalize_label(label), href, title)

"""Bare URL and e-mail detection inside literal text.

The inline parser hands every literal run to an AutoLinkDetector when
autodetection is enabled. Detected spans are emitted as ``a`` elements with
an ``href``; everything else stays text.

Usage:
    >>> detector = RegexLinkDetector()
    >>> list(detector.find_links("Visit www.example.com today."))
    [LinkSpan(start=6, end=21, href='http://www.example.com')]

Syntax detected:
- http://example.com, https://example.com, ftp://example.com
- www.example.com (linked as http://)
- user@example.com (linked as mailto:)

Notes:
- Trailing punctuation is not part of a link: ``see http://e.com.``
- A closing paren is kept only when the URL opened one

Thread Safety:
RegexLinkDetector is stateless and thread-safe.

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import NamedTuple, Protocol, runtime_checkable

_URL_PATTERN = re.compile(
    r"(?P<url>(?:(?:https?|ftp)://|www\.)[^\s<>\"]+)"
    r"|(?P<email>[A-Za-z0-9._%+\-]+@[A-Za-z0-9\-]+(?:\.[A-Za-z0-9\-]+)*\.[A-Za-z]{2,})",
    re.IGNORECASE,
)

_TRAILING_PUNCTUATION = ".,:;!?'\""


class LinkSpan(NamedTuple):
    """A detected link: ``text[start:end]`` links to ``href``."""

    start: int
    end: int
    href: str


@runtime_checkable
class AutoLinkDetector(Protocol):
    """Protocol for link detectors.

    Implementations must be synchronous and free of observable side effects.
    Spans must be sorted and must not overlap.

    """

    def find_links(self, text: str) -> Iterable[LinkSpan]:
        """Yield the link spans found in ``text``."""
        ...


def _trim_url(url: str) -> str:
    """Drop trailing punctuation and unbalanced closing parens."""
    while url:
        last = url[-1]
        if last in _TRAILING_PUNCTUATION:
            url = url[:-1]
        elif last == ")" and url.count(")") > url.count("("):
            url = url[:-1]
        else:
            break
    return url


class RegexLinkDetector:
    """Default detector for web addresses and e-mail addresses."""

    __slots__ = ()

    def find_links(self, text: str) -> Iterator[LinkSpan]:
        for match in _URL_PATTERN.finditer(text):
            if match.group("email") is not None:
                yield LinkSpan(match.start(), match.end(), f"mailto:{match.group('email')}")
                continue

            url = _trim_url(match.group("url"))
            _, sep, rest = url.partition("://")
            if sep:
                href = url
            else:
                rest = url[4:] if url.lower().startswith("www.") else ""
                href = f"http://{url}"
            # A bare scheme or "www." is not a link
            if not rest:
                continue
            yield LinkSpan(match.start(), match.start() + len(url), href)


class NullLinkDetector:
    """Detector that never finds anything."""

    __slots__ = ()

    def find_links(self, text: str) -> Iterator[LinkSpan]:
        return iter(())


DEFAULT_LINK_DETECTOR: AutoLinkDetector = RegexLinkDetector()

__all__ = [
    "AutoLinkDetector",
    "DEFAULT_LINK_DETECTOR",
    "LinkSpan",
    "NullLinkDetector",
    "RegexLinkDetector",
]

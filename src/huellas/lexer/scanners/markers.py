"""Emphasis-family marker scanner."""

from huellas.lexer.charsets import EMPHASIS_MARKERS


def scan_begin_marker(text: str, pos: int) -> str | None:
    """Return the longest emphasis-family marker starting at ``pos``.

    Example:
        >>> scan_begin_marker("**bold**", 0)
        '**'
        >>> scan_begin_marker("~single", 0) is None
        True
    """
    for marker in EMPHASIS_MARKERS:
        if text.startswith(marker, pos):
            return marker
    return None


def find_closing_marker(text: str, marker: str, start: int) -> int:
    """Offset of the next occurrence of ``marker`` at or after ``start``.

    Returns -1 when the marker never closes, or when it closes immediately
    (nothing enclosed).
    """
    close = text.find(marker, start)
    if close <= start:
        return -1
    return close

"""Line-level text helpers shared by the classifier and the walker."""

from __future__ import annotations

# A tab counts as a full indent level
TAB_WIDTH = 4


def count_leading_spaces(line: str) -> int:
    """Count leading indentation, expanding each tab to four spaces.

    Example:
        >>> count_leading_spaces("\\t  - item")
        6
    """
    count = 0
    for char in line:
        if char == " ":
            count += 1
        elif char == "\t":
            count += TAB_WIDTH
        else:
            break
    return count


def strip_line_ending(line: str) -> str:
    """Remove a trailing ``\\n`` or ``\\r\\n`` terminator."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def normalize_line_ending(line: str) -> str:
    """Turn a ``\\r\\n`` terminator into ``\\n``, leaving other text alone."""
    if line.endswith("\r\n"):
        return line[:-2] + "\n"
    return line


def is_blank(line: str) -> bool:
    """True when the line holds nothing but whitespace."""
    return not line.strip()


def strip_indent_level(line: str) -> str:
    """Remove one level of code indentation (a tab or four spaces)."""
    if line.startswith("\t"):
        return line[1:]
    if line.startswith("    "):
        return line[4:]
    return line


def lstrip_inline(text: str) -> str:
    """Strip leading spaces and tabs, never line terminators."""
    pos = 0
    while pos < len(text) and text[pos] in " \t":
        pos += 1
    return text[pos:]

"""Utility modules for Huellas.

Provides:
- text: indentation and line-ending helpers
- logger: get_logger for logging
"""

from huellas.utils.logger import get_logger
from huellas.utils.text import (
    count_leading_spaces,
    is_blank,
    lstrip_inline,
    normalize_line_ending,
    strip_indent_level,
    strip_line_ending,
)

__all__ = [
    "count_leading_spaces",
    "get_logger",
    "is_blank",
    "lstrip_inline",
    "normalize_line_ending",
    "strip_indent_level",
    "strip_line_ending",
]

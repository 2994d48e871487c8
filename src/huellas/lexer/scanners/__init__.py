"""Lexical scanners for Huellas.

Low-level recognisers for the small grammars the classifier and the inline
parser need: list prefixes, reference definitions, links, images, explicit
autolinks and emphasis markers. All scanners are pure functions.
"""

from huellas.lexer.scanners.links import (
    LinkMatch,
    find_closing_bracket,
    match_brackets,
    normalize_label,
    scan_autolink,
    scan_image,
    scan_inline_target,
    scan_link,
    scan_reference_definition,
)
from huellas.lexer.scanners.list_prefix import ListPrefix, scan_list_prefix
from huellas.lexer.scanners.markers import find_closing_marker, scan_begin_marker

__all__ = [
    "LinkMatch",
    "ListPrefix",
    "find_closing_bracket",
    "find_closing_marker",
    "match_brackets",
    "normalize_label",
    "scan_autolink",
    "scan_begin_marker",
    "scan_image",
    "scan_inline_target",
    "scan_link",
    "scan_list_prefix",
    "scan_reference_definition",
]

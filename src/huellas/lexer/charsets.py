"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from huellas.lexer.charsets import INLINE_MARKERS

    if char in INLINE_MARKERS:  # O(1) lookup
        ...
"""

# Characters that stop a literal run during inline scanning
INLINE_MARKERS: frozenset[str] = frozenset("*_~[!`<")

# Emphasis-family markers, longest first so ** wins over *
EMPHASIS_MARKERS: tuple[str, ...] = ("**", "__", "~~", "*", "_", "`")

# Element opened for each emphasis-family marker
MARKER_TAGS: dict[str, str] = {
    "*": "em",
    "_": "em",
    "**": "strong",
    "__": "strong",
    "~~": "del",
    "`": "code",
}

# Markers whose enclosed text is never scanned further
LITERAL_MARKERS: frozenset[str] = frozenset("`")

# Characters a horizontal rule line may consist of
RULE_CHARS: str = " -*_\n"

# Setext underline characters
SETEXT_CHARS: frozenset[str] = frozenset("=-")

# Unordered list bullets
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-*+")

# ASCII digits (str.isdigit() also accepts other Unicode digits)
DIGITS: frozenset[str] = frozenset("0123456789")

# Spaces and tabs, never line terminators
INLINE_WHITESPACE: frozenset[str] = frozenset(" \t")

# Title delimiters for link targets and reference definitions
TITLE_DELIMITERS: dict[str, str] = {'"': '"', "'": "'", "(": ")"}

# Block prefixes
BLOCKQUOTE_MARKER = ">"
HEADING_MARKER = "#"
FENCE_MARKER = "```"

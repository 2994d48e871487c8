"""Line classification for Huellas.

The first of the two parsing stages: one forward pass over the document
that produces per-line records, paragraph ranges and the reference table.

Usage:
    >>> from huellas.lexer import classify
    >>> result = classify("# Hello\\n\\nWorld")
    >>> [line.category.name for line in result.lines]
    ['HEADING', 'NONE', 'NONE']

"""

from huellas.lexer.core import LineClassifier, classify, split_lines

__all__ = ["LineClassifier", "classify", "split_lines"]

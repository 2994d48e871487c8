"""Parsing subsystem for Huellas.

Provides mixin classes for the walking stage:
- `BlockParsingMixin`: Block-level events (paragraphs, headings, lists, code)
- `InlineParsingMixin`: Inline events (emphasis, links, images, code spans)
- `TagStack`: Open-element stack that emits start/end events

Example:
    >>> from huellas.parsing import BlockParsingMixin, InlineParsingMixin
    >>> class Parser(BlockParsingMixin, InlineParsingMixin):
    ...     pass

"""

from huellas.parsing.blocks import BlockParsingMixin
from huellas.parsing.inline import InlineParsingMixin
from huellas.parsing.tag_stack import LIST_TAGS, TagStack

__all__ = [
    "BlockParsingMixin",
    "InlineParsingMixin",
    "LIST_TAGS",
    "TagStack",
]

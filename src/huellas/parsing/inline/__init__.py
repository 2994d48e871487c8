"""Inline parsing subsystem for Huellas parser.

Provides mixins for inline Markdown content:
- Emphasis and strong (*, _, **, __)
- Strikethrough (~~)
- Code spans (`)
- Links, images and reference links
- Explicit (<...>) and detected bare-URL autolinks

Architecture:
A single left-to-right scan with bounded recursion into enclosed spans.
Markers pair with the next identical marker; there is no delimiter stack.

"""

from __future__ import annotations

from huellas.parsing.inline.core import InlineParsingCoreMixin, scan_literal_run
from huellas.parsing.inline.emphasis import EmphasisMixin
from huellas.parsing.inline.links import LinkParsingMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    EmphasisMixin,
    LinkParsingMixin,
):
    """Combined inline parsing mixin.

    Required Host Attributes:
        - _tags: TagStack
        - _config: ParseConfig
        - _classification: Classification
        - _link_detector: AutoLinkDetector

    Required Host Methods:
        - _characters(text) -> None

    """

    pass


__all__ = [
    "InlineParsingMixin",
    "InlineParsingCoreMixin",
    "EmphasisMixin",
    "LinkParsingMixin",
    "scan_literal_run",
]

"""Block walking subsystem for Huellas parser.

Provides mixins for the second parsing stage:
- core: line dispatch, paragraphs, headings, quotes, code blocks, rules
- lists: nested list levels, items and hanging paragraphs

"""

from huellas.parsing.blocks.core import BlockWalkerMixin, split_atx_heading
from huellas.parsing.blocks.lists import ListEngineMixin


class BlockParsingMixin(
    BlockWalkerMixin,
    ListEngineMixin,
):
    """Combined block walking mixin.

    Required Host Attributes:
        - _source: str
        - _classification: Classification
        - _tags: TagStack
        - _list_quarters: list[int]
        - _config: ParseConfig

    Required Host Methods:
        - _parse_inline(text, allow_autodetect, depth=0) -> None
        - _characters(text) -> None

    """

    pass


__all__ = [
    "BlockParsingMixin",
    "BlockWalkerMixin",
    "ListEngineMixin",
    "split_atx_heading",
]

"""List item classifier mixin."""

from huellas.lexer.scanners.list_prefix import scan_list_prefix
from huellas.records import LineCategory
from huellas.utils.text import lstrip_inline

# Indent deltas (current minus previous) that keep a list going
SIBLING_OR_SHALLOWER = range(-4, 1)
DEEPER = range(4, 9)


class ListClassifierMixin:
    """Mixin providing list item classification."""

    _categories: list[LineCategory]
    _indents: list[int]

    def _previous_category(self, index: int) -> LineCategory:
        """Category of the line above. Implemented by LineClassifier."""
        raise NotImplementedError

    def _try_classify_list_item(self, index: int, line: str) -> bool:
        """Try to classify the line as a list item.

        An unindented prefix starts (or continues) a list. An indented prefix
        only counts right after another list line, and only when the indent
        moved by at most one level shallower or one to two levels deeper.
        """
        if scan_list_prefix(line) is not None:
            self._categories[index] = LineCategory.LIST
            return True

        if index == 0 or not self._previous_category(index).is_list:
            return False

        delta = self._indents[index] - self._indents[index - 1]
        if delta not in SIBLING_OR_SHALLOWER and delta not in DEEPER:
            return False

        if scan_list_prefix(lstrip_inline(line)) is None:
            return False

        self._categories[index] = LineCategory.SUB_LIST
        return True

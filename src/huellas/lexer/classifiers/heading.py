"""ATX heading classifier mixin."""

from huellas.lexer.charsets import HEADING_MARKER
from huellas.records import LineCategory


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    _categories: list[LineCategory]

    def _try_classify_atx_heading(self, index: int, line: str) -> bool:
        """Any line starting with ``#`` is a heading; the walker counts the level."""
        if not line.startswith(HEADING_MARKER):
            return False
        self._categories[index] = LineCategory.HEADING
        return True

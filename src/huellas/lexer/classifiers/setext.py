"""Setext heading classifier mixin."""

from huellas.lexer.charsets import SETEXT_CHARS
from huellas.records import LineCategory


class SetextClassifierMixin:
    """Mixin providing setext underline classification.

    An underline retroactively turns the line above it into a heading, so
    this is the only classifier that rewrites an earlier line.
    """

    _categories: list[LineCategory]
    _ignored: set[int]

    def _mark_setext_heading(self, heading_index: int) -> None:
        """Split the heading line out of its paragraph. Implemented by LineClassifier."""
        raise NotImplementedError

    def _try_classify_setext(self, index: int, line: str) -> bool:
        """Try to classify the line as a setext underline.

        Args:
            index: Line index (never 0; the first line has nothing above it)
            line: Raw line text

        Returns:
            True if the previous line became H1/H2 and this line is ignored.
        """
        if index == 0 or (index - 1) in self._ignored:
            return False

        underline = line.strip()
        if not underline or underline[0] not in SETEXT_CHARS:
            return False
        if underline.count(underline[0]) != len(underline):
            return False

        level = LineCategory.H1 if underline[0] == "=" else LineCategory.H2
        self._categories[index - 1] = level
        self._ignored.add(index)
        self._mark_setext_heading(index - 1)
        return True

"""Horizontal rule classifier mixin."""

from huellas.lexer.charsets import RULE_CHARS
from huellas.records import LineCategory
from huellas.utils.text import strip_line_ending


class ThematicClassifierMixin:
    """Mixin providing horizontal rule classification."""

    _categories: list[LineCategory]

    def _try_classify_rule(self, index: int, line: str) -> bool:
        """Try to classify the line as a horizontal rule.

        A rule is built only from spaces, ``-``, ``*`` and ``_``. A line that
        is built from those characters but holds a run of three spaces is
        not a rule, yet still stops any further classification.

        Returns:
            True if classification of this line is finished.
        """
        content = strip_line_ending(line)
        if content.strip(RULE_CHARS):
            return False

        if "   " not in content.strip(" \t"):
            self._categories[index] = LineCategory.HR
        return True

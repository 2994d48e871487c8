"""Indented and fenced code classifier mixin."""

from huellas.lexer.charsets import FENCE_MARKER
from huellas.records import LineCategory


class CodeClassifierMixin:
    """Mixin providing code block classification.

    Fences toggle purely on the category of the line above: a fence line
    after FENCED_START/FENCED_CODE closes the block, any other fence line
    opens one. Fence length and info string are not compared.
    """

    _categories: list[LineCategory]
    _ignored: set[int]

    def _previous_category(self, index: int) -> LineCategory:
        """Category of the line above. Implemented by LineClassifier."""
        raise NotImplementedError

    def _try_classify_fence_content(self, index: int, line: str) -> bool:
        """Claim every non-fence line inside an open fence as FENCED_CODE.

        Runs before all other rules so code text is never read as markup.
        """
        if not self._previous_category(index).in_fence or line.startswith(FENCE_MARKER):
            return False
        self._categories[index] = LineCategory.FENCED_CODE
        return True

    def _try_classify_indented_code(self, index: int, line: str) -> bool:
        """Indented code needs a blank line, another PRE line, or document start above."""
        if not (line.startswith("\t") or line.startswith("    ")):
            return False

        if index > 0 and not (
            self._previous_category(index) is LineCategory.PRE or (index - 1) in self._ignored
        ):
            return False

        self._categories[index] = LineCategory.PRE
        return True

    def _try_classify_fence(self, index: int, line: str) -> bool:
        if not line.startswith(FENCE_MARKER):
            return False

        if self._previous_category(index).in_fence:
            self._categories[index] = LineCategory.FENCED_END
        else:
            self._categories[index] = LineCategory.FENCED_START
        self._ignored.add(index)
        return True

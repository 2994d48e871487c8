"""Reference definition classifier mixin."""

from huellas.lexer.scanners.links import scan_reference_definition
from huellas.records import ReferenceEntry


class LinkRefClassifierMixin:
    """Mixin providing ``[label]: url "title"`` classification."""

    _ignored: set[int]
    _references: dict[str, ReferenceEntry]

    def _try_classify_reference(self, index: int, line: str) -> bool:
        """Record a reference definition and hide its line.

        A later definition of the same label replaces an earlier one.
        """
        entry = scan_reference_definition(line)
        if entry is None:
            return False

        self._references[entry.label] = entry
        self._ignored.add(index)
        return True

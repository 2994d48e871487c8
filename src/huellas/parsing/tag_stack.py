"""Open-element stack.

Every push reports a start event to the sink and every pop reports the
matching end event, so the stack is the single place where element events
originate. Balance of the event stream follows from the stack being empty
at the end of the walk.

Thread Safety:
Per-parse state. Not shared between parser instances.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from huellas.errors import TagStackError
from huellas.events import SinkCapabilities

LIST_TAGS = frozenset({"ul", "ol"})


class TagStack:
    """Ordered sequence of currently open element names.

    Usage:
        >>> stack = TagStack(SinkCapabilities.inspect(recorder))
        >>> stack.push("ul")
        >>> stack.push("li")
        >>> stack.pop_through("ul")
        >>> len(stack)
        0

    """

    __slots__ = ("_names", "_sink")

    def __init__(self, sink: SinkCapabilities) -> None:
        self._names: list[str] = []
        self._sink = sink

    def push(self, name: str, attributes: Mapping[str, str] | None = None) -> None:
        """Open ``name`` and report its start."""
        self._names.append(name)
        if self._sink.supports("start_element"):
            # Sinks get their own copy of the attributes
            self._sink.start_element(name, dict(attributes) if attributes else {})

    def pop(self) -> str:
        """Close the innermost element and report its end.

        Raises:
            TagStackError: The stack is empty.
        """
        if not self._names:
            raise TagStackError("pop from empty tag stack")
        name = self._names[-1]
        self._sink.end_element(name)
        self._names.pop()
        return name

    def pop_through(self, name: str) -> None:
        """Pop every element up to and including the innermost ``name``.

        Raises:
            TagStackError: ``name`` is not open.
        """
        if name not in self._names:
            raise TagStackError(f"cannot close <{name}>, it is not open", tuple(self._names))
        while self.pop() != name:
            pass

    def pop_through_any(self, names: frozenset[str]) -> str:
        """Pop up to and including the innermost element named in ``names``."""
        if not self.contains_any(names):
            raise TagStackError(
                f"cannot close any of {sorted(names)}, none is open", tuple(self._names)
            )
        while True:
            popped = self.pop()
            if popped in names:
                return popped

    def close_all(self) -> None:
        """Pop everything, innermost first."""
        while self._names:
            self.pop()

    @property
    def current(self) -> str | None:
        """Innermost open element, or None."""
        return self._names[-1] if self._names else None

    def contains_any(self, names: frozenset[str]) -> bool:
        return any(name in names for name in self._names)

    def count(self, names: frozenset[str]) -> int:
        return sum(1 for name in self._names if name in names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __repr__(self) -> str:
        return f"TagStack({' > '.join(self._names) or 'empty'})"

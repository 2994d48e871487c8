"""Event sink protocol and helpers.

A sink receives the parse as a stream of callbacks. Every callback is
optional; which ones a sink implements is worked out once, when the sink is
attached to a parser, and never re-checked per event.

Example:
    >>> from huellas import MarkdownParser, EventRecorder
    >>> recorder = EventRecorder()
    >>> MarkdownParser("# Hi", recorder).parse()
    True
    >>> recorder.tags()
    ['h1', '/h1']

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Literal, Protocol, runtime_checkable

EventKind = Literal["start_document", "end_document", "start", "end", "characters"]


@runtime_checkable
class EventSink(Protocol):
    """Protocol for event consumers.

    Implementations may define any subset of these methods. Missing ones are
    skipped silently. Exceptions raised by a callback propagate out of
    ``parse()`` and abort the parse.

    """

    def start_document(self) -> None: ...

    def end_document(self) -> None: ...

    def start_element(self, name: str, attributes: Mapping[str, str]) -> None: ...

    def end_element(self, name: str) -> None: ...

    def found_characters(self, text: str) -> None: ...


def _noop(*args: object) -> None:
    return None


@dataclass(frozen=True, slots=True)
class SinkCapabilities:
    """Bound handlers of a sink, resolved once at attach time.

    Handlers the sink does not provide are replaced by a no-op so dispatch
    never branches per event; ``supported`` records which were present so
    callers can skip building arguments nobody receives.

    """

    start_document: Callable[[], None] = _noop
    end_document: Callable[[], None] = _noop
    start_element: Callable[[str, Mapping[str, str]], None] = _noop
    end_element: Callable[[str], None] = _noop
    found_characters: Callable[[str], None] = _noop
    supported: frozenset[str] = frozenset()

    @classmethod
    def inspect(cls, sink: object | None) -> SinkCapabilities:
        """Resolve which callbacks ``sink`` implements."""
        if sink is None:
            return _NO_CAPABILITIES
        handlers: dict[str, Callable[..., None]] = {}
        for name in _CALLBACK_NAMES:
            handler = getattr(sink, name, None)
            if callable(handler):
                handlers[name] = handler
        return cls(**handlers, supported=frozenset(handlers))

    def supports(self, callback: str) -> bool:
        return callback in self.supported


_CALLBACK_NAMES = (
    "start_document",
    "end_document",
    "start_element",
    "end_element",
    "found_characters",
)

_NO_CAPABILITIES = SinkCapabilities()


@dataclass(frozen=True, slots=True)
class Event:
    """One recorded callback.

    Attributes:
        kind: Which callback fired
        name: Element name for start/end events, empty otherwise
        attributes: Element attributes for start events
        text: Character data for characters events

    """

    kind: EventKind
    name: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)
    text: str = ""

    def __repr__(self) -> str:
        if self.kind == "start":
            attrs = "".join(f" {k}={v!r}" for k, v in self.attributes.items())
            return f"<{self.name}{attrs}>"
        if self.kind == "end":
            return f"</{self.name}>"
        if self.kind == "characters":
            return repr(self.text)
        return f"[{self.kind}]"


class EventRecorder:
    """A sink that keeps every event in order.

    Useful for tests and for consumers that prefer a list to callbacks.

    """

    __slots__ = ("events",)

    def __init__(self) -> None:
        self.events: list[Event] = []

    def start_document(self) -> None:
        self.events.append(Event("start_document"))

    def end_document(self) -> None:
        self.events.append(Event("end_document"))

    def start_element(self, name: str, attributes: Mapping[str, str]) -> None:
        self.events.append(Event("start", name=name, attributes=dict(attributes)))

    def end_element(self, name: str) -> None:
        self.events.append(Event("end", name=name))

    def found_characters(self, text: str) -> None:
        self.events.append(Event("characters", text=text))

    def tags(self) -> list[str]:
        """Element events as ``name`` / ``/name`` strings."""
        return [
            event.name if event.kind == "start" else f"/{event.name}"
            for event in self.events
            if event.kind in ("start", "end")
        ]

    def text(self) -> str:
        """All character data joined together."""
        return "".join(event.text for event in self.events if event.kind == "characters")

    def compact(self) -> list[str]:
        """Tags and text interleaved, adjacent character runs merged.

        Example:
            >>> recorder.compact()
            ['p', 'Hello ', 'em', 'world', '/em', '/p']
        """
        out: list[str] = []
        pending: list[str] = []
        for event in self.events:
            if event.kind == "characters":
                pending.append(event.text)
                continue
            if pending:
                out.append("".join(pending))
                pending = []
            if event.kind == "start":
                out.append(event.name)
            elif event.kind == "end":
                out.append(f"/{event.name}")
        if pending:
            out.append("".join(pending))
        return out

    def __len__(self) -> int:
        return len(self.events)

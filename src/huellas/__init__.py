"""
Huellas: event-based Markdown parser.

Turns Markdown-flavoured plain text into a stream of structural events
(document start/end, element start/end, character runs) delivered
synchronously to a sink, without building a tree. Zero runtime dependencies.

Quick Start:
    >>> from huellas import parse_events
    >>> parse_events("# Hello **World**")
    [[start_document], <h1>, 'Hello ', <strong>, 'World', </strong>, </h1>, [end_document]]

    >>> # Or drive your own sink
    >>> from huellas import parse
    >>> class Printer:
    ...     def start_element(self, name, attributes):
    ...         print("open", name, dict(attributes))
    >>> parse("[x](http://e.com)", Printer())
    open p {}
    open a {'href': 'http://e.com'}
    True

    >>> # Or use the high-level Markdown class
    >>> from huellas import Markdown
    >>> md = Markdown(github_line_breaks=True)
    >>> events = md("one\\ntwo")

Installation:
    pip install huellas
"""

from collections.abc import Iterable

from huellas.autolinks import (
    DEFAULT_LINK_DETECTOR,
    AutoLinkDetector,
    LinkSpan,
    NullLinkDetector,
    RegexLinkDetector,
)
from huellas.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from huellas.errors import HuellasError, ParseError, TagStackError
from huellas.events import Event, EventRecorder, EventSink, SinkCapabilities
from huellas.lexer import LineClassifier, classify
from huellas.parser import MarkdownParser
from huellas.records import (
    Classification,
    LineCategory,
    LineRecord,
    ParagraphRange,
    ReferenceEntry,
)

__version__ = "0.1.0"


def parse(
    source: str,
    sink: EventSink | object | None,
    *,
    config: ParseConfig | None = None,
    link_detector: AutoLinkDetector | None = None,
) -> bool:
    """Parse Markdown source, reporting events to ``sink``.

    Args:
        source: Markdown source text
        sink: Event consumer implementing any subset of EventSink
        config: Parse configuration (uses the current context's if None)
        link_detector: Bare-URL detector (uses RegexLinkDetector if None)

    Returns:
        False for empty input, True otherwise

    Example:
        >>> recorder = EventRecorder()
        >>> parse("- a\\n- b", recorder)
        True
        >>> recorder.tags()
        ['ul', 'li', '/li', 'li', '/li', '/ul']
    """
    parser = MarkdownParser(source, sink, link_detector=link_detector)
    if config is None:
        return parser.parse()

    with parse_config_context(config):
        return parser.parse()


def parse_events(source: str, *, config: ParseConfig | None = None) -> list[Event]:
    """Parse Markdown source and return the recorded events.

    Example:
        >>> [e for e in parse_events("Title\\n=====") if e.kind == "characters"]
        ['Title']
    """
    recorder = EventRecorder()
    parse(source, recorder, config=config)
    return recorder.events


class Markdown:
    """High-level Markdown processor holding one immutable configuration.

    Usage:
        >>> md = Markdown()
        >>> events = md("# Hello **World**")
        >>> events[1]
        <h1>

        >>> # Stream into your own sink
        >>> md.parse("Some *text*", my_sink)
        True

        >>> # Batch
        >>> batches = md.parse_many(["# Doc 1", "# Doc 2"])

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config", "_link_detector")

    def __init__(
        self,
        *,
        github_line_breaks: bool = False,
        autodetect_links: bool = True,
        max_nesting_depth: int = 16,
        link_detector: AutoLinkDetector | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            github_line_breaks: Turn every line ending inside a paragraph into ``br``
            autodetect_links: Link bare URLs and e-mail addresses
            max_nesting_depth: Deepest inline recursion before text is emitted literally
            link_detector: Bare-URL detector (uses RegexLinkDetector if None)
        """
        # Build immutable config once (thread-safe, reused across calls)
        self._config = ParseConfig(
            github_line_breaks=github_line_breaks,
            autodetect_links=autodetect_links,
            max_nesting_depth=max_nesting_depth,
        )
        self._link_detector = link_detector

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> list[Event]:
        """Parse and record events in one call.

        Args:
            source: Markdown source text

        Returns:
            Recorded events, empty for empty input

        """
        recorder = EventRecorder()
        self.parse(source, recorder)
        return recorder.events

    def parse(self, source: str, sink: EventSink | object | None) -> bool:
        """Parse Markdown source, reporting events to ``sink``.

        Thread Safety:
            Sets config via ContextVar (thread-local). Safe for concurrent use.

        """
        # Set config for this parse (thread-local via ContextVar)
        set_parse_config(self._config)
        try:
            return MarkdownParser(source, sink, link_detector=self._link_detector).parse()
        finally:
            reset_parse_config()

    def parse_many(self, sources: Iterable[str]) -> list[list[Event]]:
        """Parse multiple sources, returning one event list per source.

        Sets config once, parses all, resets once.

        Example:
            >>> md = Markdown()
            >>> [len(events) for events in md.parse_many(["", "# Doc"])]
            [0, 5]
        """
        set_parse_config(self._config)
        try:
            result: list[list[Event]] = []
            for source in sources:
                recorder = EventRecorder()
                MarkdownParser(source, recorder, link_detector=self._link_detector).parse()
                result.append(recorder.events)
            return result
        finally:
            reset_parse_config()

    def __repr__(self) -> str:
        return f"Markdown({self._config!r})"


__all__ = [
    # Main API
    "parse",
    "parse_events",
    "classify",
    "Markdown",
    "MarkdownParser",
    # Events
    "Event",
    "EventRecorder",
    "EventSink",
    "SinkCapabilities",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Classification
    "LineClassifier",
    "Classification",
    "LineCategory",
    "LineRecord",
    "ParagraphRange",
    "ReferenceEntry",
    # Link detection
    "AutoLinkDetector",
    "DEFAULT_LINK_DETECTOR",
    "LinkSpan",
    "NullLinkDetector",
    "RegexLinkDetector",
    # Errors
    "HuellasError",
    "ParseError",
    "TagStackError",
    # Version
    "__version__",
]

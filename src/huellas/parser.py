"""Event-emitting Markdown parser.

Runs the two parsing stages over one document: the line classifier, then
the walker, which reports element and character events to a sink as it
goes. No tree is built.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `BlockParsingMixin`: Line dispatch, block tags and lists
- `InlineParsingMixin`: Emphasis, links, images, code spans, autolinks

Thread Safety:
- Parser instances are single-use and hold per-parse state only
- Configuration is read from ContextVar (thread-local)
- Sink callbacks run synchronously on the calling thread

"""

from __future__ import annotations

from huellas.autolinks import DEFAULT_LINK_DETECTOR, AutoLinkDetector
from huellas.config import ParseConfig, get_parse_config
from huellas.errors import ParseError
from huellas.events import EventSink, SinkCapabilities
from huellas.lexer import classify
from huellas.parsing import BlockParsingMixin, InlineParsingMixin, TagStack
from huellas.records import Classification
from huellas.utils.logger import get_logger

logger = get_logger(__name__)


class MarkdownParser(
    BlockParsingMixin,
    InlineParsingMixin,
):
    """Single-pass-classify-then-walk Markdown parser.

    Usage:
        >>> recorder = EventRecorder()
        >>> MarkdownParser("*em* and **strong**", recorder).parse()
        True
        >>> recorder.compact()
        ['p', 'em', 'em', '/em', ' and ', 'strong', 'strong', '/strong', '/p']

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local)
        when ``parse()`` starts.

    Sinks:
        The sink may implement any subset of the EventSink callbacks. Which
        ones it implements is resolved once, when it is attached; exceptions
        raised by a callback abort the parse and propagate to the caller.

    """

    __slots__ = (
        # Input
        "_source",
        "_link_detector",
        # Attached sink, raw and resolved
        "_sink_target",
        "_sink",
        # Per-parse state
        "_parsed",
        "_config",
        "_classification",
        "_tags",
        "_list_quarters",
    )

    def __init__(
        self,
        source: str,
        sink: EventSink | object | None = None,
        *,
        link_detector: AutoLinkDetector | None = None,
    ) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() around ``parse()``
        if you need non-default configuration.

        Args:
            source: Markdown source text
            sink: Event consumer; may also be attached later
            link_detector: Bare-URL detector (uses RegexLinkDetector if None)

        """
        self._source = source
        self._link_detector = link_detector or DEFAULT_LINK_DETECTOR
        self._parsed = False
        self._config: ParseConfig = get_parse_config()
        self._classification: Classification | None = None
        self._tags = TagStack(SinkCapabilities())
        self._list_quarters: list[int] = []
        self.attach(sink)

    def attach(self, sink: EventSink | object | None) -> None:
        """Attach the sink that receives events, resolving its callbacks."""
        self._sink_target = sink
        self._sink = SinkCapabilities.inspect(sink)

    @property
    def sink(self) -> EventSink | object | None:
        """The attached sink, as given."""
        return self._sink_target

    @property
    def source(self) -> str:
        return self._source

    @property
    def classification(self) -> Classification | None:
        """Line classification of the source, available after ``parse()``."""
        return self._classification

    def parse(self) -> bool:
        """Classify the source and report it to the sink.

        Returns:
            False for empty input (no events are emitted), True otherwise.

        Raises:
            ParseError: The parser was already used.

        """
        if self._parsed:
            raise ParseError("MarkdownParser is single-use; create a new parser per document")
        self._parsed = True

        if not self._source:
            logger.debug("Empty source, nothing to parse")
            return False

        self._config = get_parse_config()
        self._classification = classify(self._source)
        self._tags = TagStack(self._sink)
        self._list_quarters = []

        self._sink.start_document()
        self._walk()
        self._sink.end_document()
        return True

    def _characters(self, text: str) -> None:
        if text:
            self._sink.found_characters(text)

    def __repr__(self) -> str:
        state = "parsed" if self._parsed else "ready"
        return f"MarkdownParser({len(self._source)} chars, {state})"

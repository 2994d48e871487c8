"""Tests for sinks: capability detection, partial sinks, EventRecorder."""

from collections.abc import Mapping

import pytest

from huellas import Event, EventRecorder, EventSink, MarkdownParser, SinkCapabilities, parse


class TextOnlySink:
    def __init__(self) -> None:
        self.chunks: list[str] = []

    def found_characters(self, text: str) -> None:
        self.chunks.append(text)


class TagOnlySink:
    def __init__(self) -> None:
        self.tags: list[str] = []

    def start_element(self, name: str, attributes: Mapping[str, str]) -> None:
        self.tags.append(name)

    def end_element(self, name: str) -> None:
        self.tags.append(f"/{name}")


class ExplodingSink:
    def start_element(self, name: str, attributes: Mapping[str, str]) -> None:
        if name == "em":
            raise RuntimeError("boom")


class TestSinkCapabilities:
    """Capabilities are resolved once from the sink's methods."""

    def test_full_sink(self) -> None:
        caps = SinkCapabilities.inspect(EventRecorder())
        assert caps.supported == frozenset(
            {"start_document", "end_document", "start_element", "end_element", "found_characters"}
        )

    def test_partial_sink(self) -> None:
        caps = SinkCapabilities.inspect(TextOnlySink())
        assert caps.supports("found_characters")
        assert not caps.supports("start_element")

    def test_none_sink(self) -> None:
        caps = SinkCapabilities.inspect(None)
        assert caps.supported == frozenset()
        # Missing handlers are no-ops
        caps.start_element("p", {})
        caps.found_characters("text")

    def test_non_callable_attribute_is_ignored(self) -> None:
        class Odd:
            start_document = "not callable"

        assert not SinkCapabilities.inspect(Odd()).supports("start_document")

    def test_resolved_once(self) -> None:
        """Methods added after attaching are not picked up."""
        sink = TextOnlySink()
        parser = MarkdownParser("# Hi", sink)
        calls: list[str] = []
        sink.start_element = lambda name, attributes: calls.append(name)  # type: ignore[attr-defined]
        parser.parse()
        assert calls == []
        assert sink.chunks == ["Hi"]

    def test_recorder_satisfies_protocol(self) -> None:
        assert isinstance(EventRecorder(), EventSink)


class TestPartialSinks:
    """Sinks implementing a subset of callbacks."""

    def test_text_only(self) -> None:
        sink = TextOnlySink()
        parse("# Title\n\nSome *text*", sink)
        assert sink.chunks == ["Title", "Some ", "text"]

    def test_tags_only(self) -> None:
        sink = TagOnlySink()
        parse("- a", sink)
        assert sink.tags == ["ul", "li", "/li", "/ul"]

    def test_object_without_callbacks(self) -> None:
        assert parse("# Title", object()) is True

    def test_sink_exception_propagates(self) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            parse("a *b* c", ExplodingSink())


class TestEventRecorder:
    """Test the recording sink."""

    @pytest.fixture
    def recorder(self) -> EventRecorder:
        recorder = EventRecorder()
        parse("Hello *world*", recorder)
        return recorder

    def test_events(self, recorder: EventRecorder) -> None:
        assert recorder.events == [
            Event("start_document"),
            Event("start", name="p"),
            Event("characters", text="Hello "),
            Event("start", name="em"),
            Event("characters", text="world"),
            Event("end", name="em"),
            Event("end", name="p"),
            Event("end_document"),
        ]

    def test_tags(self, recorder: EventRecorder) -> None:
        assert recorder.tags() == ["p", "em", "/em", "/p"]

    def test_text(self, recorder: EventRecorder) -> None:
        assert recorder.text() == "Hello world"

    def test_compact(self, recorder: EventRecorder) -> None:
        assert recorder.compact() == ["p", "Hello ", "em", "world", "/em", "/p"]

    def test_len(self, recorder: EventRecorder) -> None:
        assert len(recorder) == 8

    def test_attributes_are_copied(self) -> None:
        recorder = EventRecorder()
        attributes = {"href": "/u"}
        recorder.start_element("a", attributes)
        attributes["href"] = "/changed"
        assert recorder.events[0].attributes == {"href": "/u"}


class TestEventRepr:
    """Event reprs read like markup."""

    def test_start_with_attributes(self) -> None:
        assert repr(Event("start", name="a", attributes={"href": "/u"})) == "<a href='/u'>"

    def test_end(self) -> None:
        assert repr(Event("end", name="a")) == "</a>"

    def test_characters(self) -> None:
        assert repr(Event("characters", text="x")) == "'x'"

    def test_document(self) -> None:
        assert repr(Event("end_document")) == "[end_document]"

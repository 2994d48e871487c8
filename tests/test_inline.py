"""Tests for inline parsing: emphasis, code spans, links, images, autolinks."""

import time

import pytest

from huellas import Event, EventRecorder, ParseConfig, parse, parse_events


def compact(source: str, **config: object) -> list[str]:
    recorder = EventRecorder()
    parse(source, recorder, config=ParseConfig(**config))
    return recorder.compact()


def starts(source: str, name: str) -> list[Event]:
    return [e for e in parse_events(source) if e.kind == "start" and e.name == name]


class TestEmphasis:
    """Emphasis-family markers."""

    @pytest.mark.parametrize(
        ("source", "tag"),
        [
            ("*x*", "em"),
            ("_x_", "em"),
            ("**x**", "strong"),
            ("__x__", "strong"),
            ("~~x~~", "del"),
            ("`x`", "code"),
        ],
    )
    def test_marker_tags(self, source: str, tag: str) -> None:
        assert compact(source) == ["p", tag, "x", f"/{tag}", "/p"]

    def test_nested_emphasis(self) -> None:
        assert compact("**a *b* c**") == ["p", "strong", "a ", "em", "b", "/em", " c", "/strong", "/p"]

    def test_code_span_is_literal(self) -> None:
        assert compact("`a *b* c`") == ["p", "code", "a *b* c", "/code", "/p"]

    def test_unclosed_marker_is_literal(self) -> None:
        assert compact("**unclosed") == ["p", "**unclosed", "/p"]

    def test_unclosed_marker_does_not_swallow_later_markup(self) -> None:
        assert compact("**a *b*") == ["p", "**a ", "em", "b", "/em", "/p"]

    def test_marker_pairs_with_next_identical_marker(self) -> None:
        assert compact("2 * 3 = 6") == ["p", "2 * 3 = 6", "/p"]

    def test_empty_span_is_literal(self) -> None:
        """Nothing enclosed: the first marker is text and scanning resumes after it."""
        assert compact("``") == ["p", "``", "/p"]

    def test_single_tilde_is_text(self) -> None:
        assert compact("~x~") == ["p", "~x~", "/p"]

    def test_depth_limit_emits_literal_text(self) -> None:
        assert compact("**x *y* z**", max_nesting_depth=0) == ["p", "strong", "x *y* z", "/strong", "/p"]


class TestLinks:
    """Inline and reference links."""

    def test_inline_link(self) -> None:
        (anchor,) = starts("[text](http://e.com)", "a")
        assert dict(anchor.attributes) == {"href": "http://e.com"}
        assert compact("[text](http://e.com)") == ["p", "a", "text", "/a", "/p"]

    def test_angle_bracket_destination(self) -> None:
        (anchor,) = starts("[x](<a b>)", "a")
        assert anchor.attributes["href"] == "a b"

    def test_title_in_single_quotes(self) -> None:
        (anchor,) = starts("[x](/u 'T')", "a")
        assert anchor.attributes["title"] == "T"

    def test_destination_with_parens(self) -> None:
        (anchor,) = starts("[x](http://e.com/a_(b))", "a")
        assert anchor.attributes["href"] == "http://e.com/a_(b)"

    def test_link_text_markup(self) -> None:
        assert compact("[**bold**](/u)") == ["p", "a", "strong", "bold", "/strong", "/a", "/p"]

    def test_url_as_link_text_is_not_autolinked(self) -> None:
        assert len(starts("[http://e.com](http://x.org)", "a")) == 1

    def test_text_around_link(self) -> None:
        assert compact("see [x](/u) now") == ["p", "see ", "a", "x", "/a", " now", "/p"]

    def test_reference_link_with_title(self) -> None:
        (anchor,) = starts('[x][r]\n\n[r]: http://e.com "Title"', "a")
        assert dict(anchor.attributes) == {"href": "http://e.com", "title": "Title"}

    def test_collapsed_reference(self) -> None:
        (anchor,) = starts("[Home][]\n\n[home]: /start", "a")
        assert anchor.attributes["href"] == "/start"

    def test_shortcut_reference(self) -> None:
        assert compact("[Home]\n\n[home]: /start") == ["p", "a", "Home", "/a", "/p"]

    def test_reference_is_case_insensitive(self) -> None:
        (anchor,) = starts("[x][FOO  Bar]\n\n[foo bar]: /f", "a")
        assert anchor.attributes["href"] == "/f"

    def test_last_definition_wins(self) -> None:
        (anchor,) = starts("[x][r]\n\n[r]: /one\n[r]: /two", "a")
        assert anchor.attributes["href"] == "/two"

    def test_definition_before_use(self) -> None:
        (anchor,) = starts("[r]: /u\n\n[x][r]", "a")
        assert anchor.attributes["href"] == "/u"

    def test_unresolved_shortcut_emits_text(self) -> None:
        assert compact("[note] here") == ["p", "[note] here", "/p"]

    def test_unclosed_bracket(self) -> None:
        assert compact("[open") == ["p", "[open", "/p"]

    def test_inline_form_wins_over_reference(self) -> None:
        (anchor,) = starts("[r](/inline)\n\n[r]: /ref", "a")
        assert anchor.attributes["href"] == "/inline"


class TestImages:
    """Image syntax."""

    def test_inline_image(self) -> None:
        (image,) = starts('![alt](/img.png "T")', "img")
        assert dict(image.attributes) == {"src": "/img.png", "alt": "alt", "title": "T"}
        assert compact('![alt](/img.png "T")') == ["p", "img", "/img", "/p"]

    def test_reference_image(self) -> None:
        (image,) = starts("![logo][l]\n\n[l]: /logo.png", "img")
        assert dict(image.attributes) == {"src": "/logo.png", "alt": "logo"}

    def test_missing_reference_image_is_literal(self) -> None:
        assert compact("![a][missing]") == ["p", "![a][missing]", "/p"]

    def test_image_inside_link(self) -> None:
        assert compact("[![i](/i.png)](/u)") == ["p", "a", "img", "/img", "/a", "/p"]

    def test_lone_bang_is_text(self) -> None:
        assert compact("Hi! there") == ["p", "Hi! there", "/p"]


class TestAutolinks:
    """Explicit <...> links and detected bare URLs."""

    def test_explicit_uri(self) -> None:
        (anchor,) = starts("<http://e.com>", "a")
        assert anchor.attributes["href"] == "http://e.com"
        assert compact("<http://e.com>") == ["p", "a", "http://e.com", "/a", "/p"]

    def test_explicit_email(self) -> None:
        (anchor,) = starts("<me@e.com>", "a")
        assert anchor.attributes["href"] == "mailto:me@e.com"

    def test_not_an_autolink(self) -> None:
        assert compact("a < b") == ["p", "a < b", "/p"]

    def test_bare_url(self) -> None:
        assert compact("see http://e.com now") == ["p", "see ", "a", "http://e.com", "/a", " now", "/p"]

    def test_bare_www(self) -> None:
        (anchor,) = starts("www.e.com.", "a")
        assert anchor.attributes["href"] == "http://www.e.com"
        assert compact("www.e.com.") == ["p", "a", "www.e.com", "/a", ".", "/p"]

    def test_bare_email(self) -> None:
        (anchor,) = starts("mail me@e.com", "a")
        assert anchor.attributes["href"] == "mailto:me@e.com"

    def test_autodetect_disabled(self) -> None:
        assert compact("see http://e.com now", autodetect_links=False) == ["p", "see http://e.com now", "/p"]

    def test_headings_are_autodetected(self) -> None:
        assert len(starts("# http://e.com", "a")) == 1

    def test_no_autodetect_right_after_lone_marker(self) -> None:
        """Text after an unmatched marker character is emitted as is."""
        assert starts("[http://e.com", "a") == []


class TestPathologicalInput:
    """Unclosed syntax repeated many times stays literal and linear."""

    @pytest.mark.parametrize(
        "unit",
        ["[", "<", "![", "[a](", "[a](<", '[a](u "', "[a]["],
    )
    def test_repeated_unclosed_syntax(self, unit: str) -> None:
        source = unit * (40_000 // len(unit))
        recorder = EventRecorder()
        started = time.perf_counter()
        parse(source, recorder)
        elapsed = time.perf_counter() - started
        assert recorder.text() == source
        assert elapsed < 3.0

"""Parse options carried in a ContextVar.

A parser never takes options as constructor arguments. It looks up the
active ``ParseConfig`` when ``parse()`` starts, so one ``Markdown`` instance
(or one ``parse_config_context`` block) configures every parse made inside it.
Each thread and each asyncio task sees its own value.

Usage:
    md = Markdown(github_line_breaks=True)
    events = md("first\\nsecond")

    with parse_config_context(ParseConfig(autodetect_links=False)):
        MarkdownParser(source, sink).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Options that change what events a parse emits.

    Attributes:
        github_line_breaks: Every line ending inside a paragraph becomes a
            ``br`` element. When False, only lines ending in two spaces or a
            backslash break; other line endings stay in the text.
        autodetect_links: Route literal text through the link detector so
            bare URLs and e-mail addresses become ``a`` elements.
        max_nesting_depth: Deepest inline recursion (emphasis inside link
            inside emphasis ...). Content past the limit is emitted as text.

    """

    github_line_breaks: bool = False
    autodetect_links: bool = True
    max_nesting_depth: int = 16

    @classmethod
    def from_dict(cls, options: dict) -> "ParseConfig":
        """Build a config from a mapping, dropping keys that are not options.

        Example:
            >>> ParseConfig.from_dict({"github_line_breaks": True, "tables": True})
            ParseConfig(github_line_breaks=True, autodetect_links=True, max_nesting_depth=16)

        """
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in options.items() if key in known})


_DEFAULT_CONFIG = ParseConfig()

_active_config: ContextVar[ParseConfig] = ContextVar("huellas_parse_config", default=_DEFAULT_CONFIG)


def get_parse_config() -> ParseConfig:
    """Return the config in effect for the current context."""
    return _active_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Replace the config for the current context only."""
    _active_config.set(config)


def reset_parse_config() -> None:
    """Return the current context to the defaults."""
    _active_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[ParseConfig]:
    """Apply ``config`` for the duration of a ``with`` block.

    Whatever was active before is restored on exit, including when the block
    raises. Contexts nest; the innermost one wins.
    """
    token = _active_config.set(config)
    try:
        yield config
    finally:
        _active_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]

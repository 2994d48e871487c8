"""Exception classes for Huellas.

Malformed Markdown never raises: it degrades to literal text. The exceptions
here signal misuse of the API or internal consistency violations.
"""

from __future__ import annotations


class HuellasError(Exception):
    """Root of the Huellas exception hierarchy."""


class ParseError(HuellasError):
    """A parse could not be driven to completion.

    Raised for API misuse, such as running a single-use parser twice. The
    message is prefixed with ``file:line:col`` when those are known.

    Attributes:
        message: The bare description, without location
        lineno: 1-based line number, if known
        col_offset: 1-based column, if known
        source_file: Name of the document, if known
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        parts = [source_file] if source_file else []
        if lineno is not None:
            parts.append(str(lineno))
            if col_offset is not None:
                parts.append(str(col_offset))
        prefix = ":".join(parts)
        super().__init__(f"{prefix} {message}" if prefix else message)


class TagStackError(HuellasError):
    """The open-element stack was driven into an inconsistent state.

    This is an implementation defect, never a property of the input:
    popping an empty stack, or closing a tag that is not open.
    """

    def __init__(self, message: str, stack: tuple[str, ...] = ()) -> None:
        self.stack = stack
        detail = f" (open: {', '.join(stack)})" if stack else " (stack empty)"
        super().__init__(f"{message}{detail}")

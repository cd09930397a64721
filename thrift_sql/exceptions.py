"""Package-specific exception types."""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for translation-related errors.

    Represents errors encountered while translating a schema definition.
    """


class MalformedLineError(ParseError):
    """Raised when a line cannot be read as the construct it was classified as.

    Args:
        line_number: One-based index of the offending line.
        line: Content of the offending line.
        reason: Short description of what is wrong with the line.
    """

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"Line {self.line_number}: {self.reason}: {self.line.strip()!r}"


class UnbalancedBlockError(MalformedLineError):
    """Raised when `struct`/`enum` blocks are not opened and closed in pairs."""


class LineTooLongError(ParseError):
    """Raised when a line exceeds the configured maximum length.

    Args:
        line_number: One-based index of the offending line.
        max_line_length: Maximum allowed line length in characters.
    """

    def __init__(self, line_number: int, max_line_length: int):
        self.line_number = line_number
        self.max_line_length = max_line_length
        super().__init__(
            f"Line {self.line_number} exceeds maximum allowed length "
            f"of {self.max_line_length} characters"
        )


class UnmappedTypeError(ParseError):
    """Raised in strict mode when a field type has no SQL counterpart.

    Args:
        line_number: One-based index of the field line.
        type_name: Source type that could not be mapped.
    """

    def __init__(self, line_number: int, type_name: str):
        self.line_number = line_number
        self.type_name = type_name
        super().__init__(f"Line {self.line_number}: no SQL type for `{self.type_name}`")

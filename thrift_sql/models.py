"""Data models for thrift-sql."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class LineKind(Enum):
    """Classification of a single schema line, derived from its first token.

    Attributes:
        RECORD: Opens a `struct` block.
        ENUM: Opens an `enum` block.
        FIELD: Ordinal-prefixed field inside a `struct`.
        CLOSE: Closing brace of the current block.
        NONE: Blank, comment, or anything else that produces no output.
    """

    RECORD = auto()
    ENUM = auto()
    FIELD = auto()
    CLOSE = auto()
    NONE = auto()


class ParserState(Enum):
    """Translator states used while walking a schema document.

    Attributes:
        OUTSIDE: Between top-level blocks.
        IN_RECORD: Inside a `struct` body, expecting fields or a closing brace.
        IN_LOOKUP: Consuming the values of an `enum` body.
    """

    OUTSIDE = auto()
    IN_RECORD = auto()
    IN_LOOKUP = auto()


@dataclass(frozen=True)
class SourceLine:
    """A numbered input line with its terminator removed.

    Attributes:
        number: One-based position of the line in the document.
        text: Raw line content, untrimmed.
    """

    number: int
    text: str

    @property
    def stripped(self) -> str:
        return self.text.strip()


@dataclass(frozen=True)
class FieldDescriptor:
    """Positional pieces of a field line.

    Attributes:
        ordinal: Leading ordinal token (for example ``"1:"``); not used in output.
        required: Whether the field carries the ``required`` keyword.
        type_name: Source type name, such as ``"i32"``.
        name: Field name with trailing separators removed.
    """

    ordinal: str
    required: bool
    type_name: str
    name: str


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal finding reported while translating."""

    line_number: int
    type_name: str
    message: str


@dataclass
class ParserContext:
    """Encapsulate translator state for a single run.

    Attributes:
        state: Current translator state.
        block_name: Name of the block currently open, if any.
        opened_by: Header line of the current block, if any.
        tables: Names of `struct` tables emitted so far.
        lookups: Names of `enum` lookup tables emitted so far.
        diagnostics: Non-fatal findings collected so far.
    """

    state: ParserState = ParserState.OUTSIDE
    block_name: str | None = None
    opened_by: SourceLine | None = None
    tables: list[str] = field(default_factory=list)
    lookups: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


@dataclass
class TranslationResult:
    """Structured summary of a finished translation.

    Attributes:
        tables: Tables created for `struct` blocks, in document order.
        lookups: Lookup tables created for `enum` blocks, in document order.
        diagnostics: Non-fatal findings, such as unmapped field types.
    """

    tables: list[str]
    lookups: list[str]
    diagnostics: list[Diagnostic]

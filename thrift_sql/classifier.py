"""Line tokenization and classification."""

from __future__ import annotations

from .constants import (
    CLOSE_BRACE,
    ENUM_KEYWORD,
    FIELD_NAME_SUFFIX,
    RECORD_KEYWORD,
    REQUIRED_KEYWORD,
    TOKEN_SEPARATOR,
)
from .exceptions import MalformedLineError
from .models import FieldDescriptor, LineKind, SourceLine

FIELD_TOKEN_COUNT = 4
BLOCK_TOKEN_COUNT = 2


def tokenize(text: str) -> list[str]:
    """Trim a line and split it on single spaces.

    Repeated spaces are not collapsed, so ``"a  b"`` yields an empty token.

    Examples:
        tokenize("  struct User {")  # ["struct", "User", "{"]
    """
    return text.strip().split(TOKEN_SEPARATOR)


def classify(tokens: list[str]) -> LineKind:
    """Classify a tokenized line by its first token.

    Args:
        tokens: Tokens produced by `tokenize`.

    Returns:
        LineKind: The kind of construct the line starts.

    Examples:
        classify(["struct", "User", "{"])  # LineKind.RECORD
        classify(["1:", "required", "string", "name:"])  # LineKind.FIELD
        classify(["}"])  # LineKind.CLOSE
    """
    if not tokens or not tokens[0]:
        return LineKind.NONE

    first = tokens[0]
    if first == RECORD_KEYWORD:
        return LineKind.RECORD
    if first == ENUM_KEYWORD:
        return LineKind.ENUM
    if first[0].isdigit():
        return LineKind.FIELD
    if first[0] == CLOSE_BRACE:
        return LineKind.CLOSE
    return LineKind.NONE


def parse_block_name(tokens: list[str], line: SourceLine) -> str:
    """Return the name declared by a `struct` or `enum` header line.

    Raises:
        MalformedLineError: If the header has no name token.
    """
    if len(tokens) < BLOCK_TOKEN_COUNT or not tokens[1]:
        raise MalformedLineError(line.number, line.text, f"`{tokens[0]}` without a name")
    return tokens[1]


def parse_field(tokens: list[str], line: SourceLine) -> FieldDescriptor:
    """Split a field line into its positional parts.

    The expected layout is ``<ordinal> <required|optional> <type> <name>:``;
    a trailing ``,`` or ``;`` after the name is tolerated.

    Args:
        tokens: Tokens produced by `tokenize`.
        line: Source line the tokens came from, used for error reporting.

    Returns:
        FieldDescriptor: The parsed field.

    Raises:
        MalformedLineError: If fewer than four tokens are present or the name is empty.

    Examples:
        parse_field(["1:", "required", "string", "userName:,"], line).name  # "userName"
    """
    if len(tokens) < FIELD_TOKEN_COUNT:
        raise MalformedLineError(
            line.number,
            line.text,
            f"field needs {FIELD_TOKEN_COUNT} tokens, found {len(tokens)}",
        )

    name = tokens[3]
    if name[-1:] in (",", ";"):
        name = name[:-1]
    if name.endswith(FIELD_NAME_SUFFIX):
        name = name[: -len(FIELD_NAME_SUFFIX)]
    if not name:
        raise MalformedLineError(line.number, line.text, "field without a name")

    return FieldDescriptor(
        ordinal=tokens[0],
        required=tokens[1] == REQUIRED_KEYWORD,
        type_name=tokens[2],
        name=name,
    )

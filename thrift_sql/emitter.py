"""SQL rendering and the state transitions that drive it."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TextIO

from .constants import (
    CLOSE_BRACE,
    COLUMN_TYPES,
    ENUM_ID_COLUMN,
    ENUM_VALUE_COLUMN,
    LINE_SEPARATOR,
    NOT_NULL,
    TAB,
    UNMAPPED_TYPE,
    VALUE_SEPARATOR,
)
from .exceptions import MalformedLineError, UnbalancedBlockError, UnmappedTypeError
from .models import Diagnostic, FieldDescriptor, ParserContext, ParserState, SourceLine
from .naming import to_upper_snake

logger = logging.getLogger(__name__)


def map_column_type(type_name: str) -> str:
    """Map a schema type to its SQL column type.

    Unknown types map to the ``NULL_VALUE`` placeholder; this never raises.

    Examples:
        map_column_type("i64")  # "BIGINT"
        map_column_type("list<i32>")  # "NULL_VALUE"
    """
    return COLUMN_TYPES.get(type_name, UNMAPPED_TYPE)


def render_create_table(name: str) -> str:
    return f"CREATE TABLE `{name}` ({LINE_SEPARATOR}"


def render_close_table() -> str:
    return f");{LINE_SEPARATOR}{LINE_SEPARATOR}"


def render_column(column: str, sql_type: str, required: bool, is_last: bool) -> str:
    """Render one column definition line.

    The NOT NULL slot is always separated by a space, so a nullable column
    keeps a trailing space before its comma or line end.

    Examples:
        render_column("AGE", "INT", False, True)  # "\\t`AGE` INT \\n"
        render_column("ID", "BIGINT", True, False)  # "\\t`ID` BIGINT NOT NULL,\\n"
    """
    required_value = NOT_NULL if required else ""
    comma = "" if is_last else ","
    return f"{TAB}`{column}` {sql_type} {required_value}{comma}{LINE_SEPARATOR}"


def render_lookup_columns() -> str:
    return (
        f"{TAB}{ENUM_ID_COLUMN} INT NOT NULL AUTO_INCREMENT PRIMARY KEY,{LINE_SEPARATOR}"
        f"{TAB}{ENUM_VALUE_COLUMN} VARCHAR(255) NOT NULL{LINE_SEPARATOR}"
    )


def render_insert(table: str, value: str) -> str:
    """Render a lookup row insert.

    The value is embedded verbatim; quotes are not escaped.
    """
    return f"INSERT INTO {table} (`{ENUM_VALUE_COLUMN}`) VALUES ('{value}');{LINE_SEPARATOR}"


def _open_table(ctx: ParserContext, name: str, line: SourceLine, sink: TextIO) -> None:
    if ctx.state is not ParserState.OUTSIDE:
        raise UnbalancedBlockError(
            line.number,
            line.text,
            f"`{name}` opened before `{ctx.block_name}` (line {ctx.opened_by.number}) was closed",
        )

    sink.write(render_create_table(name))
    ctx.state = ParserState.IN_RECORD
    ctx.block_name = name
    ctx.opened_by = line


def open_record(ctx: ParserContext, name: str, line: SourceLine, sink: TextIO) -> None:
    """Write a `CREATE TABLE` header and enter the record body.

    Raises:
        UnbalancedBlockError: If another block is still open.
    """
    logger.debug("creating table - %s", name)
    _open_table(ctx, name, line, sink)
    ctx.tables.append(name)


def close_record(ctx: ParserContext, line: SourceLine, sink: TextIO) -> None:
    """Terminate the open table definition and return to the top level.

    Raises:
        UnbalancedBlockError: If no record is open.
    """
    if ctx.state is not ParserState.IN_RECORD:
        raise UnbalancedBlockError(line.number, line.text, "closing brace without an open block")

    sink.write(render_close_table())
    ctx.state = ParserState.OUTSIDE
    ctx.block_name = None
    ctx.opened_by = None


def emit_field(
    ctx: ParserContext,
    field: FieldDescriptor,
    line: SourceLine,
    sink: TextIO,
    is_last: bool,
    strict: bool = False,
) -> None:
    """Write the column definition for a field.

    Args:
        ctx: Translator context; must be inside a record.
        field: Parsed field line.
        line: Source line of the field, used for diagnostics.
        sink: Output stream.
        is_last: Whether the field is the last one in its record, which
            suppresses the trailing comma.
        strict: Raise instead of emitting ``NULL_VALUE`` for unknown types.

    Raises:
        MalformedLineError: If the field appears outside a `struct` body.
        UnmappedTypeError: If `strict` is set and the type is unknown.
    """
    if ctx.state is not ParserState.IN_RECORD:
        raise MalformedLineError(line.number, line.text, "field outside of a struct")

    sql_type = map_column_type(field.type_name)
    if sql_type == UNMAPPED_TYPE:
        if strict:
            raise UnmappedTypeError(line.number, field.type_name)
        logger.debug("found new column type - %s", field.type_name)
        ctx.diagnostics.append(
            Diagnostic(
                line_number=line.number,
                type_name=field.type_name,
                message=(
                    f"Line {line.number}: `{ctx.block_name}.{field.name}` has unmapped type "
                    f"`{field.type_name}`; emitted {UNMAPPED_TYPE}"
                ),
            )
        )

    column = to_upper_snake(field.name)
    sink.write(render_column(column, sql_type, field.required, is_last))


def open_lookup(ctx: ParserContext, name: str, line: SourceLine, sink: TextIO) -> None:
    """Write a complete two-column lookup table for an `enum` header."""
    logger.debug("creating lookup table - %s", name)
    _open_table(ctx, name, line, sink)
    sink.write(render_lookup_columns())
    close_record(ctx, line, sink)
    ctx.lookups.append(name)


def emit_lookup_values(
    ctx: ParserContext, name: str, line: SourceLine, lines: Iterator[SourceLine], sink: TextIO
) -> int:
    """Consume an `enum` body and write one insert per value.

    Reads from `lines` up to and including the closing brace, which is not
    emitted. Blank lines are skipped and one trailing comma is removed from
    each value.

    Args:
        ctx: Translator context; must be at the top level.
        name: Lookup table the values are inserted into.
        line: The `enum` header line.
        lines: Remaining source lines; advanced past the closing brace.
        sink: Output stream.

    Returns:
        int: Number of inserts written.

    Raises:
        UnbalancedBlockError: If the input ends before the closing brace.
    """
    if ctx.state is not ParserState.OUTSIDE:
        raise UnbalancedBlockError(
            line.number, line.text, f"`{name}` values read inside `{ctx.block_name}`"
        )

    ctx.state = ParserState.IN_LOOKUP
    ctx.block_name = name
    ctx.opened_by = line

    count = 0
    for value_line in lines:
        value = value_line.stripped
        if value == CLOSE_BRACE:
            ctx.state = ParserState.OUTSIDE
            ctx.block_name = None
            ctx.opened_by = None
            return count
        if not value:
            continue
        if value.endswith(VALUE_SEPARATOR):
            value = value[: -len(VALUE_SEPARATOR)]
        sink.write(render_insert(name, value))
        count += 1

    raise UnbalancedBlockError(line.number, line.text, f"`enum {name}` is never closed")

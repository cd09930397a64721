"""Schema-to-SQL translation driver."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from .classifier import classify, parse_block_name, parse_field, tokenize
from .config import ConfigError, TranslatorConfig, validate_config
from .constants import CLOSE_BRACE
from .emitter import close_record, emit_field, emit_lookup_values, open_lookup, open_record
from .exceptions import LineTooLongError, ParseError, UnbalancedBlockError
from .filesystem import collect_file_stat, enforce_file_size, open_sink, resolve_output_path, safe_read
from .models import LineKind, ParserContext, ParserState, SourceLine, TranslationResult

logger = logging.getLogger(__name__)


class LineWindow:
    """Forward-only view over the source with a single line of lookahead.

    Iterating yields numbered `SourceLine` objects; `peek` shows the next line
    without consuming it. Both paths enforce `max_line_length`.

    Examples:
        window = LineWindow(["struct A {", "}"])
        first = next(window)
        window.peek().text  # "}"
    """

    def __init__(self, lines: Iterable[str], max_line_length: int | None = None):
        self._lines = iter(lines)
        self._max_line_length = max_line_length
        self._number = 0
        self._peeked: SourceLine | None = None

    def __iter__(self) -> Iterator[SourceLine]:
        return self

    def __next__(self) -> SourceLine:
        if self._peeked is not None:
            line, self._peeked = self._peeked, None
            return line
        return self._read()

    def peek(self) -> SourceLine | None:
        if self._peeked is None:
            try:
                self._peeked = self._read()
            except StopIteration:
                return None
        return self._peeked

    def _read(self) -> SourceLine:
        raw = next(self._lines)
        self._number += 1
        text = raw.rstrip("\r\n")
        if self._max_line_length is not None and len(text) > self._max_line_length:
            raise LineTooLongError(self._number, self._max_line_length)
        return SourceLine(self._number, text)


def translate_lines(
    lines: Iterable[str], sink: TextIO, config: TranslatorConfig | None = None
) -> TranslationResult:
    """Translate schema lines into SQL written to `sink`.

    Args:
        lines: Schema document lines, with or without line terminators.
        sink: Writable text stream that receives the SQL.
        config: Configuration controlling limits and strictness. Defaults to a
            new `TranslatorConfig` when omitted.

    Returns:
        TranslationResult: Tables, lookups, and diagnostics of the run.

    Raises:
        ConfigError: If the configuration fails validation.
        MalformedLineError: If a line lacks the tokens its kind requires.
        UnbalancedBlockError: If blocks are nested, closed twice, or left open.
        LineTooLongError: If a line exceeds the configured maximum length.
        UnmappedTypeError: If strict mode is on and a field type is unknown.

    Examples:
        buffer = io.StringIO()
        translate_lines(["struct A {", "  1: required i32 id:", "}"], buffer)
    """
    config = config or TranslatorConfig()
    validate_config(config)

    ctx = ParserContext()
    window = LineWindow(lines, config.max_line_length)

    for line in window:
        if not line.stripped:
            continue

        tokens = tokenize(line.text)
        kind = classify(tokens)

        if kind is LineKind.RECORD:
            open_record(ctx, parse_block_name(tokens, line), line, sink)
        elif kind is LineKind.CLOSE:
            close_record(ctx, line, sink)
        elif kind is LineKind.ENUM:
            name = parse_block_name(tokens, line)
            open_lookup(ctx, name, line, sink)
            emit_lookup_values(ctx, name, line, window, sink)
        elif kind is LineKind.FIELD:
            field = parse_field(tokens, line)
            next_line = window.peek()
            is_last = next_line is not None and next_line.stripped == CLOSE_BRACE
            emit_field(ctx, field, line, sink, is_last, strict=config.strict_types)

    if ctx.state is not ParserState.OUTSIDE and ctx.opened_by is not None:
        raise UnbalancedBlockError(
            ctx.opened_by.number, ctx.opened_by.text, f"`{ctx.block_name}` is never closed"
        )

    return TranslationResult(
        tables=ctx.tables,
        lookups=ctx.lookups,
        diagnostics=ctx.diagnostics,
    )


def translate_text(
    content: str, config: TranslatorConfig | None = None
) -> tuple[str, TranslationResult]:
    """Translate a schema document held in memory.

    Returns:
        tuple[str, TranslationResult]: The generated SQL and the run summary.

    Examples:
        sql, result = translate_text("enum Color {\\n  RED\\n}\\n")
    """
    buffer = io.StringIO()
    result = translate_lines(content.splitlines(), buffer, config)
    return buffer.getvalue(), result


class TranslateFileError(Exception):
    """Raised when translating a schema file fails."""


def translate_file(
    filepath: Path,
    output_dir: Path | None = None,
    output_name: str | None = None,
    config: TranslatorConfig | None = None,
) -> tuple[Path, TranslationResult]:
    """Translate a schema file into a SQL file.

    The input is opened before the output, so a missing input leaves the
    filesystem untouched. On a failure after the output was created the file
    is closed but its content must not be relied on.

    Args:
        filepath: Schema file to read.
        output_dir: Directory for the SQL file; defaults to the input's directory.
        output_name: File name for the SQL file; defaults to the input's stem
            with the configured extension.
        config: Configuration; defaults to a new `TranslatorConfig`.

    Returns:
        tuple[Path, TranslationResult]: Path of the written file and the run summary.

    Raises:
        TranslateFileError: If configuration is invalid, a file cannot be read
            or written, or the document cannot be translated.

    Examples:
        output_path, result = translate_file(Path("schema/user.thrift"))
    """
    config = config or TranslatorConfig()
    try:
        validate_config(config)
    except ConfigError as error:
        raise TranslateFileError(str(error)) from error

    logger.info("starting thrift-sql on %s", filepath)

    try:
        enforce_file_size(collect_file_stat(filepath), config.max_file_size, filepath)
        source = safe_read(filepath)
    except IOError as error:
        raise TranslateFileError(str(error)) from error

    with source:
        output_path = resolve_output_path(
            filepath, output_dir, output_name, config.output_extension
        )
        logger.debug("outputPath = %s", output_path)
        try:
            sink = open_sink(output_path)
        except IOError as error:
            raise TranslateFileError(str(error)) from error

        with sink:
            try:
                result = translate_lines(source, sink, config)
            except UnicodeDecodeError as error:
                raise TranslateFileError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
            except ParseError as error:
                raise TranslateFileError(f"{filepath}: {error}") from error
            except OSError as error:
                raise TranslateFileError(f"Error writing {output_path}: {error}") from error

    logger.info(
        "wrote %d tables and %d lookups to %s",
        len(result.tables),
        len(result.lookups),
        output_path,
    )
    return output_path, result

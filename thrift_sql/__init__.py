"""
thrift-sql: translate Thrift struct and enum definitions into SQL.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    thrift-sql idl/user.thrift [output dir] [output file name]

Library Usage:
    from pathlib import Path
    from thrift_sql import translate_text

    sql, result = translate_text(Path("user.thrift").read_text())
    for diagnostic in result.diagnostics:
        print(diagnostic.message)
"""

from ._logging import configure_logging
from .classifier import classify, parse_field, tokenize
from .config import ConfigError, TranslatorConfig
from .emitter import map_column_type
from .exceptions import (
    LineTooLongError,
    MalformedLineError,
    ParseError,
    UnbalancedBlockError,
    UnmappedTypeError,
)
from .models import Diagnostic, LineKind, TranslationResult
from .naming import to_upper_snake
from .translator import TranslateFileError, translate_file, translate_lines, translate_text

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "translate_lines",
    "translate_text",
    "translate_file",
    "tokenize",
    "classify",
    "parse_field",
    "map_column_type",
    "to_upper_snake",
    # Data models
    "Diagnostic",
    "LineKind",
    "TranslationResult",
    # Configuration
    "TranslatorConfig",
    "configure_logging",
    # Exceptions
    "ConfigError",
    "LineTooLongError",
    "MalformedLineError",
    "ParseError",
    "TranslateFileError",
    "UnbalancedBlockError",
    "UnmappedTypeError",
    # Version
    "__version__",
]

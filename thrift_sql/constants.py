"""Constants used across the thrift-sql package."""

from __future__ import annotations

# Schema keywords
RECORD_KEYWORD = "struct"
ENUM_KEYWORD = "enum"
REQUIRED_KEYWORD = "required"
CLOSE_BRACE = "}"
TOKEN_SEPARATOR = " "
FIELD_NAME_SUFFIX = ":"
VALUE_SEPARATOR = ","

# SQL output
LINE_SEPARATOR = "\n"
TAB = "\t"
NOT_NULL = "NOT NULL"
UNMAPPED_TYPE = "NULL_VALUE"
ENUM_ID_COLUMN = "ID"
ENUM_VALUE_COLUMN = "VALUE"

COLUMN_TYPES = {
    "string": "VARCHAR(255)",
    "i16": "SMALLINT",
    "i32": "INT",
    "i64": "BIGINT",
    "double": "DOUBLE",
    "bool": "BIT",
}

# Defaults
DEFAULT_OUTPUT_EXTENSION = ".sql"
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_LINE_LENGTH = 10_000

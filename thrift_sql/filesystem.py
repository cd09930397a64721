"""Filesystem helpers for thrift-sql."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import TextIO

from .constants import DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_LINE_LENGTH, DEFAULT_OUTPUT_EXTENSION

MAX_FILE_SIZE_ENV_VAR = "THRIFT_SQL_MAX_FILE_SIZE"
MAX_LINE_LENGTH_ENV_VAR = "THRIFT_SQL_MAX_LINE_LENGTH"


def _positive_int_from_env(env_var: str, default: int) -> int:
    env_value = os.environ.get(env_var)
    if env_value is None:
        return default

    try:
        value = int(env_value)
    except ValueError as error:
        error_message = f"Invalid value for {env_var}: {env_value} (expected positive integer)"
        raise ValueError(error_message) from error

    if value <= 0:
        error_message = f"{env_var} must be a positive integer, got {value}."
        raise ValueError(error_message)

    return value


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed input size in bytes.

    Raises:
        ValueError: If ``THRIFT_SQL_MAX_FILE_SIZE`` is set but not a positive integer.
    """
    return _positive_int_from_env(MAX_FILE_SIZE_ENV_VAR, default)


def get_max_line_length(default: int = DEFAULT_MAX_LINE_LENGTH) -> int:
    """Resolve the maximum allowed line length in characters.

    Raises:
        ValueError: If ``THRIFT_SQL_MAX_LINE_LENGTH`` is set but not a positive integer.
    """
    return _positive_int_from_env(MAX_LINE_LENGTH_ENV_VAR, default)


def resolve_output_path(
    filepath: Path,
    output_dir: Path | None = None,
    output_name: str | None = None,
    extension: str = DEFAULT_OUTPUT_EXTENSION,
) -> Path:
    """Work out where the SQL for `filepath` is written.

    Args:
        filepath: Schema file being translated.
        output_dir: Target directory; defaults to the schema file's directory.
        output_name: Target file name; defaults to the schema file's stem with
            `extension` appended.
        extension: Extension used for the default file name.

    Returns:
        Path: Output file path.

    Examples:
        resolve_output_path(Path("idl/user.thrift"))  # Path("idl/user.sql")
        resolve_output_path(Path("idl/user.thrift"), Path("out"), "all.sql")  # Path("out/all.sql")
    """
    directory = Path(output_dir) if output_dir is not None else Path(filepath).parent
    name = output_name if output_name else Path(filepath).stem + extension
    return directory / name


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Return stat information for an input file.

    Raises:
        IOError: If the path is inaccessible or not a regular file.
    """
    try:
        stat_result = os.stat(filepath)
    except OSError as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error

    if not stat.S_ISREG(stat_result.st_mode):
        error_message = f"{filepath} is not a regular file."
        raise IOError(error_message)

    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    """Guard against input files that exceed the configured maximum size.

    Raises:
        IOError: If `stat_result.st_size` exceeds `max_size`.
    """
    if stat_result.st_size > max_size:
        error_message = f"{filepath} exceeds the maximum allowed size of {max_size} bytes."
        raise IOError(error_message)


def safe_read(filepath: Path) -> TextIO:
    """Open a schema file for reading with consistent error handling.

    Raises:
        IOError: If the path is missing, inaccessible, or not a file.

    Examples:
        with safe_read(Path("user.thrift")) as handle:
            first_line = handle.readline()
    """
    try:
        return open(filepath, "r", encoding="UTF-8")
    except (
        FileNotFoundError,
        PermissionError,
        IsADirectoryError,
        NotADirectoryError,
    ) as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error


def open_sink(output_path: Path) -> TextIO:
    """Create a fresh output file, replacing any existing one.

    Parent directories are created as needed.

    Raises:
        IOError: If an existing file cannot be removed or the file cannot be created.

    Examples:
        with open_sink(Path("out/user.sql")) as sink:
            sink.write("-- generated\\n")
    """
    try:
        if output_path.is_dir():
            raise IsADirectoryError(f"{output_path} is a directory")
        output_path.unlink(missing_ok=True)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        return open(output_path, "w", encoding="UTF-8", newline="")
    except OSError as error:
        error_message = f"Failed to create {output_path}: {error}"
        raise IOError(error_message) from error

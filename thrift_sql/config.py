"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_LINE_LENGTH, DEFAULT_OUTPUT_EXTENSION


@dataclass
class TranslatorConfig:
    """Configuration for translating schema files into SQL.

    Attributes:
        output_extension: Extension given to the output file when no explicit
            name is supplied.
        strict_types: Fail on field types with no SQL mapping instead of
            emitting the ``NULL_VALUE`` placeholder.
        max_file_size: Maximum input size in bytes that will be processed.
        max_line_length: Maximum line length allowed during translation.

    Examples:
        TranslatorConfig(output_extension=".ddl", strict_types=True)
    """

    output_extension: str = DEFAULT_OUTPUT_EXTENSION
    strict_types: bool = False

    # Limits
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`output_extension` must start with a dot")
    """


def load_config(search_path: Path) -> TranslatorConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.thrift-sql]`` table from `pyproject.toml` and the
    ``[thrift-sql]`` or ``[tool.thrift-sql]`` table from `.thrift-sql.toml`.
    TOML files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        TranslatorConfig: Loaded configuration, or defaults when none is found.

    Raises:
        ConfigError: If a matching table is not a mapping or contains unsupported keys.
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "thrift-sql")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".thrift-sql.toml",
            table_paths=[("thrift-sql",), ("tool", "thrift-sql")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return TranslatorConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> TranslatorConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> TranslatorConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    try:
        return TranslatorConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: TranslatorConfig) -> None:
    """Validate a `TranslatorConfig` instance.

    Raises:
        ConfigError: If the extension is malformed, `strict_types` is not a
            boolean, or numeric limits are not positive integers.
    """
    if not isinstance(config.output_extension, str) or not config.output_extension:
        raise ConfigError("`output_extension` must not be empty")
    if not config.output_extension.startswith("."):
        raise ConfigError("`output_extension` must start with a dot")
    if any(separator in config.output_extension for separator in ("/", "\\")):
        raise ConfigError("`output_extension` must not contain path separators")

    if not isinstance(config.strict_types, bool):
        raise ConfigError("`strict_types` must be a boolean")

    for key in ("max_file_size", "max_line_length"):
        value = getattr(config, key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def apply_overrides(config: TranslatorConfig, **overrides: object) -> TranslatorConfig:
    """Apply override values to a `TranslatorConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by field name; None values are ignored.

    Returns:
        TranslatorConfig: New configuration, or `config` itself when nothing changes.

    Raises:
        TypeError: If an override name is not defined on `TranslatorConfig`.
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> TranslatorConfig:
    """Load, override, and validate configuration.

    Examples:
        config = build_config(Path("schemas"), strict_types=True)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config

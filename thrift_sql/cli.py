"""
Translates a Thrift schema file into a SQL script.
The script is written next to the schema unless an output directory or file name is given.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from ._logging import configure_logging
from .config import ConfigError, apply_overrides, build_config
from .filesystem import get_max_file_size, get_max_line_length
from .translator import TranslateFileError, translate_file

__all__ = ["cli"]


@click.command()
@click.version_option(package_name="thrift-sql")
@click.option(
    "--strict/--lenient",
    default=None,
    help="Fail on field types without a SQL mapping instead of emitting NULL_VALUE",
)
@click.option("--extension", help="Extension of the default output file name")
@click.option("-v", "--verbose", is_flag=True, help="Log translation progress to stderr")
@click.argument("filepath", type=click.Path(dir_okay=False))
@click.argument("output_dir", required=False, type=click.Path(file_okay=False))
@click.argument("output_name", required=False)
def cli(
    filepath: str,
    output_dir: str | None = None,
    output_name: str | None = None,
    strict: bool | None = None,
    extension: str | None = None,
    verbose: bool = False,
):
    """
    Entry point for translating a schema file into SQL.

    Args:
        filepath: Path to the Thrift schema file.
        output_dir: Directory for the SQL file; defaults to the schema's directory.
        output_name: Name of the SQL file; defaults to the schema's name with
            the configured extension.
        strict: Override for failing on unmapped field types.
        extension: Override for the default output extension.
        verbose: Enable debug logging.

    Returns:
        None.

    Raises:
        click.BadParameter: If configuration overrides are invalid.
        click.ClickException: If the schema cannot be read, translated, or written.

    Examples:
        thrift-sql idl/user.thrift build/sql user.sql --strict
    """
    if verbose:
        configure_logging(level=logging.DEBUG)

    schema_path = Path(filepath).expanduser()
    try:
        config = build_config(
            schema_path.resolve().parent,
            strict_types=strict,
            output_extension=extension,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = apply_overrides(
            config,
            max_file_size=get_max_file_size(default=config.max_file_size),
            max_line_length=get_max_line_length(default=config.max_line_length),
        )
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        output_path, result = translate_file(
            schema_path,
            Path(output_dir) if output_dir else None,
            output_name,
            config,
        )
    except TranslateFileError as error:
        raise click.ClickException(str(error)) from error

    for diagnostic in result.diagnostics:
        click.echo(f"Warning: {diagnostic.message}", err=True)

    click.echo(str(output_path))


if __name__ == "__main__":
    cli()

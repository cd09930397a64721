from __future__ import annotations

import textwrap
from pathlib import Path

from thrift_sql.cli import cli
from thrift_sql.filesystem import MAX_LINE_LENGTH_ENV_VAR


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def test_cli_writes_sql_next_to_schema(cli_runner, tmp_path):
    target = _write(
        tmp_path,
        "user.thrift",
        """
        struct User {
          1: required string userName:,
          2: optional i32 age:
        }
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0, result.output
    output = tmp_path / "user.sql"
    assert str(output) in result.output
    assert output.read_text(encoding="utf-8") == (
        "CREATE TABLE `User` (\n\t`USER_NAME` VARCHAR(255) NOT NULL,\n\t`AGE` INT \n);\n\n"
    )


def test_cli_honours_output_dir_and_name(cli_runner, tmp_path):
    target = _write(
        tmp_path,
        "color.thrift",
        """
        enum Color {
          RED,
          GREEN,
          BLUE
        }
        """,
    )
    out_dir = tmp_path / "generated"

    result = cli_runner.invoke(cli, [str(target), str(out_dir), "lookups.sql"])

    assert result.exit_code == 0, result.output
    contents = (out_dir / "lookups.sql").read_text(encoding="utf-8")
    assert contents.count("INSERT INTO Color") == 3
    assert not (tmp_path / "color.sql").exists()


def test_cli_warns_on_unmapped_type(cli_runner, tmp_path):
    target = _write(
        tmp_path,
        "basket.thrift",
        """
        struct Basket {
          1: optional list items:
        }
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert "Warning:" in result.output
    assert "`list`" in result.output
    assert "NULL_VALUE" in (tmp_path / "basket.sql").read_text(encoding="utf-8")


def test_cli_strict_fails_on_unmapped_type(cli_runner, tmp_path):
    target = _write(tmp_path, "basket.thrift", "struct Basket {\n  1: optional list items:\n}\n")

    result = cli_runner.invoke(cli, ["--strict", str(target)])

    assert result.exit_code == 1
    assert "no SQL type for `list`" in result.output


def test_cli_strict_from_pyproject(cli_runner, tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        "[tool.thrift-sql]\nstrict_types = true\n", encoding="utf-8"
    )
    target = _write(tmp_path, "basket.thrift", "struct Basket {\n  1: optional set items:\n}\n")

    assert cli_runner.invoke(cli, [str(target)]).exit_code == 1
    assert cli_runner.invoke(cli, ["--lenient", str(target)]).exit_code == 0


def test_cli_extension_option(cli_runner, tmp_path):
    target = _write(tmp_path, "user.thrift", "struct User {\n  1: required i32 id:\n}\n")

    result = cli_runner.invoke(cli, ["--extension", ".ddl", str(target)])

    assert result.exit_code == 0
    assert (tmp_path / "user.ddl").exists()


def test_cli_rejects_invalid_extension(cli_runner, tmp_path):
    target = _write(tmp_path, "user.thrift", "struct User {\n  1: required i32 id:\n}\n")

    result = cli_runner.invoke(cli, ["--extension", "ddl", str(target)])

    assert result.exit_code == 2
    assert "must start with a dot" in result.output


def test_cli_empty_schema_yields_empty_file(cli_runner, tmp_path):
    target = tmp_path / "empty.thrift"
    target.write_text("", encoding="utf-8")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert (tmp_path / "empty.sql").read_bytes() == b""


def test_cli_missing_schema_fails_without_output(cli_runner, tmp_path):
    result = cli_runner.invoke(cli, [str(tmp_path / "missing.thrift")])

    assert result.exit_code == 1
    assert "Error accessing" in result.output
    assert list(tmp_path.iterdir()) == []


def test_cli_reports_malformed_line(cli_runner, tmp_path):
    target = _write(tmp_path, "broken.thrift", "struct Broken {\n  1: required\n}\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "Line 2" in result.output


def test_cli_reports_unbalanced_braces(cli_runner, tmp_path):
    target = _write(tmp_path, "braces.thrift", "struct A {\n  1: required i32 id:\n}\n}\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "closing brace without an open block" in result.output


def test_cli_line_length_from_environment(cli_runner, tmp_path, monkeypatch):
    monkeypatch.setenv(MAX_LINE_LENGTH_ENV_VAR, "5")
    target = _write(tmp_path, "user.thrift", "struct User {\n}\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "exceeds maximum allowed length" in result.output


def test_cli_invalid_environment_limit(cli_runner, tmp_path, monkeypatch):
    monkeypatch.setenv(MAX_LINE_LENGTH_ENV_VAR, "lots")
    target = _write(tmp_path, "user.thrift", "struct User {\n}\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert MAX_LINE_LENGTH_ENV_VAR in result.output


def test_cli_requires_filepath(cli_runner):
    result = cli_runner.invoke(cli, [])

    assert result.exit_code == 2

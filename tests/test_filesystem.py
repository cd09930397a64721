from __future__ import annotations

from pathlib import Path

import pytest

from thrift_sql.filesystem import (
    MAX_FILE_SIZE_ENV_VAR,
    MAX_LINE_LENGTH_ENV_VAR,
    collect_file_stat,
    enforce_file_size,
    get_max_file_size,
    get_max_line_length,
    open_sink,
    resolve_output_path,
    safe_read,
)


def test_resolve_output_path_defaults_to_input_directory():
    assert resolve_output_path(Path("idl/user.thrift")) == Path("idl/user.sql")


def test_resolve_output_path_replaces_only_last_extension():
    assert resolve_output_path(Path("idl/user.v2.thrift")) == Path("idl/user.v2.sql")


def test_resolve_output_path_with_overrides():
    assert resolve_output_path(Path("idl/user.thrift"), Path("out")) == Path("out/user.sql")
    assert resolve_output_path(Path("idl/user.thrift"), None, "all.sql") == Path("idl/all.sql")
    assert resolve_output_path(Path("idl/user.thrift"), extension=".ddl") == Path("idl/user.ddl")


def test_get_limits_from_environment(monkeypatch):
    monkeypatch.setenv(MAX_FILE_SIZE_ENV_VAR, "2048")
    monkeypatch.delenv(MAX_LINE_LENGTH_ENV_VAR, raising=False)

    assert get_max_file_size(default=1) == 2048
    assert get_max_line_length(default=80) == 80


@pytest.mark.parametrize("value", ["abc", "0", "-5"])
def test_get_limits_reject_invalid_environment(monkeypatch, value: str):
    monkeypatch.setenv(MAX_LINE_LENGTH_ENV_VAR, value)

    with pytest.raises(ValueError, match=MAX_LINE_LENGTH_ENV_VAR):
        get_max_line_length()


def test_collect_file_stat_rejects_missing_and_directories(tmp_path: Path):
    with pytest.raises(IOError, match="Error accessing"):
        collect_file_stat(tmp_path / "missing.thrift")

    with pytest.raises(IOError, match="not a regular file"):
        collect_file_stat(tmp_path)


def test_enforce_file_size(tmp_path: Path):
    target = tmp_path / "schema.thrift"
    target.write_text("struct A {\n}\n", encoding="utf-8")
    stat_result = collect_file_stat(target)

    enforce_file_size(stat_result, 1024, target)
    with pytest.raises(IOError, match="maximum allowed size"):
        enforce_file_size(stat_result, 4, target)


def test_safe_read_missing_file(tmp_path: Path):
    with pytest.raises(IOError, match="Error accessing"):
        safe_read(tmp_path / "missing.thrift")


def test_open_sink_creates_parents_and_truncates(tmp_path: Path):
    target = tmp_path / "a" / "b" / "out.sql"

    with open_sink(target) as sink:
        sink.write("first run, longer content\n")
    with open_sink(target) as sink:
        sink.write("second\n")

    assert target.read_text(encoding="utf-8") == "second\n"


def test_open_sink_rejects_directory(tmp_path: Path):
    with pytest.raises(IOError, match="Failed to create"):
        open_sink(tmp_path)

from __future__ import annotations

from pathlib import Path

import pytest

from regexp_table.app.lookup import EXIT_NO_MATCH, EXIT_OK, EXIT_TABLE_ERROR, main


@pytest.fixture
def table_path(tmp_path: Path) -> Path:
    path = tmp_path / "access.regexp"
    path.write_text("if /@example\\.com$/\n/^admin@/ REJECT\nendif\n/./ OK\n", encoding="utf-8")
    return path


def test_main_prints_actions(table_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main([str(table_path), "admin@example.com", "bob@example.com"])

    out = capsys.readouterr().out.splitlines()
    assert status == EXIT_OK
    assert out == ["admin@example.com\tREJECT", "bob@example.com\tOK"]


def test_main_reports_no_match(table_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main([str(table_path), ""])

    assert status == EXIT_NO_MATCH
    assert capsys.readouterr().out == "\t-\n"


def test_main_check(table_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main([str(table_path), "--check"])

    assert status == EXIT_OK
    assert "3 rules" in capsys.readouterr().out


def test_main_parse_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "broken.regexp"
    path.write_text("/[/ X\n", encoding="utf-8")

    status = main([str(path), "x"])

    assert status == EXIT_TABLE_ERROR
    assert "invalid pattern" in capsys.readouterr().err


def test_main_missing_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "nope.regexp"), "x"]) == EXIT_TABLE_ERROR


def test_main_undecodable_table(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "binary.regexp"
    path.write_bytes(b"/\xff/ X\n")

    status = main([str(path), "x", "--encoding", "utf-8"])

    assert status == EXIT_TABLE_ERROR
    assert "[ERROR]" in capsys.readouterr().err

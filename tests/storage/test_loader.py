from __future__ import annotations

import io
from pathlib import Path

import pytest

from regexp_table.rules.core import LineRecord
from regexp_table.rules.errors import UnbalancedScopeError
from regexp_table.storage.loader import load_lines, load_table, read_lines


def test_read_lines_numbers_from_one_and_skips_blank_lines() -> None:
    stream = io.StringIO("/a/ A\n\n   \nendif\r\n")

    assert list(read_lines(stream, "s")) == [
        LineRecord("/a/ A", 1, "s"),
        LineRecord("endif", 4, "s"),
    ]


def test_load_lines_uses_path_as_source_id(tmp_path: Path) -> None:
    path = tmp_path / "t.regexp"
    path.write_text("/ä/ UMLAUT\n", encoding="utf-8")

    lines = load_lines(path)

    assert lines == [LineRecord("/ä/ UMLAUT", 1, str(path))]


def test_load_table_respects_encoding(tmp_path: Path) -> None:
    path = tmp_path / "t.regexp"
    path.write_bytes("/ü/ LATIN\n".encode("latin-1"))

    table = load_table(path, encoding="latin-1")

    assert table.rules[0].pattern.source == "ü"


def test_load_table_reports_unclosed_scope(tmp_path: Path) -> None:
    path = tmp_path / "t.regexp"
    path.write_text("if /a/\n/b/ B\n", encoding="utf-8")

    with pytest.raises(UnbalancedScopeError) as excinfo:
        load_table(path)

    assert excinfo.value.source_id == str(path)
    assert excinfo.value.line_number == 2

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

from regexp_table.parsing.parser import parse
from regexp_table.pipeline.matcher import find
from regexp_table.rules.core import Table
from regexp_table.storage.loader import load_table, read_lines


@dataclass(frozen=True)
class RegexpTable:
    """A parsed lookup table together with where it came from."""
    table: Table
    source_id: Optional[str] = None

    @classmethod
    def from_lines(cls, lines: Iterable[Tuple[str, int, Optional[str]]], source_id: Optional[str] = None) -> RegexpTable:
        return cls(parse(lines), source_id)

    @classmethod
    def from_text(cls, text: str, source_id: Optional[str] = None) -> RegexpTable:
        return cls(parse(read_lines(io.StringIO(text), source_id)), source_id)

    @classmethod
    def from_path(cls, path: Path, encoding: Optional[str] = None) -> RegexpTable:
        return cls(load_table(path, encoding=encoding), str(path))

    def find(self, text: str) -> Optional[str]:
        return find(self.table, text)

    def rule_count(self) -> int:
        return self.table.rule_count()

    def __len__(self) -> int:
        return len(self.table)

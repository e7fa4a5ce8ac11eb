from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from regexp_table.config.settings import TABLE_ENCODING
from regexp_table.parsing.parser import parse
from regexp_table.rules.core import LineRecord, Table

logger = logging.getLogger(__name__)


def read_lines(stream: TextIO, source_id: Optional[str] = None) -> Iterator[LineRecord]:
    """Number the lines of a table source, skipping blank ones."""
    for line_number, raw in enumerate(stream, start=1):
        text = raw.rstrip("\r\n")
        if not text.strip():
            continue
        yield LineRecord(text, line_number, source_id)


def load_lines(path: Path, encoding: Optional[str] = None) -> List[LineRecord]:
    with open(path, encoding=encoding or TABLE_ENCODING) as fh:
        return list(read_lines(fh, source_id=str(path)))


def load_table(path: Path, encoding: Optional[str] = None) -> Table:
    logger.debug("Loading table from %s", path)
    return parse(load_lines(path, encoding=encoding))

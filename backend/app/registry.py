from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock
from typing import Dict, Optional

from regexp_table.pipeline.table import RegexpTable
from regexp_table.rules.errors import TableError

logger = logging.getLogger(__name__)


@dataclass
class LoadError:
    message: str
    source_id: Optional[str]
    line_number: Optional[int]


@dataclass
class RegistryState:
    tables: Dict[str, RegexpTable] = field(default_factory=dict)
    errors: Dict[str, LoadError] = field(default_factory=dict)


class TableRegistry:
    def __init__(self) -> None:
        self._lock = Lock()
        self._state = RegistryState()

    def get(self, name: str) -> Optional[RegexpTable]:
        with self._lock:
            return self._state.tables.get(name)

    def reload(self, directory: Path, suffix: str) -> Dict[str, LoadError]:
        # A table whose file fails to parse keeps its previously loaded version.
        with self._lock:
            previous = dict(self._state.tables)
        tables: Dict[str, RegexpTable] = {}
        errors: Dict[str, LoadError] = {}

        paths = sorted(directory.glob(f"*{suffix}")) if directory.is_dir() else []
        for path in paths:
            if not path.is_file():
                continue
            try:
                tables[path.stem] = RegexpTable.from_path(path)
            except TableError as exc:
                logger.warning("Failed to load table %s: %s", path, exc)
                errors[path.stem] = LoadError(exc.message, exc.source_id, exc.line_number)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Failed to read table %s: %s", path, exc)
                errors[path.stem] = LoadError(str(exc), str(path), None)
            if path.stem in errors and path.stem in previous:
                tables[path.stem] = previous[path.stem]

        with self._lock:
            self._state = RegistryState(tables=tables, errors=errors)
        return errors

    def snapshot(self) -> Dict[str, object]:
        # Return a copy to avoid mutation by callers.
        with self._lock:
            return {
                "tables": {name: t.rule_count() for name, t in self._state.tables.items()},
                "errors": {
                    name: {"message": e.message, "source_id": e.source_id, "line_number": e.line_number}
                    for name, e in self._state.errors.items()
                },
            }


table_registry = TableRegistry()

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Optional, Tuple, Union


class LineRecord(NamedTuple):
    text: str
    line_number: int
    source_id: Optional[str] = None


@dataclass(frozen=True)
class CompiledPattern:
    source: str
    flags: str
    regex: re.Pattern = field(repr=False, compare=False)

    @property
    def ignorecase(self) -> bool:
        return bool(self.regex.flags & re.IGNORECASE)

    @property
    def multiline(self) -> bool:
        return bool(self.regex.flags & re.MULTILINE)

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


@dataclass(frozen=True)
class Table:
    """Ordered rules; the first rule that fires wins."""
    rules: Tuple[Rule, ...] = ()

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def rule_count(self) -> int:
        # Counts nested rules as well as the top level.
        return sum(1 + (r.target.rule_count() if r.is_scope else 0) for r in self.rules)


@dataclass(frozen=True)
class Rule:
    negate: bool
    pattern: CompiledPattern
    target: Union[str, Table]  # action string, or the nested table of an if-block

    @property
    def is_scope(self) -> bool:
        return isinstance(self.target, Table)

    def fires(self, text: str) -> bool:
        return self.pattern.matches(text) != self.negate

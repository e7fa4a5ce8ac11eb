from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

from regexp_table.parsing.lines import CloseScope, LeafRule, OpenScope, classify
from regexp_table.rules.core import CompiledPattern, Rule, Table
from regexp_table.rules.errors import InvalidFormatError, InvalidPatternError, UnbalancedScopeError
from regexp_table.rules.patterns import compile_pattern

logger = logging.getLogger(__name__)


@dataclass
class _Scope:
    # An if-block under construction. Its Rule is attached to the parent
    # table only when the block closes, which keeps source order because
    # nothing else can reach the parent in between.
    guard: Optional[Tuple[bool, CompiledPattern]]
    opened_at: int
    rules: List[Rule] = field(default_factory=list)


def _compile(kind: Union[OpenScope, LeafRule], text: str, source_id: Optional[str], line_number: int) -> CompiledPattern:
    try:
        return compile_pattern(kind.pattern, kind.flags)
    except InvalidPatternError as exc:
        raise exc.at(text, source_id, line_number) from exc


def parse(lines: Iterable[Tuple[str, int, Optional[str]]]) -> Table:
    """
    Build a rule tree from (text, line_number, source_id) records.

    Raises InvalidFormatError, InvalidPatternError or UnbalancedScopeError
    on the first problem found; no partial table is returned.
    """
    stack: List[_Scope] = [_Scope(guard=None, opened_at=0)]
    source_id: Optional[str] = None
    line_number = 0

    for text, line_number, source_id in lines:
        kind = classify(text)

        if isinstance(kind, OpenScope):
            pattern = _compile(kind, text, source_id, line_number)
            stack.append(_Scope(guard=(kind.negate, pattern), opened_at=line_number))

        elif isinstance(kind, LeafRule):
            pattern = _compile(kind, text, source_id, line_number)
            stack[-1].rules.append(Rule(negate=kind.negate, pattern=pattern, target=kind.action))

        elif isinstance(kind, CloseScope):
            if len(stack) == 1:
                raise UnbalancedScopeError(
                    "endif without matching if", source_id=source_id, line_number=line_number
                )
            scope = stack.pop()
            negate, pattern = scope.guard
            stack[-1].rules.append(Rule(negate=negate, pattern=pattern, target=Table(tuple(scope.rules))))

        else:
            raise InvalidFormatError(text, source_id=source_id, line_number=line_number)

    if len(stack) > 1:
        raise UnbalancedScopeError(
            "endif isn't matched",
            source_id=source_id,
            line_number=line_number,
            opened_at=stack[-1].opened_at,
        )

    table = Table(tuple(stack[0].rules))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Parsed %s: %d rules (%d top-level)", source_id or "<table>", table.rule_count(), len(table))
    return table

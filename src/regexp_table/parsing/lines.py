from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

# Patterns are captured greedily, so the last "/" that still lets the rest
# of the line parse closes the pattern.
_OPEN_SCOPE_RE = re.compile(r"\A\s*(?:if\s+)?(!)?/(.*)/([imx]+)?\s*\Z")
_LEAF_RULE_RE = re.compile(r"\A\s*(!)?/(.*)/([imx]+)?\s+(.+?)\s*\Z")
_CLOSE_SCOPE_RE = re.compile(r"\A\s*endif\s*\Z")


@dataclass(frozen=True)
class OpenScope:
    negate: bool
    pattern: str
    flags: str


@dataclass(frozen=True)
class LeafRule:
    negate: bool
    pattern: str
    flags: str
    action: str


@dataclass(frozen=True)
class CloseScope:
    pass


LineKind = Union[OpenScope, LeafRule, CloseScope]


def classify(line: str) -> Optional[LineKind]:
    """
    Classify one table line.

    Forms are tried in order: open scope (`[if] [!]/pattern/[flags]`), leaf
    rule (`[!]/pattern/[flags] action`), then `endif`. Returns None when the
    line is none of these.
    """
    m = _OPEN_SCOPE_RE.match(line)
    if m:
        return OpenScope(negate=m.group(1) == "!", pattern=m.group(2), flags=m.group(3) or "")

    m = _LEAF_RULE_RE.match(line)
    if m:
        return LeafRule(
            negate=m.group(1) == "!",
            pattern=m.group(2),
            flags=m.group(3) or "",
            action=m.group(4),
        )

    if _CLOSE_SCOPE_RE.match(line):
        return CloseScope()

    return None

from __future__ import annotations

import re

from regexp_table.rules.core import CompiledPattern
from regexp_table.rules.errors import InvalidPatternError

FLAG_LETTERS = frozenset("imx")


def compile_pattern(source: str, flags: str = "") -> CompiledPattern:
    """
    Compile a table pattern with its trailing flag letters.

    Matching is always case-insensitive. "i" is folded into the baseline
    with &=, so it never changes anything; "m" turns on re.MULTILINE and
    "x" is accepted but ignored. Unlike Ruby's /m, "m" does not make "."
    match newlines (that would be re.DOTALL).
    """
    unknown = set(flags) - FLAG_LETTERS
    if unknown:
        raise InvalidPatternError(source, f"unknown flag(s): {''.join(sorted(unknown))}")

    regex_flags = re.IGNORECASE
    if "i" in flags:
        regex_flags &= re.IGNORECASE
    if "m" in flags:
        regex_flags |= re.MULTILINE

    try:
        regex = re.compile(source, regex_flags)
    except re.error as exc:
        raise InvalidPatternError(source, str(exc)) from exc

    return CompiledPattern(source=source, flags=flags, regex=regex)

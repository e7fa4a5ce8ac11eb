from __future__ import annotations

import logging
from typing import Optional

from regexp_table.rules.core import Table

logger = logging.getLogger(__name__)


def find(table: Table, text: str) -> Optional[str]:
    """
    Return the action of the first rule that fires for text, or None.

    A rule fires when its pattern matches (or, for a negated rule, when it
    does not). A firing if-block is searched recursively; if nothing inside
    it fires, the search carries on with the rules after the block.
    """
    for rule in table:
        if not rule.fires(text):
            continue
        if rule.is_scope:
            action = find(rule.target, text)
            if action is not None:
                return action
        else:
            logger.debug("Rule %s/%s/ fired for %r", "!" if rule.negate else "", rule.pattern.source, text)
            return rule.target
    return None

"""Disallow COUNT(*) Rule.

House rule:
Count a named column instead of ``*`` so the intent of the count is explicit.
"""

import re

from sqldbalint.core.base import PatternRule, Severity
from sqldbalint.core.registry import register

COUNT_STAR_PATTERN = re.compile(r"\bCOUNT\s*\(\s*\*\s*\)", re.IGNORECASE)


@register
class DisallowCountStarRule(PatternRule):
    """Flags every COUNT(*) call."""

    rule_id = "disallow-count-star"
    name = "Disallow COUNT(*)"
    description = "Disallows COUNT(*); count a specific column instead."
    config_key = "disallow_count_star"
    code = "count-star-disallowed"
    severity = Severity.ERROR
    message = "COUNT(*) is not allowed. Specify a column name instead."
    pattern = COUNT_STAR_PATTERN


__all__ = ["DisallowCountStarRule", "COUNT_STAR_PATTERN"]

"""Disallow ORDER BY Rule."""

import re

from sqldbalint.core.base import PatternRule, Severity
from sqldbalint.core.registry import register

ORDER_BY_PATTERN = re.compile(r"\bORDER\s+BY\b", re.IGNORECASE)


@register
class DisallowOrderByRule(PatternRule):
    """Flags every ORDER BY clause; sorting belongs to the client."""

    rule_id = "disallow-order-by"
    name = "Disallow ORDER BY"
    description = "Disallows ORDER BY clauses."
    config_key = "disallow_order_by"
    code = "order-by-disallowed"
    severity = Severity.ERROR
    message = "ORDER BY clause is not allowed"
    pattern = ORDER_BY_PATTERN


__all__ = ["DisallowOrderByRule", "ORDER_BY_PATTERN"]

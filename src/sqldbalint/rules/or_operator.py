"""Disallow OR Operator Rule.

House rule:
OR predicates defeat index seeks; use IN or separate queries instead.

Only the operator is reported; identifiers spelled "or" (``[or]``,
``t.or``, ``@or``, ``#or``) are not.
"""

import re

from sqldbalint.core.base import PatternRule, Severity
from sqldbalint.core.registry import register

# Whole word OR, so ORDER/FOR/XOR never match. [or], t.or and @or are names.
OR_PATTERN = re.compile(r"(?<![\[.@#])\bOR\b(?!\])", re.IGNORECASE)


@register
class DisallowOrOperatorRule(PatternRule):
    """Flags every OR operator."""

    rule_id = "disallow-or-operator"
    name = "Disallow OR Operator"
    description = "Disallows the OR logical operator."
    config_key = "disallow_or_operator"
    code = "or-operator-disallowed"
    severity = Severity.ERROR
    message = "OR operator is not allowed. Consider using IN clause or separate queries instead."
    pattern = OR_PATTERN


__all__ = ["DisallowOrOperatorRule", "OR_PATTERN"]

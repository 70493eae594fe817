"""Three-Part Naming Rule.

House rule:
Table references after FROM, JOIN, INTO and UPDATE must be written as
{DATABASE}.{SCHEMA}.{TABLE}. Temp tables (``#name``) and table variables
(``@name``) are exempt, and a reference directly followed by ``(`` is taken
to be a function call rather than a table.
"""

import re
from re import Match
from typing import List, Optional

from sqldbalint.config import LinterConfig
from sqldbalint.core.base import Diagnostic, PatternRule, Severity
from sqldbalint.core.helpers import unquote
from sqldbalint.core.registry import register

TRANSIENT_MARKERS = ("#", "@")
MIN_QUALIFIERS = 2

# One name part: [bracketed name], "quoted name" or bare word
_PART = r'(?:\[[^\]]*\]|"[^"]*"|[\w#@$]+)'
_PART_RE = re.compile(_PART)

# A keyword followed by "(" is a subquery and never matches
TABLE_REF_PATTERN = re.compile(
    rf"\b(?P<keyword>FROM|JOIN|INTO|UPDATE)\s+"
    rf"(?P<reference>{_PART}(?:\s*\.\s*(?:{_PART})?)*)"
    rf"(?P<call>\()?",
    re.IGNORECASE,
)


def split_reference(reference: str) -> List[str]:
    """Split a dotted table reference into its parts.

    Dots inside brackets or quotes belong to the part. An omitted part
    (``db..table``) comes back as an empty string.
    """
    parts = [""]
    pos = 0
    while pos < len(reference):
        if reference[pos] == ".":
            parts.append("")
            pos += 1
            continue
        match = _PART_RE.match(reference, pos)
        if match is None:
            pos += 1
            continue
        parts[-1] = match.group(0)
        pos = match.end()
    return parts


@register
class ThreePartNamingRule(PatternRule):
    """Requires fully qualified table references."""

    rule_id = "require-three-part-naming"
    name = "Require Three-Part Naming"
    description = (
        "Requires table references after FROM, JOIN, INTO and UPDATE to use "
        "{DATABASE}.{SCHEMA}.{TABLE} naming. Temp tables are exempt."
    )
    config_key = "require_three_part_naming"
    code = "three-part-naming"
    severity = Severity.ERROR
    message = "Table reference should use three-part naming: {DATABASE}.{SCHEMA}.{TABLE}"
    pattern = TABLE_REF_PATTERN

    def diagnostic_for(self, config: LinterConfig, line_no: int, match: Match[str]) -> Optional[Diagnostic]:
        if match.group("call"):
            return None

        parts = split_reference(match.group("reference"))
        if unquote(parts[0]).startswith(TRANSIENT_MARKERS):
            return None
        if len(parts) - 1 >= MIN_QUALIFIERS:
            return None

        table = unquote(parts[-1])
        return self.create_diagnostic(
            config,
            line_no,
            match.start("reference"),
            match.end("reference"),
            message=(
                f"Table reference '{table}' should use three-part naming: "
                "{DATABASE}.{SCHEMA}.{TABLE}"
            ),
        )


__all__ = ["ThreePartNamingRule", "TABLE_REF_PATTERN", "split_reference"]

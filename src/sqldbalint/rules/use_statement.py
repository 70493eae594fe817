"""Require USE Statement Rule.

House rule:
Every script must start by selecting its database with ``USE {DATABASE}``,
so it never runs against whatever database the session happens to be on.
Optionally the selected database must match a configured name.
"""

import re
from typing import List, Optional, Sequence, Tuple

from sqldbalint.config import LinterConfig
from sqldbalint.core.base import Diagnostic, Rule, Severity
from sqldbalint.core.comments import iter_live_lines
from sqldbalint.core.helpers import normalize_name, unquote
from sqldbalint.core.registry import register

# USE db; / USE [db] / use  db
USE_PATTERN = re.compile(r"^\s*USE\s+(?P<open>\[)?(?P<database>\w+)(?(open)\])\s*(?:;|\s|$)", re.IGNORECASE)

MISMATCH_CODE = "use-statement-mismatch"


def _first_code_line(lines: Sequence[str]) -> Optional[Tuple[int, str]]:
    """Return the first line holding non-blank uncommented code."""
    for line_no, code in iter_live_lines(lines):
        if code.strip():
            return line_no, code
    return None


@register
class RequireUseStatementRule(Rule):
    """Requires a script to begin with a USE statement."""

    rule_id = "require-use-statement"
    name = "Require USE Statement"
    description = (
        "Requires the first statement of a script to be USE {DATABASE}, "
        "optionally naming the configured expected database."
    )
    config_key = "require_use_statement"
    code = "missing-use-statement"
    severity = Severity.ERROR
    message = "Script must begin with a USE {DATABASE} statement"

    def check(self, lines: Sequence[str], config: LinterConfig) -> List[Diagnostic]:
        """Check the first code line and return list of diagnostics."""
        first = _first_code_line(lines)
        match = USE_PATTERN.match(first[1]) if first else None

        if match is None:
            width = len(lines[0]) if lines else 0
            return [self.create_diagnostic(config, 0, 0, width)]

        expected = unquote(config.expected_database.strip())
        database = match.group("database")
        if expected and normalize_name(database) != normalize_name(expected):
            line_no = first[0]
            return [
                self.create_diagnostic(
                    config,
                    line_no,
                    match.start("database"),
                    match.end("database"),
                    message=f"USE statement selects '{database}' but '{expected}' is expected",
                    code=MISMATCH_CODE,
                )
            ]
        return []


__all__ = ["RequireUseStatementRule", "USE_PATTERN", "MISMATCH_CODE"]

"""sqldbalint core module - Base classes, comment tracking and rule registry."""

from .base import DIAGNOSTIC_SOURCE, Diagnostic, PatternRule, Range, Rule, Severity
from .registry import get_all_rules, get_rule, list_rules, register

__all__ = [
    "DIAGNOSTIC_SOURCE",
    "Diagnostic",
    "PatternRule",
    "Range",
    "Rule",
    "Severity",
    "register",
    "get_all_rules",
    "get_rule",
    "list_rules",
]

"""sqldbalint core package - SQL DBA house-style linter.

A line-oriented, plugin-based convention checker for SQL scripts.
"""

from .config import ConfigError, LinterConfig, load_config
from .core.base import DIAGNOSTIC_SOURCE, Diagnostic, PatternRule, Range, Rule, Severity
from .core.registry import get_all_rules, get_rule, list_rules

# Import rules to trigger registration
from . import rules

from .engine import Document, SqlValidator, validate_text
from .sink import DiagnosticCollection, DiagnosticSink

__version__ = "0.1.0"


__all__ = [
    # Main API
    "SqlValidator",
    "Document",
    "validate_text",

    # Core classes
    "Diagnostic",
    "DIAGNOSTIC_SOURCE",
    "PatternRule",
    "Range",
    "Rule",
    "Severity",

    # Sinks
    "DiagnosticCollection",
    "DiagnosticSink",

    # Configuration
    "ConfigError",
    "LinterConfig",
    "load_config",

    # Registry
    "get_all_rules",
    "get_rule",
    "list_rules",
]

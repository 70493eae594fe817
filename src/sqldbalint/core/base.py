"""Base classes for sqldbalint validation rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from re import Match, Pattern
from typing import TYPE_CHECKING, List, Optional, Sequence

from .comments import iter_live_lines

if TYPE_CHECKING:
    from sqldbalint.config import LinterConfig

DIAGNOSTIC_SOURCE = "SQL DBA Linter"


class Severity(Enum):
    """Severity level for diagnostics."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"


@dataclass(frozen=True)
class Range:
    """Zero-based, end-exclusive position of a diagnostic in a document."""

    start_line: int
    start_character: int
    end_line: int
    end_character: int

    def to_dict(self) -> dict:
        return {
            "start": {"line": self.start_line, "character": self.start_character},
            "end": {"line": self.end_line, "character": self.end_character},
        }


@dataclass(frozen=True)
class Diagnostic:
    """Structured representation of a single rule violation."""

    range: Range
    message: str
    severity: Severity
    code: str
    source: str = DIAGNOSTIC_SOURCE

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "severity": self.severity.value,
            "message": self.message,
            "source": self.source,
            "range": self.range.to_dict(),
        }


class Rule(ABC):
    """Base class for all validation rules.

    Subclasses must define class attributes:
        rule_id: Unique identifier (e.g., "disallow-order-by")
        name: Human-readable name (e.g., "Disallow ORDER BY")
        description: What this rule checks
        config_key: LinterConfig flag that enables the rule
        code: Diagnostic code reported for violations
        severity: Default severity level
        message: Default diagnostic message

    Subclasses must implement:
        check(lines, config) -> List[Diagnostic]
    """

    # Metadata - must be defined by subclasses
    rule_id: str
    name: str
    description: str
    config_key: str
    code: str
    severity: Severity
    message: str

    def enabled(self, config: "LinterConfig") -> bool:
        """Return whether the rule runs under the given configuration."""
        return bool(getattr(config, self.config_key))

    @abstractmethod
    def check(self, lines: Sequence[str], config: "LinterConfig") -> List[Diagnostic]:
        """Check document lines and return list of diagnostics.

        Args:
            lines: The document text split into lines
            config: Configuration snapshot for this validation pass

        Returns:
            List of Diagnostic objects ordered by line, then column.
        """
        pass

    def create_diagnostic(
        self,
        config: "LinterConfig",
        line: int,
        start: int,
        end: int,
        message: Optional[str] = None,
        code: Optional[str] = None,
    ) -> Diagnostic:
        """Helper to create a single-line diagnostic with rule defaults."""
        code = code or self.code
        return Diagnostic(
            range=Range(line, start, line, end),
            message=message or self.message,
            severity=config.severity_for(code, self.severity),
            code=code,
        )


class PatternRule(Rule):
    """Rule reporting every match of ``pattern`` in uncommented code.

    Each call re-derives block comment state from the first line, so a rule
    behaves the same whichever other rules are enabled.
    """

    pattern: Pattern[str]

    def check(self, lines: Sequence[str], config: "LinterConfig") -> List[Diagnostic]:
        diagnostics: List[Diagnostic] = []
        for line_no, code in iter_live_lines(lines):
            for match in self.pattern.finditer(code):
                diagnostic = self.diagnostic_for(config, line_no, match)
                if diagnostic is not None:
                    diagnostics.append(diagnostic)
        return diagnostics

    def diagnostic_for(self, config: "LinterConfig", line_no: int, match: Match[str]) -> Optional[Diagnostic]:
        """Turn a match into a diagnostic; return None to skip it."""
        return self.create_diagnostic(config, line_no, match.start(), match.end())


__all__ = ["DIAGNOSTIC_SOURCE", "Diagnostic", "PatternRule", "Range", "Rule", "Severity"]

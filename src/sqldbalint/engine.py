"""Validation driver running registered rules over SQL documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence

from .config import LinterConfig
from .core.base import Diagnostic, Rule
from .core.registry import get_all_rules, get_rule
from .sink import DiagnosticCollection, DiagnosticSink

LOG = logging.getLogger(__name__)

SQL_LANGUAGE_ID = "sql"


@dataclass(frozen=True)
class Document:
    """Immutable snapshot of a document's text and identity."""

    uri: str
    text: str
    language_id: str = SQL_LANGUAGE_ID

    @classmethod
    def from_path(cls, path: Path) -> Document:
        return cls(uri=str(path), text=path.read_text(encoding="utf-8-sig"))

    @property
    def lines(self) -> List[str]:
        """Text split on newlines; an empty text is one empty line."""
        return [line[:-1] if line.endswith("\r") else line for line in self.text.split("\n")]


def run_rules(rules: Iterable[Rule], lines: Sequence[str], config: LinterConfig) -> List[Diagnostic]:
    """Run each enabled rule and concatenate results in rule order."""
    diagnostics: List[Diagnostic] = []
    for rule in rules:
        if not rule.enabled(config):
            LOG.debug("Skipping disabled rule %s", rule.rule_id)
            continue
        diagnostics.extend(rule.check(lines, config))
    return diagnostics


class SqlValidator:
    """Validates SQL documents and publishes results to a sink."""

    def __init__(
        self,
        sink: DiagnosticSink | None = None,
        rules: Sequence[Rule] | None = None,
    ) -> None:
        self._sink = sink if sink is not None else DiagnosticCollection()
        self._rules = tuple(rules) if rules is not None else tuple(rule_cls() for rule_cls in get_all_rules())

    @property
    def sink(self) -> DiagnosticSink:
        return self._sink

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def validate(self, document: Document, config: LinterConfig | None = None) -> List[Diagnostic]:
        """Run one validation pass and publish its full result.

        Non-SQL documents are ignored: nothing is returned or published.
        """
        if document.language_id != SQL_LANGUAGE_ID:
            LOG.debug("Ignoring %s document %s", document.language_id, document.uri)
            return []

        diagnostics = run_rules(self._rules, document.lines, config or LinterConfig())
        self._sink.publish(document.uri, diagnostics)
        return diagnostics

    def clear(self, document: Document) -> None:
        self._sink.clear(document.uri)

    def clear_all(self) -> None:
        self._sink.clear_all()


def validate_text(
    text: str,
    config: LinterConfig | None = None,
    rule_ids: Sequence[str] | None = None,
) -> List[Diagnostic]:
    """Validate raw SQL text without publishing.

    Args:
        text: SQL script text
        config: Configuration snapshot (defaults when omitted)
        rule_ids: Optional list of specific rule IDs to run, in registry order

    Returns:
        List of Diagnostic objects. Empty list means validation passed.
    """
    if rule_ids:
        wanted = {get_rule(rule_id) for rule_id in rule_ids}
        rule_classes = [cls for cls in get_all_rules() if cls in wanted]
    else:
        rule_classes = get_all_rules()

    lines = Document(uri="<text>", text=text).lines
    return run_rules([cls() for cls in rule_classes], lines, config or LinterConfig())


__all__ = ["Document", "SqlValidator", "SQL_LANGUAGE_ID", "run_rules", "validate_text"]

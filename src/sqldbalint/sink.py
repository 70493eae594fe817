"""Diagnostic sinks that store published diagnostics per document."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Protocol, Sequence, Tuple

from .core.base import Diagnostic

LOG = logging.getLogger(__name__)


class DiagnosticSink(Protocol):
    """Protocol implemented by hosts that display diagnostics."""

    def publish(self, uri: str, diagnostics: Sequence[Diagnostic]) -> None:
        """Replace every diagnostic stored for ``uri``."""

    def clear(self, uri: str) -> None:
        """Remove the diagnostics stored for ``uri``."""

    def clear_all(self) -> None:
        """Remove diagnostics for every document."""


class DiagnosticCollection:
    """In-memory sink keyed by document URI."""

    def __init__(self, name: str = "sql-dba-linter") -> None:
        self.name = name
        self._entries: Dict[str, Tuple[Diagnostic, ...]] = {}

    def publish(self, uri: str, diagnostics: Sequence[Diagnostic]) -> None:
        self._entries[uri] = tuple(diagnostics)
        LOG.debug("Published %d diagnostics for %s", len(diagnostics), uri)

    def clear(self, uri: str) -> None:
        self._entries.pop(uri, None)

    def clear_all(self) -> None:
        self._entries.clear()

    def get(self, uri: str) -> Tuple[Diagnostic, ...]:
        """Diagnostics last published for ``uri`` (empty if none)."""
        return self._entries.get(uri, ())

    def uris(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, uri: object) -> bool:
        return uri in self._entries

    def __iter__(self) -> Iterator[Tuple[str, Tuple[Diagnostic, ...]]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["DiagnosticCollection", "DiagnosticSink"]

"""CLI entry point for linting SQL scripts against DBA house rules."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .config import ConfigError, LinterConfig, load_config
from .core.base import Diagnostic, Severity
from .core.registry import get_rule, list_rules
from .engine import Document, SqlValidator
from .sink import DiagnosticCollection

STDIN_URI = "<stdin>"


def _read_documents(paths: Sequence[str]) -> List[Document]:
    if paths:
        documents = []
        for name in paths:
            path = Path(name)
            try:
                documents.append(Document.from_path(path))
            except (OSError, UnicodeDecodeError) as exc:
                raise SystemExit(f"Cannot read {path}: {exc}") from exc
        return documents
    if not sys.stdin.isatty():
        return [Document(uri=STDIN_URI, text=sys.stdin.read())]
    raise SystemExit("Provide SQL file paths or pipe SQL via stdin.")


def _build_config(args: argparse.Namespace) -> LinterConfig:
    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    updates: Dict[str, Any] = {}
    if args.expected_database is not None:
        updates["expected_database"] = args.expected_database
    for rule_id in args.disable or []:
        try:
            updates[get_rule(rule_id).config_key] = False
        except KeyError as exc:
            raise SystemExit(exc.args[0]) from exc
    return config.with_overrides(**updates) if updates else config


def format_diagnostic(uri: str, diagnostic: Diagnostic) -> str:
    """Render ``path:line:col: severity [code] message`` with 1-based positions."""
    start = diagnostic.range
    return (
        f"{uri}:{start.start_line + 1}:{start.start_character + 1}: "
        f"{diagnostic.severity.value} [{diagnostic.code}] {diagnostic.message}"
    )


def build_report(collection: DiagnosticCollection) -> Dict[str, Any]:
    """Build JSON report from published diagnostics."""
    files = []
    error_count = 0
    warning_count = 0
    for uri, diagnostics in collection:
        error_count += sum(1 for d in diagnostics if d.severity == Severity.ERROR)
        warning_count += sum(1 for d in diagnostics if d.severity == Severity.WARNING)
        files.append({
            "uri": uri,
            "is_valid": not any(d.severity == Severity.ERROR for d in diagnostics),
            "diagnostics": [d.to_dict() for d in diagnostics],
        })

    return {
        "files": files,
        "error_count": error_count,
        "warning_count": warning_count,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqldbalint",
        description="Check SQL scripts against DBA house rules.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="SQL files to lint. If not provided, reads from stdin.",
    )
    parser.add_argument(
        "--config",
        help="TOML config file (default: .sqldbalint.toml or [tool.sqldbalint] in pyproject.toml).",
    )
    parser.add_argument(
        "--expected-database",
        help="Database name the USE statement must select.",
    )
    parser.add_argument(
        "--disable",
        action="append",
        metavar="RULE_ID",
        help="Disable a rule by ID (repeatable), e.g. disallow-order-by.",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format (default: text).",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Write the JSON report to this file instead of stdout.",
    )
    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="List available rules and exit.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.output and args.format != "json":
        parser.error("--output requires --format json")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_rules:
        for rule_id, description in list_rules().items():
            print(f"{rule_id}: {description}")
        return 0

    config = _build_config(args)
    documents = _read_documents(args.paths)

    collection = DiagnosticCollection()
    validator = SqlValidator(collection)
    for document in documents:
        validator.validate(document, config)

    report = build_report(collection)

    if args.format == "json":
        payload = json.dumps(report, indent=2)
        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(payload, encoding="utf-8")
            print(f"Report saved to: {output_path.absolute()}")
        else:
            print(payload)
    else:
        for uri, diagnostics in collection:
            for diagnostic in diagnostics:
                print(format_diagnostic(uri, diagnostic))
        status = "VALID" if report["error_count"] == 0 else "INVALID"
        print(f"Validation {status}")
        print(f"  Files: {len(report['files'])}")
        print(f"  Errors: {report['error_count']}")
        print(f"  Warnings: {report['warning_count']}")

    return 0 if report["error_count"] == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())

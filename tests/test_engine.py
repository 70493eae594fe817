"""Integration tests for the validation driver and diagnostic sink."""

import tempfile
import unittest
from pathlib import Path

from sqldbalint import (
    DiagnosticCollection,
    Document,
    LinterConfig,
    Severity,
    SqlValidator,
    list_rules,
    validate_text,
)

ALL_CODES = (
    "missing-use-statement",
    "three-part-naming",
    "or-operator-disallowed",
    "order-by-disallowed",
    "count-star-disallowed",
)

MESSY_SQL = "SELECT COUNT(*) FROM t\nWHERE a = 1 OR b = 2\nORDER BY a"


class ValidateTextTests(unittest.TestCase):
    """Tests for the validate_text() API."""

    def test_missing_use_and_unqualified_table(self) -> None:
        codes = [d.code for d in validate_text("SELECT * FROM table1;")]
        self.assertEqual(codes, ["missing-use-statement", "three-part-naming"])

    def test_clean_script(self) -> None:
        sql = "USE [TestDB];\nSELECT * FROM [db].[schema].[t1]\nJOIN [db].[schema].[t2] ON t1.id=t2.id;"
        self.assertEqual(validate_text(sql), [])

    def test_count_star_scenarios(self) -> None:
        config = LinterConfig(requireUseStatement=False)
        codes = [d.code for d in validate_text("SELECT COUNT(*) FROM [db].[schema].[t1];", config)]
        self.assertEqual(codes, ["count-star-disallowed"])
        self.assertEqual(validate_text("SELECT COUNT(col1) FROM [db].[schema].[t1];", config), [])

    def test_order_by_is_not_reported_as_or(self) -> None:
        sql = "USE [db];\nSELECT a FROM [db].[dbo].[t] ORDER BY a"
        self.assertEqual([d.code for d in validate_text(sql)], ["order-by-disallowed"])

    def test_results_follow_rule_order_then_line(self) -> None:
        codes = [d.code for d in validate_text(MESSY_SQL)]
        self.assertEqual(codes, list(ALL_CODES))

    def test_rule_ids_restrict_rules(self) -> None:
        diagnostics = validate_text(MESSY_SQL, rule_ids=["disallow-count-star", "disallow-or-operator"])
        self.assertEqual([d.code for d in diagnostics], ["or-operator-disallowed", "count-star-disallowed"])

    def test_unknown_rule_id_raises(self) -> None:
        with self.assertRaises(KeyError):
            validate_text("SELECT 1", rule_ids=["no-such-rule"])

    def test_rule_output_does_not_depend_on_other_rules(self) -> None:
        sql = "/* FROM a OR b\n*/ SELECT x FROM t WHERE a OR b -- OR c\nSELECT COUNT(*) FROM u"
        alone = validate_text(sql, rule_ids=["disallow-or-operator"])
        together = [d for d in validate_text(sql) if d.code == "or-operator-disallowed"]
        self.assertEqual(alone, together)
        self.assertEqual(len(alone), 1)

    def test_empty_document(self) -> None:
        self.assertEqual([d.code for d in validate_text("")], ["missing-use-statement"])
        self.assertEqual(validate_text("", LinterConfig(requireUseStatement=False)), [])

    def test_crlf_line_endings(self) -> None:
        sql = "USE [db];\r\nSELECT COUNT(*) FROM [db].[dbo].[t]\r\n"
        diagnostics = validate_text(sql)
        self.assertEqual(len(diagnostics), 1)
        r = diagnostics[0].range
        self.assertEqual((r.start_line, r.start_character, r.end_character), (1, 7, 15))


class ConfigurationTests(unittest.TestCase):
    """Tests for rule toggling and severity overrides."""

    def test_each_flag_disables_its_rule(self) -> None:
        flags = {
            "missing-use-statement": "require_use_statement",
            "three-part-naming": "require_three_part_naming",
            "or-operator-disallowed": "disallow_or_operator",
            "order-by-disallowed": "disallow_order_by",
            "count-star-disallowed": "disallow_count_star",
        }
        for code, flag in flags.items():
            with self.subTest(flag=flag):
                config = LinterConfig().with_overrides(**{flag: False})
                codes = [d.code for d in validate_text(MESSY_SQL, config)]
                self.assertNotIn(code, codes)
                self.assertEqual(len(codes), len(ALL_CODES) - 1)

    def test_severity_override(self) -> None:
        config = LinterConfig(severityOverrides={"order-by-disallowed": "warning"})
        diagnostics = {d.code: d for d in validate_text(MESSY_SQL, config)}
        self.assertEqual(diagnostics["order-by-disallowed"].severity, Severity.WARNING)
        self.assertEqual(diagnostics["count-star-disallowed"].severity, Severity.ERROR)


class SqlValidatorTests(unittest.TestCase):
    """Tests for SqlValidator and its sink."""

    def setUp(self) -> None:
        self.collection = DiagnosticCollection()
        self.validator = SqlValidator(self.collection)
        self.document = Document(uri="file:///messy.sql", text=MESSY_SQL)

    def test_rules_are_registered_in_order(self) -> None:
        self.assertEqual(
            list(list_rules()),
            [
                "require-use-statement",
                "require-three-part-naming",
                "disallow-or-operator",
                "disallow-order-by",
                "disallow-count-star",
            ],
        )
        self.assertEqual([rule.rule_id for rule in self.validator.rules], list(list_rules()))

    def test_validate_publishes_full_list(self) -> None:
        diagnostics = self.validator.validate(self.document)
        self.assertEqual(self.collection.get(self.document.uri), tuple(diagnostics))
        self.assertEqual(len(diagnostics), len(ALL_CODES))

    def test_repeated_passes_are_identical(self) -> None:
        first = self.validator.validate(self.document)
        second = self.validator.validate(self.document)
        self.assertEqual(first, second)
        self.assertEqual([d.to_dict() for d in first], [d.to_dict() for d in second])

    def test_config_is_read_on_every_pass(self) -> None:
        self.validator.validate(self.document, LinterConfig(disallowOrOperator=False))
        codes = [d.code for d in self.collection.get(self.document.uri)]
        self.assertNotIn("or-operator-disallowed", codes)

        self.validator.validate(self.document, LinterConfig())
        codes = [d.code for d in self.collection.get(self.document.uri)]
        self.assertIn("or-operator-disallowed", codes)

    def test_new_pass_replaces_previous_diagnostics(self) -> None:
        self.validator.validate(self.document)
        fixed = Document(uri=self.document.uri, text="USE [db];\nSELECT a FROM [db].[dbo].[t]")
        self.assertEqual(self.validator.validate(fixed), [])
        self.assertEqual(self.collection.get(self.document.uri), ())
        self.assertIn(self.document.uri, self.collection)

    def test_document_from_path_strips_byte_order_mark(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bom.sql"
            path.write_text("\ufeffUSE [Sales];\r\nSELECT a FROM [Sales].[dbo].[t];\r\n", encoding="utf-8")
            document = Document.from_path(path)
        self.assertEqual(document.lines[0], "USE [Sales];")
        self.assertEqual(self.validator.validate(document), [])

    def test_non_sql_documents_are_ignored(self) -> None:
        document = Document(uri="file:///notes.md", text="ORDER BY", language_id="markdown")
        self.assertEqual(self.validator.validate(document), [])
        self.assertNotIn(document.uri, self.collection)

    def test_clear_and_clear_all(self) -> None:
        other = Document(uri="file:///other.sql", text="SELECT 1")
        self.validator.validate(self.document)
        self.validator.validate(other)
        self.assertEqual(len(self.collection), 2)

        self.validator.clear(self.document)
        self.assertEqual(self.collection.uris(), [other.uri])

        self.validator.clear_all()
        self.assertEqual(len(self.collection), 0)

    def test_diagnostic_to_dict(self) -> None:
        diagnostic = self.validator.validate(self.document)[-1]
        self.assertEqual(
            diagnostic.to_dict(),
            {
                "code": "count-star-disallowed",
                "severity": "error",
                "message": "COUNT(*) is not allowed. Specify a column name instead.",
                "source": "SQL DBA Linter",
                "range": {
                    "start": {"line": 0, "character": 7},
                    "end": {"line": 0, "character": 15},
                },
            },
        )


if __name__ == "__main__":
    unittest.main()

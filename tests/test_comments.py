"""Unit tests for comment tracking."""

import unittest

from sqldbalint.core.comments import iter_live_lines, mask, update


class UpdateTests(unittest.TestCase):
    """Tests for the single-line comment scanner."""

    # --- Line comments ---

    def test_plain_code_is_live(self) -> None:
        scan = update("SELECT 1", False)
        self.assertEqual(scan.live, ((0, 8),))
        self.assertFalse(scan.in_block_comment)

    def test_line_comment_suppresses_whole_line(self) -> None:
        scan = update("   -- SELECT * FROM t /* not a block", False)
        self.assertEqual(scan.live, ())
        self.assertFalse(scan.in_block_comment)

    def test_trailing_line_comment_keeps_code_before_marker(self) -> None:
        scan = update("SELECT 1 -- note", False)
        self.assertEqual(scan.live, ((0, 9),))

    def test_marker_inside_string_is_still_a_comment(self) -> None:
        """Comment detection is lexical; string literals are not recognised."""
        scan = update("SELECT '--' AS x", False)
        self.assertEqual(scan.live, ((0, 8),))

    # --- Block comments ---

    def test_unterminated_block_comment_carries_state(self) -> None:
        scan = update("SELECT 1 /* start", False)
        self.assertEqual(scan.live, ((0, 9),))
        self.assertTrue(scan.in_block_comment)

    def test_line_inside_block_comment_is_suppressed(self) -> None:
        scan = update("SELECT * FROM t", True)
        self.assertEqual(scan.live, ())
        self.assertTrue(scan.in_block_comment)

    def test_text_after_terminator_is_live(self) -> None:
        scan = update("end */ SELECT 2", True)
        self.assertEqual(scan.live, ((6, 15),))
        self.assertFalse(scan.in_block_comment)

    def test_single_line_block_comment(self) -> None:
        scan = update("SELECT a /* x */ , b", False)
        self.assertEqual(scan.live, ((0, 9), (16, 20)))
        self.assertFalse(scan.in_block_comment)

    def test_terminator_then_line_comment(self) -> None:
        scan = update("*/-- FROM table1", True)
        self.assertEqual(scan.live, ())
        self.assertFalse(scan.in_block_comment)

    def test_line_comment_line_still_closes_block(self) -> None:
        scan = update("-- */ SELECT 1", True)
        self.assertEqual(scan.live, ())
        self.assertFalse(scan.in_block_comment)

    def test_opener_characters_do_not_close(self) -> None:
        scan = update("/*/ SELECT 1", False)
        self.assertEqual(scan.live, ())
        self.assertTrue(scan.in_block_comment)


class MaskTests(unittest.TestCase):
    """Tests for masking commented text."""

    def test_mask_preserves_columns(self) -> None:
        self.assertEqual(mask("abcdef", [(1, 3)]), " bc   ")

    def test_mask_with_no_spans_blanks_line(self) -> None:
        self.assertEqual(mask("abc", []), "   ")


class IterLiveLinesTests(unittest.TestCase):
    """Tests for the comment state fold over a document."""

    def test_state_threads_across_lines(self) -> None:
        lines = ["/*", "FROM x", "*/ SELECT 1", "-- c", "SELECT 2"]
        self.assertEqual(
            list(iter_live_lines(lines)),
            [(2, "   SELECT 1"), (4, "SELECT 2")],
        )

    def test_empty_document(self) -> None:
        self.assertEqual(list(iter_live_lines([""])), [])

    def test_each_call_starts_outside_comments(self) -> None:
        lines = ["/* open", "SELECT 1"]
        self.assertEqual(list(iter_live_lines(lines)), [])
        self.assertEqual(list(iter_live_lines(["SELECT 1"])), [(0, "SELECT 1")])


if __name__ == "__main__":
    unittest.main()

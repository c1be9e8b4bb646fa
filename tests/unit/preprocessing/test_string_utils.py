"""
Unit tests for string-literal aware scanning.
"""

import unittest

from jsonhealer.preprocessing.string_utils import (
    CharRole,
    StringStateTracker,
    classify_quotes,
    find_string_end,
    is_escaped,
    is_inside_string,
    iterate_with_string_tracking,
)


class TestIsEscaped(unittest.TestCase):
    """Test backslash parity decisions."""

    def test_single_backslash_escapes(self) -> None:
        """Test that a single backslash escapes."""
        self.assertTrue(is_escaped('a\\"', 2))

    def test_double_backslash_does_not_escape(self) -> None:
        """Two backslashes escape each other, leaving the quote live."""
        self.assertFalse(is_escaped('a\\\\"', 3))

    def test_triple_backslash_escapes(self) -> None:
        """Test that an odd backslash run escapes."""
        self.assertTrue(is_escaped('\\\\\\"', 3))

    def test_start_of_text(self) -> None:
        """Test a quote at the start of text."""
        self.assertFalse(is_escaped('"abc"', 0))


class TestStringStateTracker(unittest.TestCase):
    """Test the incremental string tracker."""

    def test_tracks_double_quoted_string(self) -> None:
        """Test string state across a double-quoted string."""
        text = '{"a": 1}'
        tracker = StringStateTracker()
        states = [tracker.update(text, i) for i in range(len(text))]
        self.assertEqual(states, [False, True, True, False, False, False, False, False])

    def test_escaped_quote_stays_inside(self) -> None:
        """Test that an escaped quote does not close the string."""
        text = '"a\\"b"'
        tracker = StringStateTracker()
        states = [tracker.update(text, i) for i in range(len(text))]
        self.assertEqual(states, [True, True, True, True, True, False])

    def test_even_backslash_run_closes_string(self) -> None:
        """Test that a quote after an even backslash run closes the string."""
        text = '"a\\\\" x'
        tracker = StringStateTracker()
        for i in range(5):
            tracker.update(text, i)
        self.assertFalse(tracker.in_string)

    def test_other_quote_kind_is_content(self) -> None:
        """Test that the other quote kind is content inside a string."""
        text = "\"it's\" x"
        tracker = StringStateTracker("\"'")
        for i in range(6):
            tracker.update(text, i)
        self.assertFalse(tracker.in_string)

    def test_single_quotes_ignored_by_default(self) -> None:
        """Test that single quotes are ignored by default."""
        tracker = StringStateTracker()
        self.assertFalse(tracker.update("'a'", 0))

    def test_reset(self) -> None:
        """Test resetting the tracker."""
        tracker = StringStateTracker()
        tracker.update('"', 0)
        self.assertTrue(tracker.in_string)
        tracker.reset()
        self.assertFalse(tracker.in_string)
        self.assertIsNone(tracker.string_char)


class TestScanHelpers(unittest.TestCase):
    """Test the helper functions built on the tracker."""

    def test_iterate_with_string_tracking(self) -> None:
        """Test iteration with string state."""
        self.assertEqual(
            list(iterate_with_string_tracking('"a"')),
            [(0, '"', True), (1, "a", True), (2, '"', False)],
        )

    def test_is_inside_string(self) -> None:
        """Test point queries for string membership."""
        text = '{"a": 1}'
        self.assertTrue(is_inside_string(text, 2))
        self.assertFalse(is_inside_string(text, 1))  # the quote itself
        self.assertFalse(is_inside_string(text, 6))

    def test_is_inside_string_past_end_reports_unterminated(self) -> None:
        """Test that a query past the end reports an unterminated string."""
        self.assertTrue(is_inside_string('{"a', 3))
        self.assertFalse(is_inside_string('{"a"', 4))

    def test_find_string_end(self) -> None:
        """Test finding the closing quote past escapes."""
        self.assertEqual(find_string_end('"ab\\"c"', 0), 6)
        self.assertEqual(find_string_end("x 'y'", 2), 4)

    def test_find_string_end_unterminated(self) -> None:
        """Test that unterminated or missing strings report -1."""
        self.assertEqual(find_string_end('"abc', 0), -1)
        self.assertEqual(find_string_end("abc", 0), -1)

    def test_classify_quotes(self) -> None:
        """Test per-character quote roles."""
        self.assertEqual(
            classify_quotes('"a" b'),
            [
                CharRole.OPEN_QUOTE,
                CharRole.CONTENT,
                CharRole.CLOSE_QUOTE,
                CharRole.OUTSIDE,
                CharRole.OUTSIDE,
            ],
        )

    def test_classify_quotes_escaped_quote_is_content(self) -> None:
        """Test that an escaped quote is classified as content."""
        roles = classify_quotes('"\\""')
        self.assertEqual(roles[2], CharRole.CONTENT)
        self.assertEqual(roles[3], CharRole.CLOSE_QUOTE)


if __name__ == "__main__":
    unittest.main()

"""
Test cases for bracket balancing.
"""

import unittest

from jsonhealer.preprocessing.balancer import BracketBalancer, BracketCounts, count_brackets


class TestBracketBalancer(unittest.TestCase):
    """Test closer insertion and stray closer removal."""

    def setUp(self):
        self.balancer = BracketBalancer()

    def test_appends_missing_closers_innermost_first(self):
        """Test that missing closers are appended innermost first."""
        self.assertEqual(self.balancer.process('{"a": [1, 2'), '{"a": [1, 2]}')

    def test_removes_extra_closers(self):
        """Test removal of extra closers."""
        self.assertEqual(self.balancer.process('{"a": 1}}'), '{"a": 1}')
        self.assertEqual(self.balancer.process("[1, 2, 3]]"), "[1, 2, 3]")

    def test_removes_leading_stray_closer(self):
        """Test removal of a closer before any opener."""
        self.assertEqual(self.balancer.process("]{}"), "{}")

    def test_brackets_in_strings_ignored(self):
        """Test that brackets inside strings are not balanced."""
        self.assertEqual(self.balancer.process('{"a": "}"'), '{"a": "}"}')

    def test_strips_whitespace(self):
        """Test that surrounding whitespace is stripped."""
        self.assertEqual(self.balancer.process('  [1  '), "[1]")

    def test_balanced_unchanged(self):
        """Test that balanced input is returned unchanged."""
        text = '{"a": [{"b": []}]}'
        self.assertEqual(self.balancer.process(text), text)


class TestCountBrackets(unittest.TestCase):
    """Test bracket counting outside strings."""

    def test_counts(self):
        """Test bracket counts for unbalanced input."""
        self.assertEqual(count_brackets("[["), BracketCounts(0, 0, 2, 0))
        self.assertFalse(count_brackets("[[").balanced)

    def test_strings_ignored(self):
        """Test that brackets inside strings are not counted."""
        counts = count_brackets('{"a": "{["}')
        self.assertEqual(counts, BracketCounts(1, 1, 0, 0))
        self.assertTrue(counts.balanced)


if __name__ == "__main__":
    unittest.main()

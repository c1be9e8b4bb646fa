"""
Test cases for key repair and broken string closing.
"""

import unittest

from jsonhealer.preprocessing.repairers import (
    BrokenStringCloser,
    MissingColonFixer,
    UnquotedKeyFixer,
)


class TestUnquotedKeyFixer(unittest.TestCase):
    """Test quoting of bare identifier keys."""

    def setUp(self):
        self.fixer = UnquotedKeyFixer()

    def test_simple_keys(self):
        """Test quoting simple identifier keys."""
        self.assertEqual(
            self.fixer.process('{name: "x", age: 1}'), '{"name": "x", "age": 1}'
        )

    def test_underscore_and_dollar(self):
        """Test quoting keys with underscores and dollar signs."""
        self.assertEqual(
            self.fixer.process("{_id: 1, $ref: 2}"), '{"_id": 1, "$ref": 2}'
        )

    def test_space_before_colon(self):
        """Test quoting a key with a space before its colon."""
        self.assertEqual(self.fixer.process("{name : 1}"), '{"name": 1}')

    def test_multiline_keys(self):
        """Test quoting keys on separate lines."""
        self.assertEqual(
            self.fixer.process("{\n  a: 1,\n  b: 2\n}"), '{\n  "a": 1,\n  "b": 2\n}'
        )

    def test_colons_inside_strings_untouched(self):
        """Test that colons inside strings do not create keys."""
        text = '{"time": "at: 12", "b: c": 1}'
        self.assertEqual(self.fixer.process(text), text)

    def test_quoted_keys_untouched(self):
        """Test that quoted keys are left alone."""
        text = '{"a": 1, "b": 2}'
        self.assertEqual(self.fixer.process(text), text)


class TestMissingColonFixer(unittest.TestCase):
    """Test colon insertion between keys and values."""

    def setUp(self):
        self.fixer = MissingColonFixer()

    def test_number_value(self):
        """Test colon insertion before a number."""
        self.assertEqual(self.fixer.process('{"a" 1}'), '{"a": 1}')

    def test_string_value(self):
        """Test colon insertion before a string."""
        self.assertEqual(self.fixer.process('{"a" "b"}'), '{"a": "b"}')

    def test_after_comma(self):
        """Test colon insertion for a key that follows a comma.
test_aggressive_repair_direct"""
        self.assertEqual(
            self.fixer.process('{"a": 1, "b" true}'), '{"a": 1, "b": true}'
        )

    def test_arrays_untouched(self):
        """Test that strings inside arrays never get a colon."""
        self.assertEqual(self.fixer.process('["a" "b"]'), '["a" "b"]')

    def test_existing_colon_untouched(self):
        """Test that keys with colons are left alone."""
        text = '{"a": {"b": [1, 2]}}'
        self.assertEqual(self.fixer.process(text), text)


class TestBrokenStringCloser(unittest.TestCase):
    """Test termination of unclosed strings."""

    def setUp(self):
        self.closer = BrokenStringCloser()

    def test_closes_before_next_pair(self):
        """Test that a string is closed before the next key-value pair."""
        self.assertEqual(
            self.closer.process('{"name": "Test, "age": 30}'),
            '{"name": "Test", "age": 30}',
        )

    def test_closes_at_end(self):
        """Test that a string open at end of input is closed."""
        self.assertEqual(self.closer.process('{"name": "Test}'), '{"name": "Test}"')

    def test_dangling_backslash_dropped(self):
        """Test that a dangling backslash does not escape the added quote."""
        self.assertEqual(self.closer.process('{"a": "x\\'), '{"a": "x"')

    def test_escaped_backslash_kept(self):
        """Test that an escaped backslash before end of input is kept."""
        self.assertEqual(self.closer.process('["x\\\\'), '["x\\\\"')

    def test_well_formed_unchanged(self):
        """Test that well-formed strings are left alone."""
        text = '{"a": "x, y", "b": 1}'
        self.assertEqual(self.closer.process(text), text)

    def test_key_shaped_content_is_split_known_limit(self):
        """Test the known heuristic limit: content shaped like , "key": ends the string."""
        self.assertEqual(
            self.closer.process('{"quote": "she said, "yes": then left"}'),
            '{"quote": "she said", "yes": then left"}"',
        )

    def test_escaped_key_shaped_content_kept(self):
        """Test that escaped quotes keep key-shaped content inside the string."""
        text = '{"t": "a, \\"b\\": c"}'
        self.assertEqual(self.closer.process(text), text)


if __name__ == "__main__":
    unittest.main()

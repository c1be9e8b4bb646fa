"""
Key and string repair transformations.

This module contains steps that repair object keys and string literals:
quoting bare identifiers, inserting missing colons and terminating strings
that were never closed.
"""

import re

from .base import TransformationBase
from .string_utils import StringStateTracker, find_string_end, is_escaped

UNQUOTED_KEY_PATTERN = re.compile(r"(\s*)([A-Za-z_$][\w$]*)\s*:", re.ASCII)
VALUE_START_PATTERN = re.compile(r'(\s*)[\[{"\dtfn-]')
KEY_VALUE_AHEAD_PATTERN = re.compile(r',\s*"[^"]+"\s*:')


class UnquotedKeyFixer(TransformationBase):
    """Wraps bare identifier keys in double quotes."""

    name = "fix_unquoted_keys"

    def process(self, text: str) -> str:
        result: list[str] = []
        tracker = StringStateTracker()
        last_significant = ""
        i = 0

        while i < len(text):
            char = text[i]

            if not tracker.in_string and last_significant in ("{", ","):
                match = UNQUOTED_KEY_PATTERN.match(text, i)
                if match:
                    whitespace, key = match.group(1), match.group(2)
                    result.append(f'{whitespace}"{key}":')
                    last_significant = ":"
                    i = match.end()
                    continue

            tracker.update(text, i)
            result.append(char)
            if not char.isspace():
                last_significant = char
            i += 1

        return "".join(result)


class MissingColonFixer(TransformationBase):
    """Inserts the colon between an object key and its value."""

    name = "fix_missing_colons"

    def process(self, text: str) -> str:
        result: list[str] = []
        tracker = StringStateTracker()
        containers: list[str] = []
        last_structural = ""
        i = 0

        while i < len(text):
            char = text[i]

            if tracker.in_string or tracker.is_delimiter(text, i):
                if not tracker.in_string and self._at_key_position(
                    containers, last_structural
                ):
                    end = find_string_end(text, i)
                    match = VALUE_START_PATTERN.match(text, end + 1) if end != -1 else None
                    if match:
                        whitespace = match.group(1)
                        result.append(text[i : end + 1] + ":" + whitespace)
                        last_structural = ":"
                        i = end + 1 + len(whitespace)
                        continue
                tracker.update(text, i)
                result.append(char)
                i += 1
                continue

            if char in "{[":
                containers.append(char)
            elif char in "}]" and containers:
                containers.pop()
            if char in "{}[],:":
                last_structural = char

            result.append(char)
            i += 1

        return "".join(result)

    @staticmethod
    def _at_key_position(containers: list[str], last_structural: str) -> bool:
        """A string is a key when it follows { or , directly inside an object."""
        return bool(containers) and containers[-1] == "{" and last_structural in ("{", ",")


class BrokenStringCloser(TransformationBase):
    """
    Terminates strings that were never closed.

    While inside a string, a comma followed by something shaped like a new
    key-value pair (, "key":) is taken as the point where the string should
    have ended. This is a heuristic: a string whose real content contains
    , "word": is split there as well.
    """

    name = "close_broken_strings"

    def process(self, text: str) -> str:
        result: list[str] = []
        tracker = StringStateTracker()
        i = 0

        while i < len(text):
            char = text[i]

            if (
                tracker.in_string
                and char == ","
                and KEY_VALUE_AHEAD_PATTERN.match(text, i)
            ):
                # Close the string here and reprocess the comma outside it
                result.append('"')
                tracker.reset()
                continue

            tracker.update(text, i)
            result.append(char)
            i += 1

        if tracker.in_string:
            repaired = "".join(result)
            # A dangling backslash would escape the synthesized quote
            if is_escaped(repaired + '"', len(repaired)):
                repaired = repaired[:-1]
            return repaired + '"'

        return "".join(result)

"""
Normalization transformations.

This module contains steps that rewrite string literals into standard JSON
form: quote style and control character escaping.
"""

from ..core.constants import CONTROL_CHAR_ESCAPES
from .base import TransformationBase
from .string_utils import StringStateTracker, is_escaped


class QuoteNormalizer(TransformationBase):
    """Converts single-quoted strings to double-quoted strings."""

    name = "fix_single_quotes"

    def process(self, text: str) -> str:
        """Normalize quotes when single quotes are the dominant delimiter."""
        # Buffers that already use double quotes keep their apostrophes
        if text.count("'") <= text.count('"'):
            return text

        result: list[str] = []
        in_string = False
        string_char = None
        i = 0

        while i < len(text):
            char = text[i]

            if in_string and char == "\\" and i + 1 < len(text):
                next_char = text[i + 1]
                if string_char == "'" and next_char == "'":
                    result.append("'")
                else:
                    result.append(char + next_char)
                i += 2
                continue

            if char in "\"'":
                if not in_string:
                    if is_escaped(text, i):
                        result.append(char)
                    else:
                        in_string = True
                        string_char = char
                        result.append('"')
                elif char == string_char:
                    in_string = False
                    string_char = None
                    result.append('"')
                elif char == '"':
                    result.append('\\"')
                else:
                    result.append(char)
                i += 1
                continue

            result.append(char)
            i += 1

        return "".join(result)


class ControlCharacterEscaper(TransformationBase):
    """Escapes raw control characters inside string literals."""

    name = "escape_control_characters"

    def process(self, text: str) -> str:
        result: list[str] = []
        tracker = StringStateTracker()

        for i, char in enumerate(text):
            delimiter = tracker.is_delimiter(text, i)
            tracker.update(text, i)
            if tracker.in_string and not delimiter and ord(char) < 0x20:
                result.append(CONTROL_CHAR_ESCAPES.get(char, f"\\u{ord(char):04x}"))
            else:
                result.append(char)

        return "".join(result)

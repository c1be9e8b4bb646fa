"""
Special content handlers.

This module contains transformations that remove or rewrite non-JSON syntax
found outside string literals: comments and Python/JavaScript literals.
"""

import re

from ..core.constants import LITERAL_REPLACEMENTS
from .base import TransformationBase
from .string_utils import StringStateTracker

LITERAL_MAP = dict(LITERAL_REPLACEMENTS)
LITERAL_PATTERN = re.compile(
    "(?:"
    + "|".join(
        re.escape(token) for token in sorted(LITERAL_MAP, key=len, reverse=True)
    )
    + r")\b"
)


class CommentHandler(TransformationBase):
    """Removes comments from JSON text."""

    name = "remove_comments"

    def process(self, text: str) -> str:
        """Remove single-line and multi-line comments from JSON."""
        result: list[str] = []
        tracker = StringStateTracker("\"'")
        i = 0

        while i < len(text):
            char = text[i]
            next_char = text[i + 1] if i + 1 < len(text) else ""

            if tracker.in_string or tracker.is_delimiter(text, i):
                tracker.update(text, i)
                result.append(char)
                i += 1
                continue

            if char == "/" and next_char == "/":
                # Single-line comment, the newline itself is kept
                while i < len(text) and text[i] != "\n":
                    i += 1
            elif char == "/" and next_char == "*":
                end = text.find("*/", i + 2)
                i = len(text) if end == -1 else end + 2
                # Keep tokens on both sides apart
                has_space_before = bool(result) and result[-1].isspace()
                has_space_after = i < len(text) and text[i].isspace()
                if result and i < len(text) and not (has_space_before or has_space_after):
                    result.append(" ")
            else:
                result.append(char)
                i += 1

        return "".join(result)


class LiteralHandler(TransformationBase):
    """Rewrites Python and JavaScript literals to their JSON spelling."""

    name = "fix_python_literals"

    def process(self, text: str) -> str:
        result: list[str] = []
        tracker = StringStateTracker("\"'")
        i = 0

        while i < len(text):
            if tracker.in_string or tracker.is_delimiter(text, i):
                tracker.update(text, i)
                result.append(text[i])
                i += 1
                continue

            match = LITERAL_PATTERN.match(text, i) if self._at_word_start(text, i) else None
            if match:
                result.append(LITERAL_MAP[match.group(0)])
                i = match.end()
                continue

            result.append(text[i])
            i += 1

        return "".join(result)

    @staticmethod
    def _at_word_start(text: str, pos: int) -> bool:
        """Check that no identifier character precedes pos."""
        if pos == 0:
            return True
        prev = text[pos - 1]
        return not (prev.isalnum() or prev in "_$")

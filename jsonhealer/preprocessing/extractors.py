"""
Content extraction transformations.

This module contains the steps that locate the JSON payload inside markdown
code blocks or surrounding prose before any repair runs.
"""

import re

from ..core.constants import CLOSER_FOR
from .base import TransformationBase
from .string_utils import StringStateTracker, is_inside_string

JSON_FENCE_PATTERN = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)
ANY_FENCE_PATTERN = re.compile(r"```[\w+-]*\s*(.*?)\s*```", re.DOTALL)
INLINE_CODE_PATTERN = re.compile(r"`([^`]+)`")


class MarkdownExtractor(TransformationBase):
    """Extracts JSON from markdown code blocks."""

    name = "extract_from_markdown"

    def process(self, text: str) -> str:
        """Extract JSON from markdown code blocks."""
        return self._extract_from_code_blocks(text)

    @staticmethod
    def _extract_from_code_blocks(text: str) -> str:
        """Return the first fenced block that looks like JSON, json-tagged first."""
        for pattern in (JSON_FENCE_PATTERN, ANY_FENCE_PATTERN):
            for match in pattern.finditer(text):
                content = match.group(1).strip()
                if content.startswith(("{", "[")):
                    return content

        # Inline code blocks (`...`), only when nothing was fenced
        if "```" not in text:
            for match in INLINE_CODE_PATTERN.finditer(text):
                content = match.group(1).strip()
                if content.startswith(("{", "[")):
                    return content

        return text


class MixedTextExtractor(TransformationBase):
    """Extracts the first JSON object or array from surrounding prose."""

    name = "extract_from_mixed_text"

    def process(self, text: str) -> str:
        trimmed = text.strip()

        obj_start = trimmed.find("{")
        arr_start = trimmed.find("[")
        if obj_start == -1 and arr_start == -1:
            return text

        if arr_start == -1 or (obj_start != -1 and obj_start < arr_start):
            start = obj_start
        else:
            start = arr_start
        open_char = trimmed[start]
        close_char = CLOSER_FOR[open_char]

        end = find_matching_bracket(trimmed, start, open_char, close_char)
        if end != -1:
            return trimmed[start : end + 1]

        body = trimmed[start:]
        last_end = body.rfind(close_char)
        while last_end > 0 and is_inside_string(body, last_end):
            last_end = body.rfind(close_char, 0, last_end)
        if last_end > 0:
            return body[: last_end + 1]

        # Leave the missing closer to the bracket balancer
        return body


def find_matching_bracket(text: str, start: int, open_char: str, close_char: str) -> int:
    """
    Find the closer that matches the opener at start.

    Only brackets of the given kind outside strings are counted.

    Returns:
        Index of the matching closer, or -1 if the structure never closes
    """
    depth = 0
    tracker = StringStateTracker()

    for i in range(start, len(text)):
        if tracker.update(text, i):
            continue
        char = text[i]
        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return i

    return -1
